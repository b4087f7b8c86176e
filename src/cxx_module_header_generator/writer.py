"""Generate a C++ interface header for the native modules of a schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cxx_module_header_generator import cxx_types
from cxx_module_header_generator.helper import Template
from cxx_module_header_generator.schema import AliasTable, Method, ModuleSpec, TypeAnnotation

logger = logging.getLogger(__name__)

OUTPUT_FILE_NAME = "NativeModules.h"

PROPERTY_TEMPLATE = Template("virtual ::_RETURN_VALUE_:: ::_PROPERTY_NAME_::(::_ARGS_::) = 0;")

MODULE_TEMPLATE = Template(
    """
class JSI_EXPORT Native::_MODULE_NAME_::CxxSpecJSI : public TurboModule {
protected:
  Native::_MODULE_NAME_::CxxSpecJSI(std::shared_ptr<CallInvoker> jsInvoker);

public:
::_MODULE_PROPERTIES_::

};"""
)

FILE_TEMPLATE = Template(
    """
/**
 * Copyright (c) Facebook, Inc. and its affiliates.
 *
 * This source code is licensed under the MIT license found in the
 * LICENSE file in the root directory of this source tree.
 */

#pragma once

#include <ReactCommon/TurboModule.h>

namespace facebook {
namespace react {
::_MODULES_::

} // namespace react
} // namespace facebook
"""
)


class UnsupportedTypeError(Exception):
    """Raised when a type annotation has no C++ counterpart.

    Attributes:
        context (str): The construct the annotation belongs to, e.g. `param "x" in bar`.
        type_name (str): The tag or reserved name that could not be mapped.
    """

    def __init__(self, context: str, type_name: str):
        self.context = context
        self.type_name = type_name
        super().__init__(f"Unsupported type for {context}. Found: {type_name}")


def param_context(param_name: str, method_name: str) -> str:
    return f'param "{param_name}" in {method_name}'


def return_context(method_name: str) -> str:
    return f"return type of {method_name}"


class Writer:
    """A class that renders the header for a set of native modules."""

    def __init__(self, native_modules: Mapping[str, ModuleSpec]):
        """Initialize the writer.

        Args:
            native_modules (Mapping[str, ModuleSpec]): Module name -> module spec. Blocks are
                written in the iteration order of this mapping.
        """
        self._native_modules = native_modules

    @staticmethod
    def resolve_type(annotation: TypeAnnotation, aliases: AliasTable) -> TypeAnnotation:
        """Replace a type alias annotation by the shape it refers to.

        Only a single hop is resolved. Aliases nested inside the resolved shape are left as they are.

        Args:
            annotation (TypeAnnotation): The annotation to resolve.
            aliases (AliasTable): The alias table of the module that owns the annotation.

        Returns:
            TypeAnnotation: The resolved annotation.
        """
        if annotation.is_alias:
            return aliases[annotation.name]
        return annotation

    def map_type(self, annotation: TypeAnnotation, aliases: AliasTable, context: str) -> cxx_types.CxxType:
        """Map a type annotation to a C++ type.

        Args:
            annotation (TypeAnnotation): The annotation, possibly a type alias.
            aliases (AliasTable): The alias table of the module that owns the annotation.
            context (str): Describes where the annotation was found, for error messages.

        Raises:
            UnsupportedTypeError: If there is no C++ type for the annotation.

        Returns:
            cxx_types.CxxType: The C++ type.
        """
        resolved = self.resolve_type(annotation, aliases)

        if resolved.is_reserved:
            try:
                return cxx_types.RESERVED_NAME_TO_CXX[resolved.name]
            except KeyError:
                raise UnsupportedTypeError(context, str(resolved.name)) from None

        try:
            return cxx_types.ANNOTATION_TO_CXX[resolved.type]
        except KeyError:
            raise UnsupportedTypeError(context, resolved.type) from None

    def gen_signature(self, method: Method, aliases: AliasTable) -> str:
        """Generate the pure virtual declaration of a method.

        Args:
            method (Method): The method to declare.
            aliases (AliasTable): The alias table of the module that owns the method.

        Returns:
            str: E.g. `virtual void bar(jsi::Runtime &rt, double x) = 0;`.
        """
        return_type = self.map_type(method.return_type_annotation, aliases, return_context(method.name))

        args = [cxx_types.RUNTIME_PARAM]
        for param in method.params:
            param_type = self.map_type(param.type_annotation, aliases, param_context(param.name, method.name))
            args.append(param_type.as_param(param.name))

        return PROPERTY_TEMPLATE.render(
            return_value=return_type.name,
            property_name=method.name,
            args=", ".join(args),
        )

    def gen_module(self, module_spec: ModuleSpec, module_name: str | None = None) -> str:
        """Generate the interface class of a single module.

        Args:
            module_spec (ModuleSpec): The module.
            module_name (str | None): The name the module is registered under. Defaults to the
                name of the spec.

        Returns:
            str: The class block, with one declaration per method in declaration order.
        """
        module_name = module_name or module_spec.name
        logger.debug("Generating interface for module '%s' (%d method(s)).", module_name, len(module_spec.methods))

        signatures = [self.gen_signature(method, module_spec.aliases) for method in module_spec.methods]

        return MODULE_TEMPLATE.render(
            module_name=module_name,
            module_properties="\n".join(signatures),
        )

    def dumps(self) -> str:
        """Render the complete header.

        Returns:
            str: The header text.
        """
        blocks = [self.gen_module(module_spec, name) for name, module_spec in self._native_modules.items()]
        return FILE_TEMPLATE.render(modules="\n".join(blocks))
