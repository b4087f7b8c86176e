"""Data objects describing a native-module schema.

The schema is produced and validated upstream, so the `from_dict` factories
below only convert its JSON shape into dataclasses. A malformed document
surfaces as the `KeyError` or `TypeError` of the offending access.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cxx_module_header_generator.cxx_types import TypeAnnotationKind

# Alias name -> object shape annotation, one table per module.
AliasTable = dict[str, "TypeAnnotation"]


@dataclass(frozen=True)
class ObjectProperty:
    """A property of an object shape annotation."""

    name: str
    type_annotation: TypeAnnotation
    optional: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ObjectProperty:
        return cls(
            name=raw["name"],
            type_annotation=TypeAnnotation.from_dict(raw["typeAnnotation"]),
            optional=raw.get("optional", False),
        )


@dataclass(frozen=True)
class TypeAnnotation:
    """A tagged type annotation of the schema's own type vocabulary.

    Attributes:
        type: The variant tag, e.g. `VoidTypeAnnotation`. Tags unknown to this
            package are kept as they are, so the writer can reject them.
        name: The reserved name of a reserved function value annotation, or the
            alias name of a type alias annotation.
        properties: The properties of an object shape.
        element_type: The element type of an array, if declared.
    """

    type: str
    name: str | None = None
    properties: tuple[ObjectProperty, ...] = ()
    element_type: TypeAnnotation | None = None

    @property
    def is_alias(self) -> bool:
        return self.type == TypeAnnotationKind.TYPE_ALIAS

    @property
    def is_reserved(self) -> bool:
        return self.type == TypeAnnotationKind.RESERVED_FUNCTION_VALUE

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TypeAnnotation:
        element_type = raw.get("elementType")
        return cls(
            type=raw["type"],
            name=raw.get("name"),
            properties=tuple(ObjectProperty.from_dict(p) for p in raw.get("properties", ())),
            element_type=cls.from_dict(element_type) if element_type else None,
        )


@dataclass(frozen=True)
class Parameter:
    """A named, typed parameter of a method."""

    name: str
    type_annotation: TypeAnnotation

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Parameter:
        return cls(name=raw["name"], type_annotation=TypeAnnotation.from_dict(raw["typeAnnotation"]))


@dataclass(frozen=True)
class Method:
    """A method exposed by a native module."""

    name: str
    params: tuple[Parameter, ...]
    return_type_annotation: TypeAnnotation

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Method:
        """Create a method from a schema property.

        The property carries a function type annotation, which holds both the
        parameters and the return type.
        """
        function_annotation = raw["typeAnnotation"]
        return cls(
            name=raw["name"],
            params=tuple(Parameter.from_dict(p) for p in function_annotation["params"]),
            return_type_annotation=TypeAnnotation.from_dict(function_annotation["returnTypeAnnotation"]),
        )


@dataclass(frozen=True)
class ModuleSpec:
    """A native module: its alias table and its methods in declaration order."""

    name: str
    aliases: AliasTable = field(default_factory=dict)
    methods: tuple[Method, ...] = ()

    @classmethod
    def from_dict(cls, name: str, raw: Mapping[str, Any]) -> ModuleSpec:
        return cls(
            name=name,
            aliases={alias: TypeAnnotation.from_dict(shape) for alias, shape in raw.get("aliases", {}).items()},
            methods=tuple(Method.from_dict(p) for p in raw["properties"]),
        )


@dataclass(frozen=True)
class Schema:
    """The top-level schema.

    Attributes:
        modules: Schema file name -> module name -> module spec. A file that
            declares no native modules maps to `None`.
    """

    modules: dict[str, dict[str, ModuleSpec] | None] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Schema:
        modules: dict[str, dict[str, ModuleSpec] | None] = {}
        for file_name, file_entry in raw["modules"].items():
            native_modules = file_entry.get("nativeModules")
            if native_modules is None:
                modules[file_name] = None
                continue

            modules[file_name] = {
                name: ModuleSpec.from_dict(name, module) for name, module in native_modules.items()
            }

        return cls(modules=modules)

    def native_modules(self) -> dict[str, ModuleSpec]:
        """Flatten all native modules of all schema files into one mapping.

        Files without native modules are skipped. A module name declared by a
        later file replaces the earlier spec but keeps its position.

        Returns:
            dict[str, ModuleSpec]: Module name -> module spec, in encounter order.
        """
        flattened: dict[str, ModuleSpec] = {}
        for file_modules in self.modules.values():
            if file_modules is None:
                continue
            flattened.update(file_modules)
        return flattened
