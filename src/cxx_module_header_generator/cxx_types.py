"""Type definitions shared by the schema model and the header writer."""

from __future__ import annotations

from dataclasses import dataclass


class TypeAnnotationKind:
    """Tags of the type annotations found in a native-module schema."""

    RESERVED_FUNCTION_VALUE = "ReservedFunctionValueTypeAnnotation"
    VOID = "VoidTypeAnnotation"
    STRING = "StringTypeAnnotation"
    NUMBER = "NumberTypeAnnotation"
    FLOAT = "FloatTypeAnnotation"
    INT32 = "Int32TypeAnnotation"
    BOOLEAN = "BooleanTypeAnnotation"
    GENERIC_OBJECT = "GenericObjectTypeAnnotation"
    OBJECT = "ObjectTypeAnnotation"
    ARRAY = "ArrayTypeAnnotation"
    FUNCTION = "FunctionTypeAnnotation"
    GENERIC_PROMISE = "GenericPromiseTypeAnnotation"
    TYPE_ALIAS = "TypeAliasTypeAnnotation"


class ReservedTypeName:
    """Names carried by reserved function value annotations."""

    ROOT_TAG = "RootTag"


class PassingConvention:
    """How a parameter of a C++ type is passed in a generated declaration."""

    VALUE = "value"
    CONST_REFERENCE = "const_reference"


@dataclass(frozen=True)
class CxxType:
    """A C++ type that can appear in a generated declaration."""

    name: str
    passing: str = PassingConvention.VALUE

    @property
    def by_reference(self) -> bool:
        return self.passing == PassingConvention.CONST_REFERENCE

    def as_param(self, param_name: str) -> str:
        """Render a parameter declaration of this type.

        Args:
            param_name (str): The name of the parameter.

        Returns:
            str: E.g. `double x` or `const jsi::String &x`.
        """
        if self.by_reference:
            return f"const {self.name} &{param_name}"
        return f"{self.name} {param_name}"


CXX_DOUBLE = CxxType("double")
CXX_VOID = CxxType("void")
CXX_INT = CxxType("int")
CXX_BOOL = CxxType("bool")
JSI_STRING = CxxType("jsi::String", PassingConvention.CONST_REFERENCE)
JSI_OBJECT = CxxType("jsi::Object", PassingConvention.CONST_REFERENCE)
JSI_ARRAY = CxxType("jsi::Array", PassingConvention.CONST_REFERENCE)
JSI_FUNCTION = CxxType("jsi::Function", PassingConvention.CONST_REFERENCE)
JSI_VALUE = CxxType("jsi::Value", PassingConvention.CONST_REFERENCE)

ANNOTATION_TO_CXX: dict[str, CxxType] = {
    TypeAnnotationKind.VOID: CXX_VOID,
    TypeAnnotationKind.STRING: JSI_STRING,
    TypeAnnotationKind.NUMBER: CXX_DOUBLE,
    TypeAnnotationKind.FLOAT: CXX_DOUBLE,
    TypeAnnotationKind.INT32: CXX_INT,
    TypeAnnotationKind.BOOLEAN: CXX_BOOL,
    TypeAnnotationKind.GENERIC_OBJECT: JSI_OBJECT,
    TypeAnnotationKind.OBJECT: JSI_OBJECT,
    TypeAnnotationKind.ARRAY: JSI_ARRAY,
    TypeAnnotationKind.FUNCTION: JSI_FUNCTION,
    TypeAnnotationKind.GENERIC_PROMISE: JSI_VALUE,
}

RESERVED_NAME_TO_CXX: dict[str, CxxType] = {
    ReservedTypeName.ROOT_TAG: CXX_DOUBLE,
}

# The first parameter of every generated method.
RUNTIME_PARAM = "jsi::Runtime &rt"
