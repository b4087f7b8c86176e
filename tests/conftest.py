"""Pytest configuration and fixtures for the header generator tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cxx_module_header_generator.schema import Method, ModuleSpec, Parameter, Schema, TypeAnnotation

HEADER_PREFIX = """
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
"""

HEADER_SUFFIX = """

} // namespace react
} // namespace facebook
"""


def annotation(type_name: str, **kwargs) -> TypeAnnotation:
    """Shorthand for a type annotation, e.g. `annotation("Number")`."""
    return TypeAnnotation(type=f"{type_name}TypeAnnotation", **kwargs)


def method(name: str, return_type: TypeAnnotation | None = None, **params: TypeAnnotation) -> Method:
    """Shorthand for a method; keyword arguments become parameters in order."""
    return Method(
        name=name,
        params=tuple(Parameter(param_name, param_type) for param_name, param_type in params.items()),
        return_type_annotation=return_type or annotation("Void"),
    )


def single_file_schema(*module_specs: ModuleSpec) -> Schema:
    return Schema(modules={"NativeModules.js": {spec.name: spec for spec in module_specs}})


@pytest.fixture
def sample_schema_dict() -> dict:
    """A schema in the JSON shape emitted by the upstream parser."""
    return {
        "modules": {
            "NativeSampleTurboModule.js": {
                "nativeModules": {
                    "SampleTurboModule": {
                        "aliases": {
                            "Options": {
                                "type": "ObjectTypeAnnotation",
                                "properties": [
                                    {
                                        "name": "quality",
                                        "optional": False,
                                        "typeAnnotation": {"type": "NumberTypeAnnotation"},
                                    },
                                    {
                                        "name": "tag",
                                        "optional": True,
                                        "typeAnnotation": {
                                            "type": "ReservedFunctionValueTypeAnnotation",
                                            "name": "RootTag",
                                        },
                                    },
                                ],
                            }
                        },
                        "properties": [
                            {
                                "name": "getConstants",
                                "optional": False,
                                "typeAnnotation": {
                                    "type": "FunctionTypeAnnotation",
                                    "params": [],
                                    "returnTypeAnnotation": {"type": "ObjectTypeAnnotation", "properties": []},
                                },
                            },
                            {
                                "name": "voidFunc",
                                "optional": False,
                                "typeAnnotation": {
                                    "type": "FunctionTypeAnnotation",
                                    "params": [],
                                    "returnTypeAnnotation": {"type": "VoidTypeAnnotation"},
                                },
                            },
                            {
                                "name": "getArray",
                                "optional": False,
                                "typeAnnotation": {
                                    "type": "FunctionTypeAnnotation",
                                    "params": [
                                        {
                                            "name": "arg",
                                            "typeAnnotation": {
                                                "type": "ArrayTypeAnnotation",
                                                "elementType": {"type": "StringTypeAnnotation"},
                                            },
                                        }
                                    ],
                                    "returnTypeAnnotation": {"type": "ArrayTypeAnnotation"},
                                },
                            },
                            {
                                "name": "crop",
                                "optional": False,
                                "typeAnnotation": {
                                    "type": "FunctionTypeAnnotation",
                                    "params": [
                                        {
                                            "name": "reactTag",
                                            "typeAnnotation": {"type": "Int32TypeAnnotation"},
                                        },
                                        {
                                            "name": "options",
                                            "typeAnnotation": {"type": "TypeAliasTypeAnnotation", "name": "Options"},
                                        },
                                        {
                                            "name": "callback",
                                            "typeAnnotation": {
                                                "type": "FunctionTypeAnnotation",
                                                "params": [],
                                                "returnTypeAnnotation": {"type": "VoidTypeAnnotation"},
                                            },
                                        },
                                    ],
                                    "returnTypeAnnotation": {"type": "GenericPromiseTypeAnnotation"},
                                },
                            },
                        ],
                    }
                }
            },
            "NativeComponent.js": {"components": {}},
        }
    }


@pytest.fixture
def schema_dir(tmp_path: Path, sample_schema_dict: dict) -> Path:
    """Create a temporary directory holding JSON schema files."""
    directory = tmp_path / "schemas"
    directory.mkdir()

    (directory / "sample.json").write_text(json.dumps(sample_schema_dict))

    nested = directory / "nested"
    nested.mkdir()
    (nested / "other.json").write_text(
        json.dumps(
            {
                "modules": {
                    "NativeOther.js": {
                        "nativeModules": {
                            "Other": {
                                "aliases": {},
                                "properties": [
                                    {
                                        "name": "ping",
                                        "optional": False,
                                        "typeAnnotation": {
                                            "type": "FunctionTypeAnnotation",
                                            "params": [
                                                {"name": "flag", "typeAnnotation": {"type": "BooleanTypeAnnotation"}}
                                            ],
                                            "returnTypeAnnotation": {"type": "StringTypeAnnotation"},
                                        },
                                    }
                                ],
                            }
                        }
                    }
                }
            }
        )
    )

    return directory
