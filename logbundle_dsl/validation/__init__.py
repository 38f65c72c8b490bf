"""
Validation module for bundle-definition files.

Organized by concern:
- type_validators: `types` declarations and the superclass hierarchy
- interface_validators: interfaces and method shapes
"""

from logbundle_dsl.validation.errors import ModelValidationError

from logbundle_dsl.validation.type_validators import (
    build_hierarchy_graph,
    verify_unique_type_declarations,
    verify_type_hierarchy,
)

from logbundle_dsl.validation.interface_validators import (
    verify_unique_interface_names,
    verify_methods,
)

__all__ = [
    "ModelValidationError",
    # Type validators
    "build_hierarchy_graph",
    "verify_unique_type_declarations",
    "verify_type_hierarchy",
    # Interface validators
    "verify_unique_interface_names",
    "verify_methods",
]
