"""
Extractors: validated definition model -> generator descriptors.

- type_resolver: name qualification and superclass chains
- bundle_extractor: interfaces, methods and annotation payloads
"""

from .type_resolver import TypeResolver, JDK_TYPES, PRIMITIVE_TYPES
from .bundle_extractor import get_bundle_interfaces, extract_interface, extract_method

__all__ = [
    "TypeResolver",
    "JDK_TYPES",
    "PRIMITIVE_TYPES",
    "get_bundle_interfaces",
    "extract_interface",
    "extract_method",
]
