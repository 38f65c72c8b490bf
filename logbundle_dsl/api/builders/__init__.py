"""
Builders shared by the body emitters.

- type_classifier: exception-type detection over resolved type descriptors
- message_registry: per-run message id collision registry
- method_resolver: annotation -> generated method shape
- signature_renderer: declaration / call-list synthesis
"""

from .type_classifier import is_exception_type, KNOWN_TYPES, THROWABLE_ROOT
from .message_registry import MessageRegistry
from .method_resolver import resolve_method
from .signature_renderer import render_signature, RenderedSignature

__all__ = [
    "is_exception_type",
    "KNOWN_TYPES",
    "THROWABLE_ROOT",
    "MessageRegistry",
    "resolve_method",
    "render_signature",
    "RenderedSignature",
]
