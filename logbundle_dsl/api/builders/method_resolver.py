"""Classify an interface method into exactly one generated shape."""

from logbundle_dsl.api.errors import AmbiguousAnnotationError
from logbundle_dsl.lib.descriptors import (
    GetLoggerAnnotation,
    LogAnnotation,
    LogEmitter,
    LoggerAccessor,
    MessageAnnotation,
    MessageProducer,
    MethodDescriptor,
    ResolvedMethod,
    Unannotated,
)

_SHAPES = (
    (MessageAnnotation, MessageProducer),
    (LogAnnotation, LogEmitter),
    (GetLoggerAnnotation, LoggerAccessor),
)


def resolve_method(method: MethodDescriptor) -> ResolvedMethod:
    """
    Return the MessageProducer / LogEmitter / LoggerAccessor variant for
    *method*, or Unannotated when it carries none of the recognized annotations.

    Raises:
        AmbiguousAnnotationError: more than one recognized annotation.
    """
    matches = []
    for annotation in method.annotations:
        for annotation_type, shape in _SHAPES:
            if isinstance(annotation, annotation_type):
                matches.append((annotation, shape))

    if len(matches) > 1:
        raise AmbiguousAnnotationError(str(method), [a for a, _ in matches])

    if not matches:
        return Unannotated(method)

    annotation, shape = matches[0]
    return shape(method, annotation)
