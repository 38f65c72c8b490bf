"""
Fatal generation errors.

Every error aborts generation of the current interface. Each one carries
enough context (method, id, templates) to locate the offending annotation
without re-running in debug mode.
"""


class GenerationError(Exception):
    """Base class for all fatal generation errors."""


class CollisionError(GenerationError):
    """A message id was registered twice within one generation run."""

    def __init__(self, message_id: int, template: str, previous: str):
        self.message_id = message_id
        self.template = template
        self.previous = previous
        super().__init__(
            f"message {message_id} with definition = {template} was previously defined as {previous}"
        )


class AmbiguousAnnotationError(GenerationError):
    """A method carries more than one of @Message / @LogMessage / @GetLogger."""

    def __init__(self, method_name: str, annotations=()):
        self.method_name = method_name
        self.annotations = tuple(annotations)
        names = ", ".join(str(a) for a in self.annotations)
        super().__init__(
            f"Cannot use combined annotations on {method_name}" + (f": {names}" if names else "")
        )


class MultipleExceptionParametersError(GenerationError):
    def __init__(self, method_name: str, template: str = None):
        self.method_name = method_name
        self.template = template
        subject = f"messageAnnotation {template}" if template is not None else f"method {method_name}"
        super().__init__(f"{subject} has two exceptions defined on the method {method_name}")


class UnknownSeverityError(GenerationError):
    """Internal consistency failure: a level outside the closed Severity set."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"illegal method level {level}")


class SinkError(GenerationError):
    """The output channel failed to open, write or commit a unit."""

    def __init__(self, target: str, cause: Exception = None):
        self.target = target
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to write generated source {target}{detail}")
