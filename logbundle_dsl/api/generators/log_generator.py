"""@LogMessage methods: one leveled SLF4J call per method."""

from logbundle_dsl.api.builders import MessageRegistry, render_signature
from logbundle_dsl.api.errors import UnknownSeverityError
from logbundle_dsl.api.utils import encode_special_chars, formatting_string, java_string_literal
from logbundle_dsl.lib.descriptors import BundleDescriptor, LogEmitter, Severity
from logbundle_dsl.templates import env as jinja_env

LEVEL_OPERATIONS = {
    Severity.TRACE: "trace",
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARN: "warn",
    Severity.ERROR: "error",
}


def log_operation(level) -> str:
    """Map a Severity to the SLF4J Logger method name."""
    try:
        return LEVEL_OPERATIONS[level]
    except (KeyError, TypeError):
        raise UnknownSeverityError(level) from None


def generate_log_method(
    bundle: BundleDescriptor,
    resolved: LogEmitter,
    registry: MessageRegistry,
    trace=None,
) -> str:
    """
    Render the implementation of one @LogMessage method.

    Parameters are passed to the logger positionally, in declaration order.
    A Throwable parameter is not moved to the end of the argument list.
    """
    method, annotation = resolved.method, resolved.annotation
    registry.register(annotation.id, annotation.template)

    signature = render_signature(method, trace=trace)
    operation = log_operation(annotation.level)

    arguments = java_string_literal(formatting_string(bundle.project_code, annotation.id, annotation.template))
    if signature.has_parameters:
        arguments = f"{arguments}, {signature.call_list}"

    template = jinja_env.get_template("java/log_method.java.jinja")
    return template.render(
        annotation_comment=encode_special_chars(str(annotation)),
        method_name=method.name,
        declaration=signature.declaration,
        operation=operation,
        arguments=arguments,
    )
