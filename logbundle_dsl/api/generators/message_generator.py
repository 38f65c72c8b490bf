"""@Message methods: build the formatted text and return it, or wrap it in a new throwable."""

from logbundle_dsl.api.builders import MessageRegistry, render_signature
from logbundle_dsl.api.utils import encode_special_chars, formatting_string, java_string_literal
from logbundle_dsl.lib.descriptors import BundleDescriptor, MessageProducer
from logbundle_dsl.templates import env as jinja_env

STRING_TYPE = "java.lang.String"
RESULT_VARIABLE_PREFIX = "objReturn_"


def generate_message_method(
    bundle: BundleDescriptor,
    resolved: MessageProducer,
    registry: MessageRegistry,
    trace=None,
) -> str:
    """
    Render the implementation of one @Message method.

    Zero parameters: the value is the escaped "<code><id> <template>" literal.
    With parameters: the value comes from SLF4J's MessageFormatter.arrayFormat.
    A String return type returns the value; any other return type is
    constructed from it, chaining the exception-typed parameter as its cause.
    """
    method, annotation = resolved.method, resolved.annotation
    registry.register(annotation.id, annotation.template)

    signature = render_signature(
        method, track_exceptions=True, template=annotation.template, trace=trace
    )
    literal = java_string_literal(formatting_string(bundle.project_code, annotation.id, annotation.template))

    if signature.has_parameters:
        value_expression = (
            f"MessageFormatter.arrayFormat({literal}, new Object[]{{{signature.call_list}}}).getMessage()"
        )
    else:
        value_expression = literal

    exception_parameter = signature.exception_parameter
    template = jinja_env.get_template("java/message_method.java.jinja")
    return template.render(
        annotation_comment=encode_special_chars(str(annotation)),
        return_type=str(method.return_type),
        method_name=method.name,
        declaration=signature.declaration,
        value_expression=value_expression,
        returns_string=method.return_type.name == STRING_TYPE,
        result_variable=f"{RESULT_VARIABLE_PREFIX}{method.name}",
        exception_parameter=exception_parameter.name if exception_parameter else None,
    )
