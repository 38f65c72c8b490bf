"""@GetLogger methods return the logger injected through the constructor."""

from logbundle_dsl.api.utils import encode_special_chars
from logbundle_dsl.lib.descriptors import LoggerAccessor
from logbundle_dsl.templates import env as jinja_env


def generate_logger_accessor(resolved: LoggerAccessor) -> str:
    template = jinja_env.get_template("java/get_logger_method.java.jinja")
    return template.render(
        annotation_comment=encode_special_chars(str(resolved.annotation)),
        method_name=resolved.method.name,
    )
