"""Text helpers for emitted Java source."""


def encode_special_chars(text: str) -> str:
    """Make *text* safe inside a Java string literal or a // comment (newlines and quotes)."""
    return text.replace("\n", "\\n").replace('"', '\\"')


def formatting_string(project_code: str, message_id: int, template: str) -> str:
    """
    The escaped "<projectCode><id> <template>" text every message and log
    line starts from, e.g. formatting_string("AMQ", 101, "started") -> "AMQ101 started".
    """
    return encode_special_chars(f"{project_code}{message_id} {template}")


def java_string_literal(escaped: str) -> str:
    """Wrap already-escaped text in double quotes."""
    return f'"{escaped}"'
