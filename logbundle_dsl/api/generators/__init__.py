"""
Body emitters, one per generated method shape:

- message_generator: @Message (formatted String or constructed throwable)
- log_generator: @LogMessage (leveled logger call)
- logger_accessor_generator: @GetLogger (returns the injected logger)
"""

from .message_generator import generate_message_method
from .log_generator import generate_log_method, log_operation, LEVEL_OPERATIONS
from .logger_accessor_generator import generate_logger_accessor

__all__ = [
    "generate_message_method",
    "generate_log_method",
    "log_operation",
    "LEVEL_OPERATIONS",
    "generate_logger_accessor",
]
