"""Errors raised while loading and validating a bundle-definition file."""


class ModelValidationError(Exception):
    """
    A definition file is malformed or inconsistent.

    Args:
        message: Human readable description.
        location: Dotted path to the offending element
            (e.g. "interfaces.0.methods.2.logMessage.level"), when known.
        filename: Source file, when the model was loaded from disk.
    """

    def __init__(self, message: str, location: str = None, filename: str = None):
        self.message = message
        self.location = location
        self.filename = filename
        super().__init__(str(self))

    def __str__(self):
        where = ":".join(p for p in (self.filename, self.location) if p)
        return f"{where}: {self.message}" if where else self.message
