"""Diagnostic channel: where fatal generation conditions are reported."""

from dataclasses import dataclass
from typing import List

from logbundle_dsl.api.gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    interface: str
    message: str
    error: Exception

    def __str__(self):
        return f"{self.interface}: {self.message}"


class DiagnosticChannel:
    """Collects fatal diagnostics in report order and logs each one at ERROR."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def error(self, interface: str, error: Exception) -> Diagnostic:
        diagnostic = Diagnostic(interface=interface, message=str(error), error=error)
        self.diagnostics.append(diagnostic)
        logger.error(f"[ERROR] {diagnostic}")
        return diagnostic

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)

    def __len__(self):
        return len(self.diagnostics)
