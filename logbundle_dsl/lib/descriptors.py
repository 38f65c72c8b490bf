"""
Immutable descriptors consumed by the generation engine.

The front-end (language.py + api/extractors) resolves a bundle definition into
these values before generation starts. Nothing here performs lookups: a
NominalType already carries its resolved superclass chain.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


# ------------------------------------------------------------------------------
# Types

@dataclass(frozen=True)
class PrimitiveType:
    """A type without a superclass (int, long, void, arrays...)."""
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class NominalType:
    """A declared class or interface, with its declared superclass if any."""
    name: str
    superclass: Optional["TypeDescriptor"] = None

    def __str__(self):
        return self.name


TypeDescriptor = Union[PrimitiveType, NominalType]


# ------------------------------------------------------------------------------
# Annotations

class Severity(Enum):
    """Closed set of log levels a @LogMessage may carry."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class MessageAnnotation:
    id: int
    template: str

    def __str__(self):
        return f'@Message(id={self.id}, value="{self.template}")'


@dataclass(frozen=True)
class LogAnnotation:
    id: int
    template: str
    level: Severity

    def __str__(self):
        level = getattr(self.level, "value", self.level)
        return f'@LogMessage(id={self.id}, value="{self.template}", level={level})'


@dataclass(frozen=True)
class GetLoggerAnnotation:
    def __str__(self):
        return "@GetLogger()"


Annotation = Union[MessageAnnotation, LogAnnotation, GetLoggerAnnotation]


# ------------------------------------------------------------------------------
# Bundle / methods

@dataclass(frozen=True)
class BundleDescriptor:
    """Per-interface metadata shared by every generated method."""
    project_code: str
    interface_name: str
    package: str = ""

    @property
    def simple_name(self) -> str:
        return self.interface_name.rsplit(".", 1)[-1]

    def __str__(self):
        return f'@LogBundle(projectCode="{self.project_code}")'


@dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    return_type: TypeDescriptor
    parameters: Tuple[Parameter, ...] = ()
    annotations: Tuple[Annotation, ...] = ()

    def __str__(self):
        params = ", ".join(f"{p.type} {p.name}" for p in self.parameters)
        return f"{self.name}({params})"


@dataclass(frozen=True)
class InterfaceDefinition:
    """One annotated interface: the unit of work of the orchestrator."""
    bundle: BundleDescriptor
    methods: Tuple[MethodDescriptor, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.bundle.interface_name


# ------------------------------------------------------------------------------
# Resolved method shapes (see api/builders/method_resolver.py)

@dataclass(frozen=True)
class MessageProducer:
    method: MethodDescriptor
    annotation: MessageAnnotation


@dataclass(frozen=True)
class LogEmitter:
    method: MethodDescriptor
    annotation: LogAnnotation


@dataclass(frozen=True)
class LoggerAccessor:
    method: MethodDescriptor
    annotation: GetLoggerAnnotation


@dataclass(frozen=True)
class Unannotated:
    method: MethodDescriptor


ResolvedMethod = Union[MessageProducer, LogEmitter, LoggerAccessor, Unannotated]


@dataclass(frozen=True)
class GeneratedUnit:
    """Complete source text of one `<Interface>_impl` class."""
    qualified_name: str
    text: str

    @property
    def lines(self):
        return self.text.splitlines()
