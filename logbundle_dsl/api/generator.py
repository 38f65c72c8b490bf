"""
Main entry point for log-bundle code generation.

For every interface carrying a logBundle block this module emits one Java
class `<Interface>_impl` implementing it on top of an SLF4J Logger:

    @Message    -> build the message (and optionally a throwable) and return it
    @LogMessage -> call logger.<level>(...)
    @GetLogger  -> return the injected logger

Architecture:
    - extractors/: definition model -> descriptors (types, methods, annotations)
    - builders/: type classifier, message registry, method resolver, signatures
    - generators/: one body emitter per method shape
    - sink.py / diagnostics.py: output and error channels
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from logbundle_dsl.api.builders import MessageRegistry, resolve_method
from logbundle_dsl.api.config import GeneratorSettings
from logbundle_dsl.api.diagnostics import DiagnosticChannel
from logbundle_dsl.api.errors import GenerationError
from logbundle_dsl.api.extractors import get_bundle_interfaces
from logbundle_dsl.api.gen_logging import configure_gen_logging, get_logger
from logbundle_dsl.api.generators import (
    generate_log_method,
    generate_logger_accessor,
    generate_message_method,
)
from logbundle_dsl.api.sink import FileSink
from logbundle_dsl.api.utils import encode_special_chars
from logbundle_dsl.lib.descriptors import (
    GeneratedUnit,
    InterfaceDefinition,
    LogEmitter,
    LoggerAccessor,
    MessageProducer,
    Unannotated,
)
from logbundle_dsl.templates import env as jinja_env

logger = get_logger(__name__)

GENERATOR_NAME = "logbundle_dsl.api.generator.LogBundleGenerator"

IMPORTS = (
    "org.slf4j.Logger",
    "org.slf4j.LoggerFactory",
    "org.slf4j.helpers.FormattingTuple",
    "org.slf4j.helpers.MessageFormatter",
)


@dataclass
class GenerationReport:
    generated: List[str] = field(default_factory=list)
    failures: List[Tuple[str, GenerationError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class LogBundleGenerator:
    """
    Generates `_impl` classes, one interface at a time.

    Each interface gets a fresh MessageRegistry; methods are processed in
    declaration order so id collisions are reported deterministically. The unit
    is only committed to the sink when every method generated successfully.
    """

    def __init__(self, sink, settings: GeneratorSettings = None, diagnostics: DiagnosticChannel = None):
        self.sink = sink
        self.settings = settings or GeneratorSettings()
        self.diagnostics = diagnostics or DiagnosticChannel()
        self.debug = self.settings.DEBUG
        if self.debug:
            configure_gen_logging(self.settings)

    # --------------------------------------------------------------------------
    # Tracing

    def _trace(self, message: str) -> None:
        logger.debug(message)

    @property
    def _tracer(self):
        return self._trace if self.debug else None

    # --------------------------------------------------------------------------
    # Generation

    def impl_name(self, interface: InterfaceDefinition) -> str:
        return interface.bundle.interface_name + self.settings.IMPL_SUFFIX

    def render_unit(self, interface: InterfaceDefinition) -> GeneratedUnit:
        """Render the complete `_impl` class text for *interface* (no sink I/O)."""
        bundle = interface.bundle
        registry = MessageRegistry()
        blocks = []

        for method in interface.methods:
            if self.debug:
                self._trace(f"Generating {method}")

            resolved = resolve_method(method)
            if isinstance(resolved, Unannotated):
                if self.debug:
                    self._trace("... no generation annotation, skipped")
                continue

            if self.debug:
                self._trace(f"... annotated with {resolved.annotation}")
            blocks.append(self._emit(interface, resolved, registry))

        class_name = bundle.simple_name + self.settings.IMPL_SUFFIX
        text = jinja_env.get_template("java/impl_class.java.jinja").render(
            generator_name=GENERATOR_NAME,
            interface_name=bundle.interface_name,
            package=bundle.package,
            imports=IMPORTS,
            bundle_comment=encode_special_chars(str(bundle)),
            class_name=class_name,
            interface_simple_name=bundle.simple_name,
            methods=blocks,
        )
        return GeneratedUnit(self.impl_name(interface), text)

    def _emit(self, interface, resolved, registry) -> str:
        if isinstance(resolved, MessageProducer):
            return generate_message_method(interface.bundle, resolved, registry, trace=self._tracer)
        if isinstance(resolved, LogEmitter):
            return generate_log_method(interface.bundle, resolved, registry, trace=self._tracer)
        if isinstance(resolved, LoggerAccessor):
            return generate_logger_accessor(resolved)
        raise TypeError(f"Unsupported method shape: {type(resolved).__name__}")

    def generate(self, interface: InterfaceDefinition) -> GeneratedUnit:
        """
        Generate and commit one interface.

        Raises:
            GenerationError: after reporting it to the diagnostic channel;
                nothing is committed for this interface.
        """
        qualified = self.impl_name(interface)
        if self.debug:
            self._trace(f"processing {interface.name}, generating: {qualified}")

        try:
            with self.sink.open_unit(qualified) as unit:
                generated = self.render_unit(interface)
                unit.write(generated.text)
                self.sink.commit(unit)
        except GenerationError as e:
            self.diagnostics.error(interface.name, e)
            raise

        if self.debug:
            self._trace(f"done processing {qualified}")
        return generated

    def generate_all(self, interfaces: Iterable[InterfaceDefinition], keep_going: bool = False) -> GenerationReport:
        """
        Generate every interface in order.

        Stops at the first failing interface unless *keep_going* is set. Every
        failure is already reported on the diagnostic channel.
        """
        report = GenerationReport()
        for interface in interfaces:
            try:
                unit = self.generate(interface)
            except GenerationError as e:
                report.failures.append((interface.name, e))
                if not keep_going:
                    break
            else:
                report.generated.append(unit.qualified_name)
        return report


def render_bundle_files(model, out_dir, settings: GeneratorSettings = None, keep_going: bool = False,
                        diagnostics: DiagnosticChannel = None) -> GenerationReport:
    """
    Generate the `_impl` sources for every bundle interface of *model* into *out_dir*.

    Args:
        model: Validated definition model (see language.build_model)
        out_dir: Root directory; files land in package sub-directories
        settings: Generator settings (defaults read from the environment)
        keep_going: Continue with the next interface after a failure
        diagnostics: Channel collecting fatal diagnostics
    """
    settings = settings or GeneratorSettings()
    sink = FileSink(Path(out_dir), encoding=settings.OUTPUT_ENCODING)
    generator = LogBundleGenerator(sink, settings=settings, diagnostics=diagnostics)

    interfaces = get_bundle_interfaces(model)
    logger.info(f"[PHASE] Generating {len(interfaces)} log bundle(s) into {out_dir}")
    return generator.generate_all(interfaces, keep_going=keep_going)
