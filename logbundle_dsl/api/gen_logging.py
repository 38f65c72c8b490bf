"""
Side-console logging for log-bundle generation.

Every module logs under "logbundle.gen" (get_logger(__name__) ->
"logbundle.gen.<module>"). Nothing is printed until configure_gen_logging
attaches the side console: the CLI does it for every `generate` run, and
LogBundleGenerator does it itself when constructed with DEBUG on, so library
callers get the per-method trace without touching `logging`.
"""

import logging

from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler

from logbundle_dsl.api.config import GeneratorSettings

GEN_LOGGER = "logbundle.gen"


def get_logger(name: str = None) -> logging.Logger:
    if not name or name == GEN_LOGGER:
        return logging.getLogger(GEN_LOGGER)
    return logging.getLogger(f"{GEN_LOGGER}.{name.rsplit('.', 1)[-1]}")


def gen_log_level(settings: GeneratorSettings = None, quiet: bool = False) -> int:
    """DEBUG traces every method, INFO reports each unit, WARNING only problems."""
    if settings is not None and settings.DEBUG:
        return logging.DEBUG
    return logging.WARNING if quiet else logging.INFO


def configure_gen_logging(settings: GeneratorSettings = None, quiet: bool = False) -> logging.Logger:
    """
    Attach the stderr side console to the logbundle.gen hierarchy.

    Idempotent: a second call only changes the level, so the CLI and a DEBUG
    generator in the same process share one handler.
    """
    level = gen_log_level(settings, quiet)
    gen_logger = logging.getLogger(GEN_LOGGER)
    gen_logger.setLevel(level)

    handler = next((h for h in gen_logger.handlers if isinstance(h, _SideConsoleHandler)), None)
    if handler is None:
        handler = _SideConsoleHandler()
        gen_logger.addHandler(handler)
        gen_logger.propagate = False
    handler.setLevel(level)
    return gen_logger


class _SideConsoleHandler(RichHandler):
    # Messages already carry their [TAG]; no time, level or path columns.
    # The console looks up sys.stderr on every write.
    def __init__(self):
        super().__init__(
            console=Console(stderr=True),
            show_time=False,
            show_level=False,
            show_path=False,
            markup=False,
            highlighter=NullHighlighter(),
        )
