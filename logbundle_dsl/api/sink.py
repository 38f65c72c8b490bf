"""
Output sinks for generated units.

A sink hands out one transaction per unit. The generator buffers the whole
unit in memory and calls `commit` once on success; leaving the `with` block
without committing (any fatal error) discards everything, so a failed
interface never leaves a partial source file behind.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Dict

from logbundle_dsl.api.errors import SinkError
from logbundle_dsl.api.gen_logging import get_logger

logger = get_logger(__name__)


class UnitTransaction:
    """Collects the text of one unit until it is committed or discarded."""

    def __init__(self, qualified_name: str):
        self.qualified_name = qualified_name
        self._parts = []
        self.committed = False

    def write(self, text: str) -> None:
        if self.committed:
            raise SinkError(self.qualified_name, RuntimeError("unit already committed"))
        self._parts.append(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def discard(self) -> None:
        self._parts.clear()


class BaseSink:
    """Subclasses implement `_store(qualified_name, text)`."""

    @contextmanager
    def open_unit(self, qualified_name: str):
        transaction = UnitTransaction(qualified_name)
        try:
            yield transaction
        except BaseException:
            transaction.discard()
            raise
        else:
            if not transaction.committed:
                transaction.discard()

    def commit(self, transaction: UnitTransaction) -> None:
        """Store the buffered unit; called exactly once per successful unit."""
        self._store(transaction.qualified_name, transaction.getvalue())
        transaction.committed = True

    def _store(self, qualified_name: str, text: str) -> None:
        raise NotImplementedError


class MemorySink(BaseSink):
    """Keeps committed units in a dict (tests, library callers)."""

    def __init__(self):
        self.units: Dict[str, str] = {}

    def _store(self, qualified_name: str, text: str) -> None:
        self.units[qualified_name] = text


class FileSink(BaseSink):
    """
    Writes `<out_dir>/<package path>/<SimpleName>.java`.

    The text goes to a `.<name>.tmp` file in the target directory first and is
    moved into place with os.replace, so readers only ever see complete files.
    """

    def __init__(self, out_dir, encoding: str = "utf-8"):
        self.out_dir = Path(out_dir)
        self.encoding = encoding
        self.written = []

    def path_for(self, qualified_name: str) -> Path:
        parts = qualified_name.split(".")
        return self.out_dir.joinpath(*parts[:-1]) / f"{parts[-1]}.java"

    def _store(self, qualified_name: str, text: str) -> None:
        target = self.path_for(qualified_name)
        tmp_path = target.with_name(f".{target.name}.tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # open() honours the umask, so the final file gets the usual mode
            with open(tmp_path, "w", encoding=self.encoding) as handle:
                handle.write(text)
            os.replace(tmp_path, target)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise SinkError(str(target), e) from e

        self.written.append(target)
        logger.info(f"[GENERATED] {target}")
