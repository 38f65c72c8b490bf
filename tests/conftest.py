"""
Pytest configuration and shared fixtures for the logbundle-dsl test suite.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

from logbundle_dsl.api.config import GeneratorSettings
from logbundle_dsl.api.gen_logging import GEN_LOGGER
from logbundle_dsl.api.generator import LogBundleGenerator
from logbundle_dsl.api.sink import MemorySink
from logbundle_dsl.language import build_model
from logbundle_dsl.lib.descriptors import (
    BundleDescriptor,
    InterfaceDefinition,
    MethodDescriptor,
    NominalType,
    Parameter,
    PrimitiveType,
)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def examples_dir(project_root):
    """Return the examples directory."""
    return project_root / "examples"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="logbundle_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def write_bundle_file(temp_output_dir):
    """Factory fixture to write a definition file to a temporary directory."""
    def _write(content: str, filename: str = "bundle.yaml") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_bundle_model(write_bundle_file):
    """Factory fixture to build a model from definition-file content."""
    def _build(content: str, filename: str = "bundle.yaml"):
        file_path = write_bundle_file(content, filename)
        return build_model(str(file_path))
    return _build


# Descriptor fixtures

@pytest.fixture(scope="session")
def java_types():
    """Resolved descriptors for the JDK types used across tests."""
    obj = NominalType("java.lang.Object")
    throwable = NominalType("java.lang.Throwable", obj)
    exception = NominalType("java.lang.Exception", throwable)
    runtime = NominalType("java.lang.RuntimeException", exception)
    return SimpleNamespace(
        object=obj,
        string=NominalType("java.lang.String", obj),
        integer=NominalType("java.lang.Integer", NominalType("java.lang.Number", obj)),
        throwable=throwable,
        exception=exception,
        runtime=runtime,
        int=PrimitiveType("int"),
        void=PrimitiveType("void"),
        logger=NominalType("org.slf4j.Logger"),
    )


@pytest.fixture
def make_method(java_types):
    """Factory fixture: make_method("name", annotation, ("String", java_types.string), ...)."""
    def _make(name, *annotations, params=(), returns=None):
        return MethodDescriptor(
            name=name,
            return_type=returns if returns is not None else java_types.void,
            parameters=tuple(Parameter(n, t) for n, t in params),
            annotations=tuple(annotations),
        )
    return _make


@pytest.fixture
def amq_bundle():
    return BundleDescriptor(project_code="AMQ", interface_name="org.example.ServerLogger", package="org.example")


@pytest.fixture
def make_interface(amq_bundle):
    def _make(*methods, bundle=None):
        return InterfaceDefinition(bundle=bundle or amq_bundle, methods=tuple(methods))
    return _make


@pytest.fixture
def memory_generator():
    """A generator writing into a MemorySink; returns (generator, sink)."""
    sink = MemorySink()
    generator = LogBundleGenerator(sink, settings=GeneratorSettings(DEBUG=False, IMPL_SUFFIX="_impl"))
    return generator, sink


@pytest.fixture
def artemis_model(examples_dir):
    return build_model(str(examples_dir / "artemis" / "server-logger.yaml"))


@pytest.fixture(autouse=True)
def reset_gen_logging():
    """Detach the side console a CLI run or a DEBUG generator attached."""
    gen_logger = logging.getLogger(GEN_LOGGER)
    yield
    for handler in list(gen_logger.handlers):
        gen_logger.removeHandler(handler)
    gen_logger.propagate = True
    gen_logger.setLevel(logging.NOTSET)
