"""
Unit tests for type-name qualification and descriptor resolution.
"""

import pytest

from logbundle_dsl.api.builders import is_exception_type
from logbundle_dsl.api.extractors import TypeResolver
from logbundle_dsl.language import build_model_str
from logbundle_dsl.lib.descriptors import NominalType, PrimitiveType


MODEL = """
package: org.example.server
imports:
  - org.example.api.ActiveMQException
  - org.example.api.SimpleName
types:
  - name: org.example.api.ActiveMQException
    extends: Exception
  - name: org.example.api.ActiveMQIllegalStateException
    extends: org.example.api.ActiveMQException
  - name: org.example.server.ServerFailure
    extends: RuntimeException
  - name: org.example.server.Address
"""


@pytest.fixture
def resolver():
    return TypeResolver(build_model_str(MODEL))


class TestQualify:

    @pytest.mark.parametrize("name, expected", [
        ("int", "int"),
        ("void", "void"),
        ("String", "java.lang.String"),
        ("Throwable", "java.lang.Throwable"),
        ("ActiveMQException", "org.example.api.ActiveMQException"),
        ("ServerFailure", "org.example.server.ServerFailure"),
        ("java.util.List", "java.util.List"),
        ("Unknown", "org.example.server.Unknown"),
        ("String[]", "java.lang.String[]"),
    ])
    def test_qualify(self, resolver, name, expected):
        assert resolver.qualify(name) == expected

    def test_default_package(self):
        resolver = TypeResolver(build_model_str("types:\n  - name: Local\n"))
        assert resolver.qualify("Local") == "Local"
        assert resolver.qualify("Other") == "Other"


class TestResolve:

    def test_primitive(self, resolver):
        assert resolver.resolve("long") == PrimitiveType("long")

    def test_array_is_primitive(self, resolver):
        descriptor = resolver.resolve("Throwable[]")
        assert isinstance(descriptor, PrimitiveType)
        assert is_exception_type(descriptor) is False

    def test_jdk_chain(self, resolver):
        descriptor = resolver.resolve("IllegalStateException")

        chain = []
        while descriptor is not None:
            chain.append(descriptor.name)
            descriptor = descriptor.superclass
        assert chain == [
            "java.lang.IllegalStateException",
            "java.lang.RuntimeException",
            "java.lang.Exception",
            "java.lang.Throwable",
            "java.lang.Object",
        ]

    def test_declared_chain(self, resolver):
        failure = resolver.resolve("ServerFailure")

        assert isinstance(failure, NominalType)
        assert failure.superclass.name == "java.lang.RuntimeException"
        assert is_exception_type(failure) is True

    def test_declared_without_superclass(self, resolver):
        address = resolver.resolve("Address")

        assert address == NominalType("org.example.server.Address")
        assert is_exception_type(address) is False

    def test_unknown_type_has_no_superclass(self, resolver):
        assert resolver.resolve("org.other.Thing") == NominalType("org.other.Thing")

    def test_descriptors_are_cached(self, resolver):
        assert resolver.resolve("ServerFailure") is resolver.resolve("org.example.server.ServerFailure")
