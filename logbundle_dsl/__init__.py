"""logbundle-dsl: generate SLF4J-backed implementations of annotated log bundle interfaces."""

__version__ = "0.1.0"
