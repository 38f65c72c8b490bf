"""
Type resolution for bundle-definition files.

Turns the type names written in a definition file (simple or qualified) into
fully resolved TypeDescriptors. Lookup order for a simple name:

1. primitive types (int, long, void, ...)
2. `imports` entries
3. `types` declared in the file's own package
4. java.lang
5. otherwise the name is assumed to live in the file's package

Superclasses come from the file's `types` declarations first, then from a
small table of JDK classes.
"""

from typing import Dict, Optional

from logbundle_dsl.lib.descriptors import NominalType, PrimitiveType, TypeDescriptor
from logbundle_dsl.validation import ModelValidationError

PRIMITIVE_TYPES = frozenset({
    "boolean", "byte", "char", "short", "int", "long", "float", "double", "void",
})

# Fully-qualified name -> superclass (None for roots and interfaces)
JDK_TYPES: Dict[str, Optional[str]] = {
    "java.lang.Object": None,
    "java.lang.String": "java.lang.Object",
    "java.lang.CharSequence": None,
    "java.lang.Number": "java.lang.Object",
    "java.lang.Byte": "java.lang.Number",
    "java.lang.Short": "java.lang.Number",
    "java.lang.Integer": "java.lang.Number",
    "java.lang.Long": "java.lang.Number",
    "java.lang.Float": "java.lang.Number",
    "java.lang.Double": "java.lang.Number",
    "java.lang.Boolean": "java.lang.Object",
    "java.lang.Character": "java.lang.Object",
    "java.lang.Class": "java.lang.Object",
    "java.lang.Thread": "java.lang.Object",
    "java.lang.ThreadGroup": "java.lang.Object",
    "java.lang.StringBuilder": "java.lang.Object",
    "java.lang.Throwable": "java.lang.Object",
    "java.lang.Error": "java.lang.Throwable",
    "java.lang.Exception": "java.lang.Throwable",
    "java.lang.RuntimeException": "java.lang.Exception",
    "java.lang.InterruptedException": "java.lang.Exception",
    "java.lang.IllegalStateException": "java.lang.RuntimeException",
    "java.lang.IllegalArgumentException": "java.lang.RuntimeException",
    "java.lang.NullPointerException": "java.lang.RuntimeException",
    "java.lang.UnsupportedOperationException": "java.lang.RuntimeException",
    "java.lang.OutOfMemoryError": "java.lang.Error",
    "java.io.IOException": "java.lang.Exception",
    "java.util.concurrent.TimeoutException": "java.lang.Exception",
    "org.slf4j.Logger": None,
}

_JAVA_LANG = "java.lang."


class TypeResolver:
    """Resolves type names against one loaded definition file."""

    def __init__(self, model):
        self.package = model.package or ""
        self.imports = {name.rsplit(".", 1)[-1]: name for name in model.imports}
        self.declared = {decl.name: decl.extends for decl in model.types}
        self._cache: Dict[str, TypeDescriptor] = {}

    # --------------------------------------------------------------------------
    # Names

    def qualify(self, name: str) -> str:
        """Return the fully-qualified form of *name* (primitives unchanged)."""
        if name.endswith("[]"):
            return self.qualify(name[:-2]) + "[]"
        if name in PRIMITIVE_TYPES or "." in name:
            return name
        if name in self.imports:
            return self.imports[name]

        in_package = f"{self.package}.{name}" if self.package else name
        if in_package in self.declared:
            return in_package
        if name in self.declared:
            return name
        if _JAVA_LANG + name in JDK_TYPES:
            return _JAVA_LANG + name
        return in_package

    def superclass_of(self, qualified_name: str) -> Optional[str]:
        if qualified_name in self.declared:
            extends = self.declared[qualified_name]
            return self.qualify(extends) if extends else None
        return JDK_TYPES.get(qualified_name)

    # --------------------------------------------------------------------------
    # Descriptors

    def resolve(self, name: str) -> TypeDescriptor:
        """Resolve *name* into a descriptor carrying its full superclass chain."""
        return self._descriptor(self.qualify(name), visiting=())

    def _descriptor(self, qualified_name: str, visiting) -> TypeDescriptor:
        cached = self._cache.get(qualified_name)
        if cached is not None:
            return cached

        if qualified_name in PRIMITIVE_TYPES or qualified_name.endswith("[]"):
            descriptor = PrimitiveType(qualified_name)
        else:
            if qualified_name in visiting:
                chain = " -> ".join(visiting + (qualified_name,))
                raise ModelValidationError(f"Cyclic type hierarchy: {chain}", location="types")
            superclass = self.superclass_of(qualified_name)
            descriptor = NominalType(
                qualified_name,
                self._descriptor(superclass, visiting + (qualified_name,)) if superclass else None,
            )

        self._cache[qualified_name] = descriptor
        return descriptor
