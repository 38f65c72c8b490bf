"""
Exception-type detection for method parameters.

`is_exception_type` decides whether a parameter should be chained as the
cause of a constructed throwable. The check is a naming heuristic backed by a
walk up the superclass chain:

1. no descriptor                        -> False
2. java.lang.Throwable or "*Exception"  -> True
3. one of the KNOWN_TYPES               -> False
4. declared class                       -> look at its superclass
5. anything else (primitives)           -> False

A class named "*Exception" that is not a Throwable is misclassified. That is an
accepted limitation of the naming heuristic.
"""

from typing import Callable, Optional

from logbundle_dsl.lib.descriptors import NominalType, TypeDescriptor

THROWABLE_ROOT = "java.lang.Throwable"
EXCEPTION_SUFFIX = "Exception"

KNOWN_TYPES = frozenset({
    "java.lang.String",
    "java.lang.Object",
    "java.lang.Long",
    "java.lang.Integer",
    "java.lang.Number",
    "java.lang.Thread",
    "java.lang.ThreadGroup",
    "org.apache.activemq.artemis.api.core.SimpleString",
    "none",
})


def is_exception_type(
    type_descriptor: Optional[TypeDescriptor],
    trace: Optional[Callable[[str], None]] = None,
) -> bool:
    """
    Return True if *type_descriptor* denotes a throwable-like type.

    Args:
        type_descriptor: Resolved type, or None.
        trace: Optional callback receiving debug lines; it never affects the result.
    """
    # One iteration per class in the superclass chain
    current = type_descriptor
    while current is not None:
        name = current.name
        if name == THROWABLE_ROOT or name.endswith(EXCEPTION_SUFFIX):
            if trace:
                trace(f"... Class {name} was considered an exception")
            return True

        if name in KNOWN_TYPES:
            if trace:
                trace(f"... {name} is a known type, not an exception!")
            return False

        if not isinstance(current, NominalType):
            return False

        if trace:
            trace(
                f"... ... recursively inspecting super class for Exception on {name}, "
                f"looking at superClass {current.superclass or 'none'}"
            )
        current = current.superclass

    return False
