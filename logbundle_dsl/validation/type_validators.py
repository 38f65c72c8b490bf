"""
Type-declaration validation.

The resolver walks `types` declarations upward to build superclass chains, so
the declared hierarchy must be a forest: one declaration per name, no cycles.
Names are compared the way the resolver sees them: `extends: Bar` in package
`a` means `a.Bar` when `a.Bar` is declared.
"""

import networkx as nx

from logbundle_dsl.validation.errors import ModelValidationError


def _resolver(model):
    # api.extractors imports this package for ModelValidationError
    from logbundle_dsl.api.extractors.type_resolver import TypeResolver
    return TypeResolver(model)


# ------------------------------------------------------------------------------
# Type declarations

def verify_unique_type_declarations(model):
    """A class may only be declared once (including declarations pulled in by include)."""
    resolver = _resolver(model)
    seen = set()
    for idx, decl in enumerate(model.types):
        qualified = resolver.qualify(decl.name)
        if qualified in seen:
            raise ModelValidationError(
                f"Type '{qualified}' is declared more than once.",
                location=f"types.{idx}",
            )
        seen.add(qualified)


def build_hierarchy_graph(model) -> nx.DiGraph:
    """
    Directed graph with an edge class -> superclass, following each declared
    class up through other declarations and the built-in JDK table.
    """
    resolver = _resolver(model)
    graph = nx.DiGraph()
    pending = [resolver.qualify(decl.name) for decl in model.types]
    visited = set()

    while pending:
        name = pending.pop()
        if name in visited:
            continue
        visited.add(name)
        graph.add_node(name)

        superclass = resolver.superclass_of(name)
        if superclass:
            graph.add_edge(name, superclass)
            pending.append(superclass)
    return graph


def verify_type_hierarchy(model):
    """Reject cyclic `extends` chains; the exception walk must terminate."""
    graph = build_hierarchy_graph(model)
    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return

    names = [edge[0] for edge in cycle] + [cycle[0][0]]
    raise ModelValidationError(
        f"Cyclic type hierarchy: {' -> '.join(names)}",
        location="types",
    )
