"""Consistency checks for a loaded ancestry graph."""

import networkx as nx

from .graph import AncestryGraph

MIN_GENERATION_GAP = 12  # years


def is_spouse_kind(kind: str) -> bool:
    kind = kind.strip().lower()
    return kind.removesuffix(" of") == "spouse"


def validate_graph(graph: AncestryGraph) -> list[str]:
    """
    Validate the ancestry graph for:
    - Cycles along ancestor -> descendant relationships
    - Impossible ages (ancestor not older than descendant)
    - Suspicious ages (ancestor less than 12 years older)

    Spouse relationships are ignored. The graph is not modified.

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    descent_edges = list(
        dict.fromkeys(
            (u, v) for u, v, kind in graph.relationships() if not is_spouse_kind(kind)
        )
    )
    descent_graph = nx.DiGraph(descent_edges)

    try:
        cycle = nx.find_cycle(descent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in ancestry relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for ancestor_id, descendant_id in descent_edges:
        ancestor = graph.person(ancestor_id)
        descendant = graph.person(descendant_id)
        if ancestor.age is None or descendant.age is None:
            continue

        if ancestor.age <= descendant.age:
            warnings.append(
                f"Impossible: {ancestor.display_name}({ancestor_id}) is not older than "
                f"descendant {descendant.display_name}({descendant_id})"
            )
        elif ancestor.age - descendant.age < MIN_GENERATION_GAP:
            warnings.append(
                f"Suspicious: {ancestor.display_name}({ancestor_id}) is less than "
                f"{MIN_GENERATION_GAP} years older than {descendant.display_name}({descendant_id})"
            )

    return warnings
