"""Shortest ancestry path between two people."""

import logging
from dataclasses import replace

from .errors import NoPathFound, UnknownIdentifier
from .graph import AncestryGraph
from .models import AncestryPath, PathStep

logger = logging.getLogger(__name__)


def find_path(graph: AncestryGraph, ancestor_id: str, descendant_id: str) -> AncestryPath:
    """
    Find the shortest chain of relationships leading from ancestor to descendant.

    Edges are followed in their stored direction (ancestor -> descendant).
    Querying a person against themselves yields a single-person path.

    Raises:
        UnknownIdentifier: if either id is not in the graph.
        NoPathFound: if the descendant cannot be reached from the ancestor.
    """
    for person_id, role in ((ancestor_id, "ancestor"), (descendant_id, "descendant")):
        if person_id not in graph:
            raise UnknownIdentifier(person_id, role)

    person_ids = graph.shortest_path(ancestor_id, descendant_id)
    if person_ids is None:
        raise NoPathFound(ancestor_id, descendant_id)

    steps = []
    for current, following in zip(person_ids, person_ids[1:] + [None]):
        kind = graph.relationship_kind(current, following) if following is not None else None
        steps.append(PathStep(person=replace(graph.person(current)), kind=kind))

    logger.debug("Path %s -> %s has %d hop(s)", ancestor_id, descendant_id, len(steps) - 1)
    return AncestryPath(steps=tuple(steps))
