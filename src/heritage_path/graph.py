"""NetworkX-backed ancestry graph and the builder that folds records into it."""

import logging
from collections.abc import Iterable
from dataclasses import replace

import networkx as nx

from .errors import ConflictingPersonData
from .models import Person, PersonRecord, RelationshipRecord

logger = logging.getLogger(__name__)


def id_sort_key(person_id: str) -> tuple:
    """Canonical ordering of person ids: numeric ids by value first, then the rest as text."""
    if person_id.isascii() and person_id.isdigit():
        return (0, int(person_id), person_id)
    return (1, 0, person_id)


def _sorted_ids(ids: Iterable[str]) -> list[str]:
    return sorted(ids, key=id_sort_key)


class AncestryGraph:
    """
    Directed multigraph of people and the relationships between them.

    Nodes are keyed by person id and carry a ``person`` attribute; each edge
    points from ancestor to descendant and carries a ``kind`` label. Parallel
    edges are kept in insertion order.
    """

    def __init__(self):
        self._graph = nx.MultiDiGraph()

    def __contains__(self, person_id) -> bool:
        return person_id in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def number_of_people(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def number_of_relationships(self) -> int:
        return self._graph.number_of_edges()

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    @property
    def nx_graph(self) -> nx.MultiDiGraph:
        """The underlying networkx graph (read-only once the graph is frozen)."""
        return self._graph

    def add_person(self, person_id: str) -> None:
        if person_id not in self._graph:
            self._graph.add_node(person_id, person=Person(person_id))

    def add_relationship(self, source_id: str, target_id: str, kind: str) -> None:
        self.add_person(source_id)
        self.add_person(target_id)
        self._graph.add_edge(source_id, target_id, kind=kind)

    def set_person(self, person: Person) -> None:
        self._graph.nodes[person.id]["person"] = person

    def freeze(self) -> None:
        nx.freeze(self._graph)

    def person(self, person_id: str) -> Person:
        return self._graph.nodes[person_id]["person"]

    def people(self) -> list[Person]:
        return [self.person(n) for n in _sorted_ids(self._graph.nodes)]

    def relationships(self) -> list[tuple[str, str, str]]:
        """All edges as (source_id, target_id, kind), in insertion order."""
        return [(u, v, d["kind"]) for u, v, d in self._graph.edges(data=True)]

    def relationship_kind(self, source_id: str, target_id: str) -> str:
        """Label of the first-inserted edge from source to target."""
        parallel = self._graph[source_id][target_id]
        return next(iter(parallel.values()))["kind"]

    def shortest_path(self, source_id: str, target_id: str) -> list[str] | None:
        """
        Breadth-first shortest directed path from source to target.

        Neighbours are expanded in id_sort_key order and every node keeps the
        first predecessor that reaches it, so among equally short paths the one
        with the smallest node sequence under that order is returned.

        Returns:
            The list of person ids from source to target, or None if target is
            not reachable.
        """
        if source_id == target_id:
            return [source_id]

        predecessors = {}
        for node, predecessor in nx.bfs_predecessors(
            self._graph, source_id, sort_neighbors=_sorted_ids
        ):
            predecessors[node] = predecessor
            if node == target_id:
                break
        else:
            return None

        path = [target_id]
        while path[-1] != source_id:
            path.append(predecessors[path[-1]])
        path.reverse()
        return path


class GraphBuilder:
    """Fold parsed records into an AncestryGraph, in file order."""

    def __init__(self):
        self._graph = AncestryGraph()
        self._people: dict[str, Person] = {}

    def add(self, record: PersonRecord | RelationshipRecord) -> None:
        if isinstance(record, RelationshipRecord):
            self._merge_person(record.source)
            self._merge_person(record.target)
            self._graph.add_relationship(record.source.person_id, record.target.person_id, record.kind)
        else:
            self._merge_person(record)

    def _merge_person(self, record: PersonRecord) -> None:
        person = self._people.get(record.person_id)
        if person is None:
            self._people[record.person_id] = Person(record.person_id, record.name, record.age)
            return

        # First stated value wins; a missing value never conflicts
        updates = {}
        for attribute in ("name", "age"):
            new = getattr(record, attribute)
            if new is None:
                continue
            existing = getattr(person, attribute)
            if existing is None:
                updates[attribute] = new
            elif existing != new:
                raise ConflictingPersonData(
                    record.person_id, attribute, existing, new, record.line_no
                )
        if updates:
            self._people[record.person_id] = replace(person, **updates)

    def build(self) -> AncestryGraph:
        graph = self._graph
        # Only people referenced by a relationship become nodes
        for person_id in list(graph.nx_graph.nodes):
            graph.set_person(self._people[person_id])
        graph.freeze()
        logger.info(
            "Built graph with %d people and %d relationships",
            graph.number_of_people,
            graph.number_of_relationships,
        )
        return graph


def build_graph(records: Iterable[PersonRecord | RelationshipRecord]) -> AncestryGraph:
    """Build a frozen AncestryGraph from parsed records.

    Raises the first parsing or ConflictingPersonData error encountered; no
    partial graph is returned.
    """
    builder = GraphBuilder()
    for record in records:
        builder.add(record)
    return builder.build()
