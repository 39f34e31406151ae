import networkx as nx
from typing import Iterable, Iterator, List, Tuple


class ConflictValidationError(ValueError):
    pass


class ConflictRelation:
    """
    Unordered "do not place together" pairs over student ids.
    Stored as an undirected graph, so (a, b) and (b, a) are the same edge.
    """

    def __init__(self, graph: nx.Graph = None):
        self._graph = graph if graph is not None else nx.Graph()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "ConflictRelation":
        relation = cls()
        for a, b in pairs:
            relation.add(a, b)
        return relation

    def add(self, a: str, b: str) -> None:
        if a == b:
            raise ConflictValidationError(f"Student {a!r} cannot conflict with themselves")
        self._check_writable()
        # add_edge on an existing edge is a no-op
        self._graph.add_edge(a, b)

    def remove(self, a: str, b: str) -> None:
        self._check_writable()
        if self._graph.has_edge(a, b):
            self._graph.remove_edge(a, b)

    def contains(self, a: str, b: str) -> bool:
        return self._graph.has_edge(a, b)

    def pairs_of(self, student: str) -> List[str]:
        if student not in self._graph:
            return []
        return list(self._graph.neighbors(student))

    def snapshot(self) -> "ConflictRelation":
        """Frozen copy handed to a single partition run."""
        return ConflictRelation(nx.freeze(self._graph.copy()))

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    @property
    def graph(self) -> nx.Graph:
        return self._graph

    def _check_writable(self):
        if self.frozen:
            raise ConflictValidationError("Conflict snapshot is read-only")

    def __len__(self) -> int:
        return self._graph.number_of_edges()

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._graph.edges())

    def __repr__(self) -> str:
        return f"ConflictRelation({sorted(tuple(sorted(p)) for p in self)!r})"
