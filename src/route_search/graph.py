"""
Adjacency graph construction for route search.

Turns a flat list of priced, directed edges into an adjacency mapping
that preserves input order, so traversal order is deterministic.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

# (destination, price)
Neighbour = Tuple[str, int]
Graph = Mapping[str, Sequence[Neighbour]]


@dataclass(frozen=True, slots=True)
class Edge:
    """
    One directed flight option between two airport codes.

    Edges are assumed to be validated upstream (no self-loops,
    non-negative price).
    """

    source: str
    destination: str
    price: int


def build_graph(edges: Iterable[Edge]) -> Dict[str, List[Neighbour]]:
    """
    Build an adjacency mapping from a sequence of edges.

    Every source code maps to its outgoing (destination, price) pairs in
    the order they appear in ``edges``. Duplicate pairs are kept. Codes
    that only ever appear as a destination are not keys; use
    :func:`neighbours` for lookups that tolerate missing codes.

    Args:
        edges: Edges in storage order.

    Returns:
        Dict mapping source code to list of (destination, price).

    Example:
        >>> build_graph([Edge("NYC", "LAX", 300), Edge("NYC", "CHI", 200)])
        {'NYC': [('LAX', 300), ('CHI', 200)]}
    """
    graph: Dict[str, List[Neighbour]] = defaultdict(list)
    for edge in edges:
        graph[edge.source].append((edge.destination, edge.price))
    return dict(graph)


def neighbours(graph: Graph, city: str) -> Sequence[Neighbour]:
    """Outgoing edges of ``city``, empty if it has none."""
    return graph.get(city, ())
