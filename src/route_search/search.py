"""
Exhaustive depth-first enumeration of simple routes.

Every simple path from origin to destination is reported, optionally
bounded by a number of hops, and the results are ordered by ascending
total price. This is intentionally not a shortest-path search: all
routes are returned, not only the cheapest.

Worst case is exponential in the number of airports for dense graphs
without a hop limit.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .graph import Graph, Neighbour, neighbours


@dataclass(frozen=True, slots=True)
class FoundPath:
    """A completed simple path and its accumulated price."""

    cities: Tuple[str, ...]
    price: int

    @property
    def hops(self) -> int:
        return len(self.cities) - 1


def find_routes(
    graph: Graph,
    origin: str,
    destination: str,
    max_hops: Optional[int] = None,
) -> List[FoundPath]:
    """
    Enumerate all simple paths from ``origin`` to ``destination``.

    Args:
        graph: Adjacency mapping produced by ``build_graph``.
        origin: Starting airport code.
        destination: Target airport code.
        max_hops: Maximum number of edges per path (None = unbounded).

    Returns:
        Paths sorted by ascending price. Ties keep discovery order.
        Empty if the destination is unreachable or the origin unknown.
    """
    found: List[FoundPath] = []
    path: List[str] = [origin]
    on_path = {origin}

    def frame(price: int) -> Tuple[int, Iterator[Neighbour]]:
        city = path[-1]
        if city == destination:
            found.append(FoundPath(cities=tuple(path), price=price))
            return price, iter(())

        if max_hops is not None and len(path) - 1 >= max_hops:
            return price, iter(())

        return price, iter(neighbours(graph, city))

    # One frame per city on the path: len(stack) == len(path)
    stack = [frame(0)]
    while stack:
        price, options = stack[-1]
        for next_city, leg_price in options:
            # Simple paths only
            if next_city in on_path:
                continue

            path.append(next_city)
            on_path.add(next_city)
            stack.append(frame(price + leg_price))
            break
        else:
            stack.pop()
            if stack:
                on_path.discard(path.pop())

    # list.sort is stable, so equal prices keep traversal order
    found.sort(key=lambda p: p.price)
    return found
