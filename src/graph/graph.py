# src/graph/graph.py — v1
"""Undirected simple graph on adjacency sets.

Vertices are created on first insertion and receive dense, monotonically
increasing ids. Edges are unordered pairs; self-loops are ignored and a pair
is stored at most once, so edge_count always equals the number of distinct
pairs. The community detection loop mutates a copy, never the caller's graph.
"""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from gncommunities.core.errors import EmptyGraphError, UnknownVertexError
from gncommunities.core.models import Edge, Partition, Vertex

if TYPE_CHECKING:
    import networkx as nx

VertexRef = Vertex | str


class Graph:
    """Adjacency-set graph keyed by :class:`Vertex`."""

    def __init__(self) -> None:
        self._adj: dict[Vertex, set[Vertex]] = {}
        self._by_name: dict[str, Vertex] = {}
        self._by_id: list[Vertex] = []
        self._edge_count = 0

    # --- Construction ---

    @classmethod
    def from_edge_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Graph:
        """Build a graph from (name, name) pairs."""
        g = cls()
        for a, b in pairs:
            g.add_edge(a, b)
        return g

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> Graph:
        """Build from a NetworkX graph. Node labels become vertex names."""
        g = cls()
        for node in nx_graph.nodes:
            g.add_vertex(str(node))
        for a, b in nx_graph.edges:
            g.add_edge(str(a), str(b))
        return g

    def to_networkx(self) -> nx.Graph:
        """Export as a NetworkX graph labelled by vertex name."""
        import networkx as nx

        out = nx.Graph()
        out.add_nodes_from(v.name for v in self._by_id)
        out.add_edges_from((e.u.name, e.v.name) for e in self.edges())
        return out

    def copy(self) -> Graph:
        """Deep copy: same vertex identities, independent adjacency."""
        g = Graph()
        g._adj = {v: set(nbrs) for v, nbrs in self._adj.items()}
        g._by_name = dict(self._by_name)
        g._by_id = list(self._by_id)
        g._edge_count = self._edge_count
        return g

    # --- Mutation ---

    def add_vertex(self, name: str) -> Vertex:
        """Return the vertex called ``name``, creating it if absent."""
        vertex = self._by_name.get(name)
        if vertex is None:
            vertex = Vertex(len(self._by_id), name)
            self._by_name[name] = vertex
            self._by_id.append(vertex)
            self._adj[vertex] = set()
        return vertex

    def add_edge(self, a: VertexRef, b: VertexRef) -> Edge | None:
        """Insert the edge {a, b}. Returns None for a self-loop."""
        u = self._ensure(a)
        v = self._ensure(b)
        if u == v:
            return None
        if v not in self._adj[u]:
            self._adj[u].add(v)
            self._adj[v].add(u)
            self._edge_count += 1
        return Edge(u, v)

    def remove_edge(self, a: VertexRef, b: VertexRef) -> bool:
        """Remove the edge {a, b}. Returns False if it was not present."""
        u = self._lookup(a)
        v = self._lookup(b)
        if u is None or v is None or v not in self._adj[u]:
            return False
        self._adj[u].discard(v)
        self._adj[v].discard(u)
        self._edge_count -= 1
        return True

    # --- Queries ---

    @property
    def vertex_count(self) -> int:
        return len(self._by_id)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex | str):
            return self._lookup(item) is not None
        return False

    def vertex(self, name: str) -> Vertex:
        """Look up a vertex by name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownVertexError(f"Unknown vertex: {name!r}") from None

    def vertices(self) -> list[Vertex]:
        """All vertices in id order."""
        return list(self._by_id)

    def has_edge(self, a: VertexRef, b: VertexRef) -> bool:
        u = self._lookup(a)
        v = self._lookup(b)
        return u is not None and v is not None and v in self._adj[u]

    def neighbors(self, v: VertexRef) -> frozenset[Vertex]:
        vertex = self._lookup(v)
        if vertex is None:
            return frozenset()
        return frozenset(self._adj[vertex])

    def iter_neighbors(self, v: Vertex) -> Iterator[Vertex]:
        """Iterate the live neighbor set of a vertex known to be in the graph."""
        return iter(self._adj[v])

    def degree(self, v: VertexRef) -> int:
        vertex = self._lookup(v)
        return len(self._adj[vertex]) if vertex is not None else 0

    def edges(self) -> list[Edge]:
        """Every unordered pair exactly once, sorted by endpoint ids."""
        out = [Edge(u, w) for u in self._by_id for w in self._adj[u] if u < w]
        out.sort()
        return out

    def random_vertex(self, rng: random.Random) -> Vertex:
        """Pick a vertex uniformly at random."""
        if not self._by_id:
            raise EmptyGraphError("Cannot pick a random vertex from an empty graph")
        return self._by_id[rng.randrange(len(self._by_id))]

    # --- Traversal ---

    def bfs_distances(self, source: VertexRef) -> dict[Vertex, int]:
        """Hop distance from ``source`` to every reachable vertex (source at 0)."""
        start = self._require(source)
        dist = {start: 0}
        queue = deque([start])
        while queue:
            v = queue.popleft()
            d = dist[v] + 1
            for w in self._adj[v]:
                if w not in dist:
                    dist[w] = d
                    queue.append(w)
        return dist

    def diameter(self) -> int:
        """Exact diameter: max over all-pairs BFS distances. O(V(V+E))."""
        best = 0
        for v in self._by_id:
            far = max(self.bfs_distances(v).values())
            if far > best:
                best = far
        return best

    def connected_components(self) -> Partition:
        """Label components by BFS flood fill, ids in order of first seed."""
        labels: dict[Vertex, int] = {}
        next_id = 0
        for seed in self._by_id:
            if seed in labels:
                continue
            labels[seed] = next_id
            queue = deque([seed])
            while queue:
                v = queue.popleft()
                for w in self._adj[v]:
                    if w not in labels:
                        labels[w] = next_id
                        queue.append(w)
            next_id += 1
        return labels

    # --- Internals ---

    def _lookup(self, ref: VertexRef) -> Vertex | None:
        if isinstance(ref, Vertex):
            if ref.id < len(self._by_id) and self._by_id[ref.id].name == ref.name:
                return ref
            return None
        return self._by_name.get(ref)

    def _require(self, ref: VertexRef) -> Vertex:
        vertex = self._lookup(ref)
        if vertex is None:
            name = ref.name if isinstance(ref, Vertex) else ref
            raise UnknownVertexError(f"Unknown vertex: {name!r}")
        return vertex

    def _ensure(self, ref: VertexRef) -> Vertex:
        if isinstance(ref, Vertex):
            found = self._lookup(ref)
            return found if found is not None else self.add_vertex(ref.name)
        return self.add_vertex(ref)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
