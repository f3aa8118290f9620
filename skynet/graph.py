import networkx as nx


class Graph:
    """
    Undirected, unweighted graph over integer node labels.

    Stored as an adjacency dict {label: set(neighbor labels)}.
    Every link is kept in both endpoints' sets.
    """

    def __init__(self):
        self.adj = {}

    @classmethod
    def from_edges(cls, pairs):
        graph = cls()
        for a, b in pairs:
            graph.insert_edge(a, b)
        return graph

    def insert_edge(self, a, b):
        """Links a and b, creating either node if it is new. Safe to repeat."""
        self.adj.setdefault(a, set()).add(b)
        self.adj.setdefault(b, set()).add(a)

    def has_edge(self, a, b):
        if a not in self.adj or b not in self.adj:
            return False
        return b in self.adj[a] and a in self.adj[b]

    def remove_edge(self, a, b):
        """Severs the link both ways. Does nothing if there is no such link."""
        if a in self.adj:
            self.adj[a].discard(b)
        if b in self.adj:
            self.adj[b].discard(a)

    def find_node(self, label):
        # Lookup only. Use insert_edge to add nodes.
        return label in self.adj

    def neighbors(self, label):
        """Returns the neighbors of a node in ascending label order."""
        if label not in self.adj:
            return []
        return sorted(self.adj[label])

    def degree(self, label):
        return len(self.adj.get(label, ()))

    def nodes(self):
        return sorted(self.adj)

    def edges(self):
        """Each undirected link once, as (low, high), sorted."""
        found = set()
        for a, linked in self.adj.items():
            for b in linked:
                found.add((min(a, b), max(a, b)))
        return sorted(found)

    def copy(self):
        clone = Graph()
        clone.adj = {label: set(linked) for label, linked in self.adj.items()}
        return clone

    def to_networkx(self):
        """Copies the current state into a networkx graph for drawing."""
        G = nx.Graph()
        G.add_nodes_from(self.nodes())
        G.add_edges_from(self.edges())
        return G

    def __contains__(self, label):
        return self.find_node(label)

    def __len__(self):
        return len(self.adj)

    def __repr__(self):
        return f"Graph({len(self.adj)} nodes, {len(self.edges())} links)"
