"""
For representing the dependency parse of a sentence. Should be deterministic.
"""
import networkx as NX

class PathTerm:
    """
    One step of a dependency path. A term is either a vertex (a token index) or an
    edge (a dependency type). Paths alternate vertex, edge, vertex, ..., edge, vertex.
    """
    __slots__ = ("isVertex", "vertex", "edge")

    def __init__(self, vertex=None, edge=None):
        assert (vertex == None) != (edge == None), (vertex, edge)
        self.isVertex = vertex != None
        self.vertex = vertex
        self.edge = edge

    def __eq__(self, other):
        return isinstance(other, PathTerm) and self.vertex == other.vertex and self.edge == other.edge

    def __hash__(self):
        return hash((self.vertex, self.edge))

    def __repr__(self):
        if self.isVertex:
            return "Vertex(" + str(self.vertex) + ")"
        else:
            return "Edge(" + self.edge + ")"

    def __str__(self):
        if self.isVertex:
            return str(self.vertex)
        else:
            return self.edge

def Vertex(index):
    return PathTerm(vertex=index)

def Edge(label):
    return PathTerm(edge=label)

def _toSet(indices):
    if isinstance(indices, int):
        return [indices]
    return sorted(set(indices))

class DependencyGraph:
    """
    The syntactic dependency graph of a sentence. Nodes are token indices and edges are
    labeled with the dependency type. Shortest paths are searched in the undirected
    version of the graph.

    When several paths have the minimum length, the path with the lexicographically
    smallest sequence of token indices is returned. When two tokens are connected by
    more than one dependency, the alphabetically first dependency type is used.
    """
    def __init__(self, numTokens=0):
        self.graph = NX.MultiGraph()
        self.graph.add_nodes_from(range(numTokens))
        self.__resetAnalyses()

    def __resetAnalyses(self):
        self.__pathCache = {}

    def __len__(self):
        return self.graph.number_of_nodes()

    def addNode(self, index):
        if index in self.graph:
            return False
        self.__resetAnalyses()
        self.graph.add_node(index)
        return True

    def addEdge(self, governor, dependent, type):
        """
        Add a dependency. Duplicate dependencies (same tokens and type) are ignored.

        @type governor: int
        @type dependent: int
        @type type: str
        @param type: the dependency type, e.g. "nsubj"
        """
        if self.hasEdge(governor, dependent, type):
            return False
        self.__resetAnalyses()
        self.graph.add_edge(governor, dependent, key=type, governor=governor)
        return True

    def hasEdge(self, node1, node2, type):
        return self.graph.has_edge(node1, node2, key=type)

    def getEdgeTypes(self, node1, node2):
        """
        Returns the sorted dependency types connecting two tokens, in either direction.
        """
        if not self.graph.has_edge(node1, node2):
            return []
        return sorted(self.graph[node1][node2].keys())

    def getShortestPath(self, fromSet, toSet):
        """
        Returns the shortest path between any token in fromSet and any token in toSet as a
        list of PathTerms, starting from a token of fromSet. Returns None if the token sets
        are not connected.

        @type fromSet: int or iterable of ints
        @type toSet: int or iterable of ints
        @rtype: list of PathTerm objects or None
        """
        sources = _toSet(fromSet)
        targets = _toSet(toSet)
        cacheKey = (tuple(sources), tuple(targets))
        if cacheKey in self.__pathCache:
            return self.__pathCache[cacheKey]
        for index in sources + targets:
            if index not in self.graph:
                raise IndexError("Token " + str(index) + " is not in the dependency graph")

        best = None
        for source in sources:
            for target in targets:
                if not NX.has_path(self.graph, source, target):
                    continue
                for nodePath in NX.all_shortest_paths(self.graph, source, target):
                    if best == None or (len(nodePath), nodePath) < (len(best), best):
                        best = nodePath
        path = None
        if best != None:
            path = [Vertex(best[0])]
            for i in range(1, len(best)):
                path.append(Edge(self.getEdgeTypes(best[i-1], best[i])[0]))
                path.append(Vertex(best[i]))
        self.__pathCache[cacheKey] = path
        return path

    @classmethod
    def fromDependencies(cls, numTokens, dependencies):
        """
        Build the graph from dependency dictionaries with the keys "t1" (governor),
        "t2" (dependent) and "type".
        """
        graph = cls(numTokens)
        for dependency in dependencies:
            t1 = int(dependency["t1"])
            t2 = int(dependency["t2"])
            if t1 not in graph.graph or t2 not in graph.graph:
                raise IndexError("Dependency " + str(dependency) + " refers to a token outside the sentence")
            graph.addEdge(t1, t2, dependency["type"])
        return graph
