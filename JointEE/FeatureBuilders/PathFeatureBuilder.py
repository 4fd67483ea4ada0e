"""
Shortest path features
"""
from JointEE.FeatureBuilders.FeatureBuilder import FeatureBuilder

TRIGGER_WORD = "TriggerWord"

def getPathDistance(terms):
    """
    The number of dependencies on a path, computed from its inner terms (the path
    without its end tokens).
    """
    return (len(terms) + 1) // 2

class PathFeatureBuilder(FeatureBuilder):
    """
    This feature builder describes the shortest undirected path of dependencies between two
    tokens or two token sets. The end tokens are left out and the inner tokens are abstracted
    into their part-of-speech tags, so that the path describes only the syntactic structure
    between the ends.
    """
    def __init__(self, style=None):
        FeatureBuilder.__init__(self, style)

    def getEdgeType(self, term):
        return term.edge

    def getVertexType(self, term, instance, triggerIndex=None):
        if triggerIndex != None and term.vertex == triggerIndex:
            return TRIGGER_WORD
        return instance.getPOS(term.vertex)

    def getPathTerms(self, instance, path, triggerIndex=None):
        """
        Convert the inner terms of a path into strings. Tokens become their POS tags, except
        for the trigger token, which becomes "TriggerWord". Dependencies become their types.

        @type path: list of PathTerm objects
        @type triggerIndex: int or None
        @param triggerIndex: the token to be marked as the trigger
        @rtype: list of str
        """
        terms = []
        for term in path[1:-1]:
            if term.isVertex:
                terms.append(self.getVertexType(term, instance, triggerIndex))
            else:
                terms.append(self.getEdgeType(term))
        return terms

    def getPath(self, instance, fromSet, toSet, triggerIndex=None):
        """
        Returns the path between two token sets as a (pathString, distance) tuple, or None
        if there is no path.
        """
        path = instance.getShortestPath(fromSet, toSet)
        if path == None:
            return None
        terms = self.getPathTerms(instance, path, triggerIndex)
        return "#".join(terms), getPathDistance(terms)

    def getTriggerPath(self, instance, trigger1, trigger2):
        """
        The path between two trigger tokens.
        """
        return self.getPath(instance, trigger1, trigger2)

    def getMentionPath(self, instance, mention1, mention2, triggerIndex):
        """
        The path between the heads of two mentions. The trigger token is marked if the
        path goes through it.
        """
        return self.getPath(instance, mention1.getHeadIndices(), mention2.getHeadIndices(), triggerIndex)
