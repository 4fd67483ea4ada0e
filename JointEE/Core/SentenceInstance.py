"""
Main class for representing a sentence
"""
import sys
import gzip
import json
from JointEE.Core.Mention import Mention
from JointEE.Core.DependencyGraph import DependencyGraph

class Token:
    """
    A word token with its precomputed annotation. The clause id and the synonym set
    are optional and None when not available.
    """
    def __init__(self, index, text, POS, clause=None, synonyms=None):
        self.index = index
        self.text = text
        self.POS = POS
        self.clause = clause
        if synonyms != None:
            synonyms = frozenset(synonyms)
        self.synonyms = synonyms

    def __repr__(self):
        return "Token(" + str(self.index) + ", " + self.text + "/" + str(self.POS) + ")"

    @classmethod
    def fromDict(cls, index, data):
        return cls(index, data["text"], data.get("POS"), data.get("clause"), data.get("synonyms"))

class SentenceInstance:
    """
    SentenceInstance connects the tokens of a sentence, the event argument candidates
    (mentions) and the dependency parse. The mentions are ordered by their position in
    the text, and are referred to by their index in this order. The dependency graph
    may be missing, in which case no path features are built for the sentence.
    """
    def __init__(self, tokens, mentions=None, dependencyGraph=None, alphabets=None, id=None):
        """
        @type tokens: list of Token objects
        @type mentions: list of Mention objects
        @type dependencyGraph: DependencyGraph or None
        @type alphabets: Alphabets
        @param alphabets: the label alphabets shared by all sentences of a corpus
        """
        self.id = id
        self.tokens = tokens
        if mentions == None:
            mentions = []
        self.mentions = mentions
        self.dependencyGraph = dependencyGraph
        self.alphabets = alphabets
        for mention in self.mentions:
            if mention.extent[0] < 0 or mention.extent[1] >= len(self.tokens):
                raise IndexError("Mention " + str(mention) + " is outside sentence " + str(self.id))

    def __len__(self):
        return len(self.tokens)

    def getToken(self, index):
        if index < 0 or index >= len(self.tokens):
            raise IndexError("Token index " + str(index) + " out of range for sentence " + str(self.id))
        return self.tokens[index]

    def getMention(self, index):
        if index < 0 or index >= len(self.mentions):
            raise IndexError("Mention index " + str(index) + " out of range for sentence " + str(self.id))
        return self.mentions[index]

    def getPOS(self, index):
        return self.getToken(index).POS

    def getTokenText(self, index):
        return self.getToken(index).text

    def getShortestPath(self, fromSet, toSet):
        """
        The shortest dependency path between two token sets, or None if the sentence
        has no parse or the sets are not connected.
        """
        if self.dependencyGraph == None:
            return None
        return self.dependencyGraph.getShortestPath(fromSet, toSet)

    @classmethod
    def fromDict(cls, data, alphabets=None):
        tokens = [Token.fromDict(i, x) for i, x in enumerate(data["tokens"])]
        mentions = [Mention.fromDict(x) for x in data.get("mentions", [])]
        graph = None
        if data.get("dependencies") != None:
            graph = DependencyGraph.fromDependencies(len(tokens), data["dependencies"])
        return cls(tokens, mentions, graph, alphabets, data.get("id"))

def openFile(filename, mode="rt"):
    if filename.endswith(".gz"):
        return gzip.open(filename, mode, encoding="utf-8")
    else:
        return open(filename, mode, encoding="utf-8")

def loadSentences(filename, alphabets=None):
    """
    Read sentences from a JSON lines file, one sentence object per line. Yields
    (SentenceInstance, data) pairs, where data is the decoded JSON object, so that
    the caller can also read the annotated assignment from it.
    """
    print("Loading sentences from", filename, file=sys.stderr)
    f = openFile(filename)
    try:
        for line in f:
            line = line.strip()
            if line == "" or line.startswith("#"):
                continue
            data = json.loads(line)
            yield SentenceInstance.fromDict(data, alphabets), data
    finally:
        f.close()

def countSentences(filename):
    f = openFile(filename)
    count = 0
    for line in f:
        if line.strip() != "" and not line.startswith("#"):
            count += 1
    f.close()
    return count
