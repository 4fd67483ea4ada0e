"""
Event argument candidates
"""
import JointEE.Utils.Range as Range

# Mention kinds
ENTITY = "Entity"
VALUE = "Value"
TIMEX = "Timex"
KINDS = (ENTITY, VALUE, TIMEX)

class Mention:
    """
    A text span that can fill an argument role of an event. All kinds of mentions have an
    extent, a head and a type, so feature builders don't need to know which kind they are
    dealing with. Only entity mentions (named, nominal or pronominal) have a head that differs
    from the extent; values (e.g. Job-Title, Crime) and time expressions are headed by their
    whole extent unless a head is given.

    Mentions that refer to the same real-world entity share a coreference parent. The parent
    is a reference only, usually the id of the entity the mention belongs to.
    """
    def __init__(self, extent, head=None, type=None, kind=ENTITY, parent=None, id=None):
        """
        @type extent: tuple of two ints
        @param extent: first and last token index of the mention
        @type head: tuple of two ints
        @param head: first and last token index of the head, within the extent
        @type type: str
        @param type: the annotated type, e.g. "PER" or "Job-Title"
        @type kind: str
        @param kind: one of ENTITY, VALUE and TIMEX
        @param parent: coreference chain representative, or None
        """
        assert kind in KINDS, kind
        extent = tuple(extent)
        if head == None:
            head = extent
        head = tuple(head)
        assert Range.isValid(extent), extent
        assert Range.isValid(head), head
        assert Range.within(head, extent), (head, extent)
        self.extent = extent
        self.head = head
        self.type = type
        self.kind = kind
        self.parent = parent
        self.id = id

    def __repr__(self):
        return "Mention(" + str(self.id) + ", " + self.kind + ":" + str(self.type) + ", " + str(self.extent) + ")"

    def isEntity(self):
        return self.kind == ENTITY

    def getExtent(self):
        return self.extent

    def getHead(self):
        return self.head

    def getType(self):
        return self.type

    def getParent(self):
        return self.parent

    def getExtentIndices(self):
        return Range.indices(self.extent)

    def getHeadIndices(self):
        return Range.indices(self.head)

    def isCoreferent(self, other):
        """
        Two mentions are coreferent if they have the same, defined parent.
        """
        return self.parent != None and other.parent != None and self.parent == other.parent

    @classmethod
    def fromDict(cls, data):
        head = data.get("head")
        return cls(data["extent"], head, data.get("type"), data.get("kind", ENTITY), data.get("parent"), data.get("id"))
