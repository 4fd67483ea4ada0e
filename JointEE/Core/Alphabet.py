"""
Manages trigger label and argument role ids.
"""
import gzip
import threading

class Alphabet:
    """
    A growth-only mapping from strings to id integers. This class is used for defining the ids
    for trigger labels and argument roles. Once a name has an id, the id never changes, so it
    can be shared between sentences processed in parallel. Defining new ids is guarded by a lock.
    """
    def __init__(self, firstNumber=0, idDict=None, locked=False, filename=None, allowNewIds=True):
        """
        Creates a new Alphabet or loads one from a dictionary or a file.

        To create a new, empty set: alphabet = Alphabet(firstNumber = x).
        To create a set from a str->int dictionary: alphabet = Alphabet(idDict = x).
        To load a dictionary from a file: alphabet = Alphabet(filename = x).

        @param firstNumber: The number given to the first name defined. Subsequent names will
        have higher numbers.
        @type firstNumber: int
        @param idDict: Dictionary of name / integer pairs. The integer values must be unique.
        @type idDict: dictionary
        @param locked: Whether new names can be added to the set. If set to True, getId will
        return None for names that are not already in the set.
        @type locked: boolean
        @param filename: load name/id pairs from a file
        @type filename: str
        """
        self.Ids = {}
        self.nextFreeId = firstNumber
        self._namesById = {}
        self._lock = threading.Lock()
        self.allowNewIds = allowNewIds # allow new ids when calling getId without specifying "createIfNotExist"

        self.locked = False
        if idDict != None:
            for name, id in sorted(idDict.items(), key=lambda x: x[1]):
                self.defineId(name, id)
        self.locked = locked

        if filename != None:
            self.load(filename)

    def getId(self, key, createIfNotExist=None):
        """
        Returns the id number for a name. If the name doesn't already have an id, a new id is defined,
        unless createIfNotExist is set to false, in which case None is returned for these cases.

        @type key: str
        @param key: name
        @type createIfNotExist: True, False or None
        @param createIfNotExist: If the name doesn't have an id, define an id for it
        @rtype: int or None
        @return: an identifier
        """
        if key in self.Ids:
            return self.Ids[key]
        if createIfNotExist == None: # no local override to object level setting
            createIfNotExist = self.allowNewIds
        if self.locked or createIfNotExist == False:
            return None
        with self._lock:
            # another thread may have defined the id while waiting for the lock
            if key not in self.Ids:
                id = self.nextFreeId
                self.nextFreeId += 1
                self._namesById[id] = key
                self.Ids[key] = id
        return self.Ids[key]

    def __getitem__(self, name):
        """
        Calls getId through the []-operator.
        """
        return self.getId(name)

    def __contains__(self, name):
        return name in self.Ids

    def __len__(self):
        return len(self.Ids)

    def defineId(self, name, id):
        """
        Give a specific id for a certain name. Neither the name nor the id must exist in the set.
        Usually this method is used only when inserting name/id pairs from an existing source.
        """
        assert(not self.locked)
        with self._lock:
            assert(not id in self._namesById), id
            assert(not name in self.Ids), name
            self.Ids[name] = id
            self._namesById[id] = name
            if id >= self.nextFreeId:
                self.nextFreeId = id + 1

    def getName(self, id):
        """
        Returns the name corresponding to the identifier. If the identifier doesn't exist, returns None.

        @param id: the identifier number
        @type id: int
        @rtype: str or None
        @return: a name
        """
        return self._namesById.get(id)

    def getNames(self):
        """
        Returns a sorted list of all names.
        """
        return sorted(self.Ids.keys())

    def getIds(self):
        """
        Returns a sorted list of id numbers.
        """
        return sorted(self.Ids.values())

    def write(self, filename):
        """
        Writes the name/id pairs to a file, one pair per line, in the format "name: id".
        """
        if filename.endswith(".gz"):
            f = gzip.open(filename, "wt", encoding="utf-8")
        else:
            f = open(filename, "wt", encoding="utf-8")
        for key in sorted(self.Ids.keys()):
            f.write(key + ": " + str(self.Ids[key]) + "\n")
        f.close()

    def load(self, filename):
        """
        Loads name/id pairs from a file. The Alphabet is cleared of all existing ids before
        loading the ones from the file.
        """
        if filename.endswith(".gz"):
            f = gzip.open(filename, "rt", encoding="utf-8")
        else:
            f = open(filename, "rt", encoding="utf-8")
        lines = f.readlines()
        f.close()

        with self._lock:
            self.Ids = {}
            self._namesById = {}
            self.nextFreeId = 0
            for line in lines:
                if line.strip() == "":
                    continue
                key, value = line.rsplit(":", 1)
                key = key.strip()
                value = int(value.strip())
                if value >= self.nextFreeId:
                    self.nextFreeId = value + 1
                self.Ids[key] = value
                self._namesById[value] = key

class Alphabets:
    """
    The label alphabets of a corpus pass. One Alphabets object is shared by all sentences,
    and passed to them explicitly through SentenceInstance.
    """
    def __init__(self, nodeTargetAlphabet=None, edgeTargetAlphabet=None):
        """
        @type nodeTargetAlphabet: Alphabet
        @param nodeTargetAlphabet: trigger label ids
        @type edgeTargetAlphabet: Alphabet
        @param edgeTargetAlphabet: argument role ids
        """
        if nodeTargetAlphabet == None:
            nodeTargetAlphabet = Alphabet()
        if edgeTargetAlphabet == None:
            edgeTargetAlphabet = Alphabet()
        self.nodeTargetAlphabet = nodeTargetAlphabet
        self.edgeTargetAlphabet = edgeTargetAlphabet

    def write(self, stem):
        """
        Writes the alphabets to "stem.labels" and "stem.roles".
        """
        self.nodeTargetAlphabet.write(stem + ".labels")
        self.edgeTargetAlphabet.write(stem + ".roles")

    @classmethod
    def load(cls, stem):
        return cls(Alphabet(filename=stem + ".labels"), Alphabet(filename=stem + ".roles"))
