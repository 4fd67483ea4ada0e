"""
A candidate labeling of a sentence
"""

DEFAULT_TRIGGER_LABEL = "O"
DEFAULT_ARGUMENT_LABEL = "NON"

def isArgumentable(label):
    """
    Only tokens that are labeled as triggers can have arguments.
    """
    return label != DEFAULT_TRIGGER_LABEL

class SentenceAssignment:
    """
    The joint labeling of a sentence under evaluation. Each token has a trigger label (the
    default label "O" marks non-triggers). Each trigger has an edge assignment mapping
    mention indices to argument role ids. A mention missing from the edge assignment has
    not been decided for that trigger yet, while the default role "NON" means it is not an
    argument of the trigger.

    Labels are stored as ids of the shared alphabets.
    """
    def __init__(self, alphabets, length, numMentions=None):
        """
        @type alphabets: Alphabets
        @type length: int
        @param length: number of tokens in the sentence
        @type numMentions: int or None
        @param numMentions: number of argument candidates, mention indices are not range checked if None
        """
        self.alphabets = alphabets
        self.numMentions = numMentions
        self.defaultLabelId = alphabets.nodeTargetAlphabet.getId(DEFAULT_TRIGGER_LABEL, True)
        self.defaultRoleId = alphabets.edgeTargetAlphabet.getId(DEFAULT_ARGUMENT_LABEL, True)
        self.nodeAssignment = [self.defaultLabelId] * length
        self.edgeAssignment = {}

    def __len__(self):
        return len(self.nodeAssignment)

    def _checkIndex(self, index):
        if index < 0 or index >= len(self.nodeAssignment):
            raise IndexError("Token index " + str(index) + " out of range (" + str(len(self.nodeAssignment)) + " tokens)")

    def setLabelAtToken(self, index, label):
        """
        Set the trigger label of a token. Setting the default label removes the
        token's edge assignment.
        """
        self._checkIndex(index)
        labelId = self.alphabets.nodeTargetAlphabet.getId(label)
        assert labelId != None, "Unknown trigger label " + str(label)
        self.nodeAssignment[index] = labelId
        if label == DEFAULT_TRIGGER_LABEL:
            self.edgeAssignment.pop(index, None)
        elif index not in self.edgeAssignment:
            self.edgeAssignment[index] = {}

    def getLabelAtToken(self, index):
        self._checkIndex(index)
        return self.alphabets.nodeTargetAlphabet.getName(self.nodeAssignment[index])

    def setRole(self, triggerIndex, entityIndex, role):
        """
        Assign an argument role to a mention for a trigger. The token must already have
        a trigger label.
        """
        self._checkIndex(triggerIndex)
        if entityIndex < 0 or (self.numMentions != None and entityIndex >= self.numMentions):
            raise IndexError("Mention index " + str(entityIndex) + " out of range (" + str(self.numMentions) + " mentions)")
        assert self.nodeAssignment[triggerIndex] != self.defaultLabelId, "Token " + str(triggerIndex) + " is not a trigger"
        roleId = self.alphabets.edgeTargetAlphabet.getId(role)
        assert roleId != None, "Unknown argument role " + str(role)
        self.edgeAssignment[triggerIndex][entityIndex] = roleId

    def getRoles(self, triggerIndex):
        """
        Returns the edge assignment (mention index -> role id) of a trigger, or None
        if the token has none.
        """
        self._checkIndex(triggerIndex)
        return self.edgeAssignment.get(triggerIndex)

    def getRoleName(self, roleId):
        return self.alphabets.edgeTargetAlphabet.getName(roleId)

    def getRole(self, triggerIndex, entityIndex):
        """
        Returns the role name of a mention for a trigger, or None if it has not been assigned.
        """
        roles = self.getRoles(triggerIndex)
        if roles == None or entityIndex not in roles:
            return None
        return self.getRoleName(roles[entityIndex])

    def getTriggerIndices(self):
        return [i for i in range(len(self.nodeAssignment)) if self.nodeAssignment[i] != self.defaultLabelId]

    @classmethod
    def fromDict(cls, instance, data):
        """
        Build the annotated assignment of a sentence. The "triggers" value maps token
        indices to trigger labels and "arguments" is a list of {"trigger", "mention", "role"}
        objects. Mentions that are not arguments of a trigger get the default role.
        """
        assn = cls(instance.alphabets, len(instance), len(instance.mentions))
        for index, label in sorted((int(k), v) for k, v in data.get("triggers", {}).items()):
            assn.setLabelAtToken(index, label)
        for triggerIndex in assn.getTriggerIndices():
            for entityIndex in range(len(instance.mentions)):
                assn.setRole(triggerIndex, entityIndex, DEFAULT_ARGUMENT_LABEL)
        for argument in data.get("arguments", []):
            entityIndex = int(argument["mention"])
            assn.setRole(int(argument["trigger"]), entityIndex, argument["role"])
        return assn
