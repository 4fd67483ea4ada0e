"""
Global features of a joint sentence assignment
"""
import JointEE.Utils.Range as Range
from JointEE.FeatureBuilders.FeatureBuilder import FeatureBuilder, sortedPair, boolString
from JointEE.FeatureBuilders.PathFeatureBuilder import PathFeatureBuilder
from JointEE.Core.TypeConstraints import TypeConstraints, foldRole
from JointEE.Core.SentenceAssignment import DEFAULT_TRIGGER_LABEL, DEFAULT_ARGUMENT_LABEL, isArgumentable

TITLE_TYPE = "Job-Title"
MAX_BETWEEN_GAP = 3 # tokens between two mentions are used only for short gaps
RELATED_ROLES = [("Attacker", "Target"), ("Victim", "Agent"), ("Agent", "Artifact")]

class GlobalFeatureBuilder(FeatureBuilder):
    """
    Global features describe the interactions of the labels in one joint assignment, as opposed
    to local features, which describe a single trigger or argument candidate in isolation. The
    features are built incrementally: a query is made for one trigger token, or for one
    argument candidate of a trigger, and only labels that precede the query point in the
    assignment (earlier tokens and earlier mentions) are considered.

    Style parameters:
      - maxDistance: longest dependency path (in dependencies) used for path features (3)
      - maxRoleCount: role counts above this are merged into one value (3)
      - timePrefix: roles starting with this are counted as one time role ("Time")
      - relatedRoles: also build features for mentions with related roles, e.g. Attacker/Target
    """
    def __init__(self, typeConstraints=None, style=None):
        """
        @type typeConstraints: TypeConstraints
        @param typeConstraints: the allowed argument roles of each trigger label, defaults to ACE 2005
        @type style: str or dictionary
        @param style: style parameters
        """
        FeatureBuilder.__init__(self, style,
                                defaults={"maxDistance":3, "maxRoleCount":3, "timePrefix":"Time", "relatedRoles":False},
                                valueTypes={"maxDistance":[int], "maxRoleCount":[int]})
        if typeConstraints == None:
            typeConstraints = TypeConstraints()
        self.typeConstraints = typeConstraints
        self.pathFeatureBuilder = PathFeatureBuilder()
        self.maxDistance = int(self.style["maxDistance"])
        self.maxRoleCount = int(self.style["maxRoleCount"])
        self.timePrefix = self.style["timePrefix"]
        self.relatedRoles = self.style["relatedRoles"] in (True, "True", "true", "1")

    def _checkSentence(self, instance, assn):
        assert len(instance) == len(assn), (len(instance), len(assn))

    def _getRole(self, assn, edgeAssn, entityIndex):
        """
        The role name of a mention in an edge assignment, or None if not assigned
        """
        if entityIndex not in edgeAssn:
            return None
        return assn.getRoleName(edgeAssn[entityIndex])

    ###########################################################################
    # Combined queries
    ###########################################################################

    def getFeatures(self, instance, assn, index, entityIndex=None, complete=False):
        """
        Build all global features for a query point. Without an entity index, the trigger
        features of token "index" are built, followed by the completion features if "complete"
        is set. With an entity index, the node level and sentence level features of that
        argument candidate are built.

        @type instance: SentenceInstance
        @type assn: SentenceAssignment
        @type index: int
        @param index: token index of the trigger
        @type entityIndex: int or None
        @param entityIndex: index of the argument candidate
        @type complete: boolean
        @param complete: the edge assignment of the trigger is complete
        @rtype: list of str
        """
        if entityIndex == None:
            features = self.getTriggerFeatures(instance, assn, index)
            if complete:
                features.extend(self.getNodeCompletionFeatures(instance, assn, index))
        else:
            features = self.getNodeLevelFeatures(instance, assn, index, entityIndex)
            features.extend(self.getSentenceLevelFeatures(instance, assn, index, entityIndex))
        return features

    ###########################################################################
    # Trigger features
    ###########################################################################

    def getTriggerFeatures(self, instance, assn, index):
        """
        Features of a trigger label together with the labels of the earlier triggers, e.g. for
        "O O Start-Position O O O End-Position", the label pair "End-Position#Start-Position".
        The token directly preceding the query token is not compared.
        """
        self._checkSentence(instance, assn)
        features = []
        self.setFeatureVector(features)
        nodeLabel = assn.getLabelAtToken(index)
        preLabels = [] # distinct labels of the earlier triggers
        for j in range(index - 1):
            preLabel = assn.getLabelAtToken(j)
            if preLabel == DEFAULT_TRIGGER_LABEL:
                continue
            if nodeLabel != DEFAULT_TRIGGER_LABEL:
                if preLabel not in preLabels:
                    preLabels.append(preLabel)
                pair = sortedPair(nodeLabel, preLabel)
                self.setFeature("triggerPairSameClause=" + pair + "#" + boolString(self.isSameClause(instance, index, j)))
                path = self.pathFeatureBuilder.getTriggerPath(instance, index, j)
                if path != None and path[1] <= self.maxDistance:
                    self.setFeature("triggerPairDepPath=" + pair + "#" + path[0])
            sameWord = self.checkSameWordConsistency(instance, index, j, nodeLabel, preLabel)
            if sameWord != None:
                self.setFeature("SameWordSameLabel=" + sameWord)

        if nodeLabel != DEFAULT_TRIGGER_LABEL:
            for preLabel in preLabels:
                self.setFeature("triggerPair=" + sortedPair(nodeLabel, preLabel))
        return features

    def isSameClause(self, instance, i, j):
        """
        Two tokens are in the same clause only if both have a clause id and the ids are equal.
        """
        clause = instance.getToken(i).clause
        if clause == None:
            return False
        otherClause = instance.getToken(j).clause
        return otherClause != None and clause == otherClause

    def checkSameWordConsistency(self, instance, index, preIndex, nodeLabel, preLabel):
        """
        Two occurrences of the same word (e.g. "war" twice in a sentence) should have the same
        label. Words are compared through their synonym sets. Returns "true" or "false" for
        matching words and None if the words don't match or have no synonyms.
        """
        words = instance.getToken(index).synonyms
        preWords = instance.getToken(preIndex).synonyms
        if words != None and preWords != None and not words.isdisjoint(preWords):
            return boolString(nodeLabel == preLabel)
        return None

    ###########################################################################
    # Node level features
    ###########################################################################

    def getNodeLevelFeatures(self, instance, assn, index, entityIndex):
        """
        Features of an argument candidate together with the earlier argument candidates of
        the same trigger. Nothing is built if the candidate has no role, or the default role.
        """
        self._checkSentence(instance, assn)
        features = []
        self.setFeatureVector(features)
        nodeLabel = assn.getLabelAtToken(index)
        if not isArgumentable(nodeLabel):
            return features
        edgeAssn = assn.getRoles(index)
        if edgeAssn == None:
            return features
        instance.getMention(entityIndex)
        role = self._getRole(assn, edgeAssn, entityIndex)
        if role == None or role == DEFAULT_ARGUMENT_LABEL:
            return features

        # two mentions have the same role for the trigger
        self.setTag("sameRole:")
        self.buildSameRoleFeatures(instance, assn, edgeAssn, index, entityIndex, role)
        # one entity (two mentions) is two different arguments of the trigger, which is unlikely
        self.setTag("oneEntityTwoArgs:")
        self.buildOneEntityTwoArgsFeatures(instance, assn, edgeAssn, entityIndex, role, nodeLabel)
        # one mention is a modifier of the other, e.g. in "the newly appointed IBM CEO",
        # "IBM" is a modifier of "CEO"
        self.setTag("entitiesOverlap:")
        self.buildEntityOverlapFeatures(instance, assn, edgeAssn, entityIndex, role)
        if self.relatedRoles:
            self.setTag("relevantRoles:")
            self.buildRelatedRoleFeatures(instance, assn, edgeAssn, index, entityIndex, role)
        self.setTag("")
        return features

    def buildMentionPairFeatures(self, instance, mention1, mention2, triggerIndex, name):
        """
        Features of two mentions: overlap of the extents, the words between them (e.g. "and"
        in "A and B were killed") and the dependency path between their heads.
        """
        if Range.overlap(mention1.getExtent(), mention2.getExtent()):
            self.setFeature(name + "#overlapped")
        gap = Range.gap(mention1.getExtent(), mention2.getExtent())
        if gap != None and gap[1] - gap[0] <= MAX_BETWEEN_GAP:
            for i in range(gap[0] + 1, gap[1]):
                self.setFeature(name + "#between:" + instance.getTokenText(i))
        path = self.pathFeatureBuilder.getMentionPath(instance, mention1, mention2, triggerIndex)
        if path != None and path[1] <= self.maxDistance:
            self.setFeature(name + "#depPath:" + path[0])

    def buildSameRoleFeatures(self, instance, assn, edgeAssn, index, entityIndex, role):
        mention1 = instance.getMention(entityIndex)
        for entity2 in range(entityIndex - 1, -1, -1):
            if self._getRole(assn, edgeAssn, entity2) != role:
                continue
            mention2 = instance.getMention(entity2)
            if mention1.isCoreferent(mention2):
                self.setFeature(role + "#coreference")
            self.buildMentionPairFeatures(instance, mention1, mention2, index, role)

    def buildOneEntityTwoArgsFeatures(self, instance, assn, edgeAssn, entityIndex, role, nodeLabel):
        mention1 = instance.getMention(entityIndex)
        for entity2 in range(entityIndex - 1, -1, -1):
            if not mention1.isCoreferent(instance.getMention(entity2)):
                continue
            role2 = self._getRole(assn, edgeAssn, entity2)
            if role2 == None or role2 == DEFAULT_ARGUMENT_LABEL or role2 == role:
                continue
            self.setFeature(nodeLabel)

    def buildEntityOverlapFeatures(self, instance, assn, edgeAssn, entityIndex, role):
        mention1 = instance.getMention(entityIndex)
        for entity2 in range(entityIndex - 1, -1, -1):
            role2 = self._getRole(assn, edgeAssn, entity2)
            if role2 == None:
                continue
            mention2 = instance.getMention(entity2)
            # e.g. "Palestinian prime minister"
            if mention1.isEntity() and mention2.isEntity() and not mention1.isCoreferent(mention2):
                if Range.within(mention2.getHead(), mention1.getExtent()):
                    self.setFeature("modifier=" + role2 + "#head=" + role)
                if Range.within(mention1.getHead(), mention2.getExtent()):
                    self.setFeature("tail=" + role2 + "#head=" + role)
            # e.g. "co-chief executive of Vivendi Universal Entertainment"
            if mention1.isEntity() and mention2.getType() == TITLE_TYPE:
                if Range.within(mention1.getHead(), mention2.getExtent()):
                    self.setFeature("Title=" + role2 + "#" + str(mention1.getType()) + "=" + role)

    def isRelatedRole(self, role1, role2):
        for pair in RELATED_ROLES:
            if (role1, role2) == pair or (role2, role1) == pair:
                return True
        return False

    def buildRelatedRoleFeatures(self, instance, assn, edgeAssn, index, entityIndex, role):
        """
        Like the same role features, but for two mentions whose roles are different but
        related, e.g. Attacker and Target.
        """
        mention1 = instance.getMention(entityIndex)
        for entity2 in range(entityIndex - 1, -1, -1):
            role2 = self._getRole(assn, edgeAssn, entity2)
            if role2 == None or not self.isRelatedRole(role, role2):
                continue
            self.buildMentionPairFeatures(instance, mention1, instance.getMention(entity2), index, sortedPair(role, role2))

    ###########################################################################
    # Node completion features
    ###########################################################################

    def getNodeCompletionFeatures(self, instance, assn, index):
        """
        Features of a trigger whose edge assignment is complete: the number of arguments
        of each role, and the pairs of different time roles.
        """
        self._checkSentence(instance, assn)
        features = []
        self.setFeatureVector(features)
        nodeLabel = assn.getLabelAtToken(index)
        if not isArgumentable(nodeLabel):
            return features
        edgeAssn = assn.getRoles(index)
        if edgeAssn == None:
            return features

        numRoles = self.getNumOfArgRoles(assn, edgeAssn, nodeLabel)
        for role in sorted(numRoles.keys()):
            num = numRoles[role]
            if num > self.maxRoleCount:
                num = self.maxRoleCount + 1
            self.setFeature("roleNum:" + nodeLabel + "#" + role + "#" + str(num))
        for pair in self.getTimeArgPairs(assn, edgeAssn):
            self.setFeature("timeArgPair=" + pair)
        return features

    def getNumOfArgRoles(self, assn, edgeAssn, nodeLabel):
        """
        Count the arguments of each role. Every role allowed for the trigger label is
        included, with a count of zero if it has no arguments. Time roles are counted
        together.
        """
        numRoles = {}
        for role in self.typeConstraints.getRoles(nodeLabel):
            numRoles[foldRole(role, self.timePrefix)] = 0
        for entityIndex in sorted(edgeAssn.keys()):
            role = assn.getRoleName(edgeAssn[entityIndex])
            if role == DEFAULT_ARGUMENT_LABEL:
                continue
            role = foldRole(role, self.timePrefix)
            numRoles[role] = numRoles.get(role, 0) + 1
        return numRoles

    def getTimeArgPairs(self, assn, edgeAssn):
        timeArgs = []
        for entityIndex in sorted(edgeAssn.keys()):
            role = assn.getRoleName(edgeAssn[entityIndex])
            if role == DEFAULT_ARGUMENT_LABEL:
                continue
            if role.startswith(self.timePrefix) and role not in timeArgs:
                timeArgs.append(role)
        pairs = []
        for i in range(len(timeArgs) - 1):
            for j in range(i + 1, len(timeArgs)):
                pairs.append(sortedPair(timeArgs[i], timeArgs[j]))
        return pairs

    ###########################################################################
    # Sentence level features
    ###########################################################################

    def getSentenceLevelFeatures(self, instance, assn, index, entityIndex):
        """
        Features of the triangle formed by the current trigger, an earlier trigger and a
        shared argument. The argument can be shared on the mention level (the same mention
        is an argument of both triggers). For such a trigger pair, the argument is also
        compared on the entity level (a coreferent mention is an argument of the earlier trigger).
        """
        self._checkSentence(instance, assn)
        features = []
        self.setFeatureVector(features)
        nodeLabel = assn.getLabelAtToken(index)
        if nodeLabel == DEFAULT_TRIGGER_LABEL:
            return features
        edgeAssn = assn.getRoles(index)
        if edgeAssn == None:
            return features
        mention = instance.getMention(entityIndex)
        role = self._getRole(assn, edgeAssn, entityIndex)
        if role == None or role == DEFAULT_ARGUMENT_LABEL:
            return features

        for preIndex in range(index):
            preLabel = assn.getLabelAtToken(preIndex)
            if not isArgumentable(preLabel):
                continue
            preAssn = assn.getRoles(preIndex)
            if preAssn == None:
                continue
            # mention level common argument (the roles may differ)
            preRole = self._getRole(assn, preAssn, entityIndex)
            if preRole == None or preRole == DEFAULT_ARGUMENT_LABEL:
                continue
            self.setFeature("same_mention_triggers:" + sortedPair(nodeLabel, preLabel))
            # some roles, like Person, mean different things for different event types
            self.setFeature("same_mention_roles:" + sortedPair(role + nodeLabel, preRole + preLabel))
            path = self.pathFeatureBuilder.getTriggerPath(instance, index, preIndex)
            if path != None:
                self.setFeature("same_mention_dep:" + path[0])
            # entity level common arguments, only under a mention level match
            for j in range(len(instance.mentions)):
                if j == entityIndex or not mention.isCoreferent(instance.mentions[j]):
                    continue
                otherRole = self._getRole(assn, preAssn, j)
                if otherRole == None or otherRole == DEFAULT_ARGUMENT_LABEL:
                    continue
                self.setFeature("same_entity_triggers:" + sortedPair(nodeLabel, preLabel))
                self.setFeature("same_entity_roles:" + sortedPair(role + nodeLabel, otherRole + preLabel))
        return features
