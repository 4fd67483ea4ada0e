"""
Tests for the global features of joint assignments
"""
import pytest
from JointEE.Core.Alphabet import Alphabets
from JointEE.Core.SentenceInstance import SentenceInstance
from JointEE.Core.TypeConstraints import TypeConstraints
from JointEE.FeatureBuilders.FeatureBuilder import sortedPair
from JointEE.FeatureBuilders.GlobalFeatureBuilder import GlobalFeatureBuilder

GOLD_TRIGGERS = {1:"End-Position", 9:"Transport"}
GOLD_ARGUMENTS = [(1, 0, "Entity"), (1, 2, "Position"), (1, 3, "Person"), (1, 4, "Time-Within"), (9, 5, "Artifact")]

@pytest.fixture
def builder():
    return GlobalFeatureBuilder()

@pytest.fixture
def gold(firingSentence, assign):
    return assign(firingSentence, GOLD_TRIGGERS, GOLD_ARGUMENTS)


class TestParameters:
    def test_defaults(self, builder):
        assert builder.maxDistance == 3
        assert builder.maxRoleCount == 3
        assert builder.timePrefix == "Time"
        assert builder.relatedRoles == False

    def test_parameter_string(self):
        builder = GlobalFeatureBuilder(style="maxDistance=4:maxRoleCount=2:relatedRoles")
        assert builder.maxDistance == 4
        assert builder.maxRoleCount == 2
        assert builder.relatedRoles == True

    def test_undefined_parameter(self):
        with pytest.raises(Exception, match="Undefined parameter"):
            GlobalFeatureBuilder(style="maxDepth=4")

    def test_illegal_value(self):
        with pytest.raises(Exception, match="cannot be cast"):
            GlobalFeatureBuilder(style="maxDistance=far")


class TestTriggerFeatures:
    def test_trigger_pair(self, builder, firingSentence, gold):
        features = builder.getTriggerFeatures(firingSentence, gold, 9)
        assert features == ["triggerPairSameClause=End-Position#Transport#false",
                            "triggerPairDepPath=End-Position#Transport#conj",
                            "triggerPair=End-Position#Transport"]

    def test_first_trigger_has_no_pairs(self, builder, firingSentence, gold):
        assert builder.getTriggerFeatures(firingSentence, gold, 1) == []

    def test_adjacent_token_is_not_compared(self, builder, firingSentence, gold):
        # token 9 is directly before token 10
        assert builder.getTriggerFeatures(firingSentence, gold, 2) == []
        assert builder.getTriggerFeatures(firingSentence, gold, 10) == []

    def test_same_clause(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position", 6:"Transport"})
        features = builder.getTriggerFeatures(firingSentence, assn, 6)
        assert "triggerPairSameClause=End-Position#Transport#true" in features
        assert "triggerPairDepPath=End-Position#Transport#tmod" in features

    def test_trigger_path_distance_limit(self, builder, firingSentence, assign):
        # "its" to "he" is four dependencies away
        assn = assign(firingSentence, {2:"Attack", 8:"Die"})
        assert builder.getTriggerFeatures(firingSentence, assn, 8) == ["triggerPairSameClause=Attack#Die#false",
                                                                       "triggerPair=Attack#Die"]

    def test_zero_distance_limit(self, firingSentence, gold):
        builder = GlobalFeatureBuilder(style="maxDistance=0")
        assert builder.getTriggerFeatures(firingSentence, gold, 9) == ["triggerPairSameClause=End-Position#Transport#false",
                                                                       "triggerPair=End-Position#Transport"]

    def test_history_is_deduplicated(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {0:"Attack", 3:"Attack", 9:"Die"})
        features = builder.getTriggerFeatures(firingSentence, assn, 9)
        assert [x for x in features if x.startswith("triggerPair=")] == ["triggerPair=Attack#Die"]
        assert len([x for x in features if x.startswith("triggerPairSameClause=")]) == 2

    def test_pair_is_symmetric(self, builder, firingSentence, assign):
        assn1 = assign(firingSentence, {1:"Attack", 9:"Die"})
        assn2 = assign(firingSentence, {1:"Die", 9:"Attack"})
        assert builder.getTriggerFeatures(firingSentence, assn1, 9) == builder.getTriggerFeatures(firingSentence, assn2, 9)
        assert sortedPair("Die", "Attack") == sortedPair("Attack", "Die") == "Attack#Die"

    def test_same_word(self, builder, warSentence, assign):
        assn = assign(warSentence, {1:"Attack", 5:"Attack"})
        features = builder.getTriggerFeatures(warSentence, assn, 5)
        # no clause ids and no parse
        assert features == ["triggerPairSameClause=Attack#Attack#false",
                            "SameWordSameLabel=true",
                            "triggerPair=Attack#Attack"]

    def test_same_word_different_label(self, builder, warSentence, assign):
        assn = assign(warSentence, {1:"Attack"})
        assert builder.getTriggerFeatures(warSentence, assn, 5) == ["SameWordSameLabel=false"]

    def test_index_out_of_range(self, builder, firingSentence, gold):
        with pytest.raises(IndexError):
            builder.getTriggerFeatures(firingSentence, gold, 11)


class TestNodeLevelFeatures:
    def test_modifier(self, builder, firingSentence, gold):
        # the head of "its" is inside "its chief executive John"
        assert builder.getNodeLevelFeatures(firingSentence, gold, 1, 3) == ["entitiesOverlap:modifier=NON#head=Person"]

    def test_default_role_has_no_features(self, builder, firingSentence, gold):
        assert builder.getNodeLevelFeatures(firingSentence, gold, 1, 1) == []

    def test_non_trigger_has_no_features(self, builder, firingSentence, gold):
        assert builder.getNodeLevelFeatures(firingSentence, gold, 0, 0) == []

    def test_value_mentions(self, builder, firingSentence, gold):
        assert builder.getNodeLevelFeatures(firingSentence, gold, 1, 2) == []
        assert builder.getNodeLevelFeatures(firingSentence, gold, 1, 4) == []

    def test_same_role_coreference(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 0, "Entity"), (1, 1, "Entity")])
        features = builder.getNodeLevelFeatures(firingSentence, assn, 1, 1)
        assert features == ["sameRole:Entity#coreference",
                            "sameRole:Entity#between:fired",
                            "sameRole:Entity#depPath:poss#NN#dobj#TriggerWord#nsubj"]

    def test_same_role_overlap(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 1, "Person"), (1, 3, "Person")])
        features = builder.getNodeLevelFeatures(firingSentence, assn, 1, 3)
        assert "sameRole:Person#overlapped" in features
        assert "sameRole:Person#depPath:appos#NN#poss" in features
        assert "sameRole:Person#coreference" not in features
        assert "entitiesOverlap:modifier=Person#head=Person" in features

    def test_distance_limit(self, builder, firingSentence, assign):
        # "he" -> "its" is four dependencies
        assn = assign(firingSentence, {9:"Transport"}, [(9, 1, "Artifact"), (9, 5, "Artifact")])
        assert builder.getNodeLevelFeatures(firingSentence, assn, 9, 5) == []
        longBuilder = GlobalFeatureBuilder(style="maxDistance=4")
        assert longBuilder.getNodeLevelFeatures(firingSentence, assn, 9, 5) == ["sameRole:Artifact#depPath:nsubj#TriggerWord#conj#VBD#dobj#NN#poss"]

    def test_distance_at_limit(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {9:"Transport"}, [(9, 0, "Artifact"), (9, 5, "Artifact")])
        assert builder.getNodeLevelFeatures(firingSentence, assn, 9, 5) == ["sameRole:Artifact#depPath:nsubj#TriggerWord#conj#VBD#nsubj"]

    def test_one_entity_two_args(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 0, "Entity"), (1, 1, "Person")])
        assert builder.getNodeLevelFeatures(firingSentence, assn, 1, 1) == ["oneEntityTwoArgs:End-Position"]

    def test_title(self, builder, assign):
        data = {"tokens":[{"text":x, "POS":y} for x, y in [("Acme", "NNP"), ("hired", "VBD"), ("chief", "NN"), ("executive", "NN"), ("of", "IN"), ("Vivendi", "NNP")]],
                "mentions":[{"extent":[0, 0], "type":"ORG", "parent":"E1"},
                            {"extent":[2, 5], "head":[3, 3], "type":"Job-Title", "kind":"Value"},
                            {"extent":[5, 5], "type":"ORG", "parent":"E3"}]}
        instance = SentenceInstance.fromDict(data, Alphabets())
        assn = assign(instance, {1:"Start-Position"}, [(1, 0, "Entity"), (1, 1, "Position"), (1, 2, "Entity")])
        assert builder.getNodeLevelFeatures(instance, assn, 1, 2) == ["entitiesOverlap:Title=Position#ORG=Entity"]

    def test_tail(self, builder, assign):
        data = {"tokens":[{"text":x, "POS":y} for x, y in [("Acme", "NNP"), ("hired", "VBD"), ("chief", "NN"), ("executive", "NN"), ("of", "IN"), ("Vivendi", "NNP")]],
                "mentions":[{"extent":[2, 5], "head":[3, 3], "type":"PER", "parent":"E2"},
                            {"extent":[5, 5], "type":"ORG", "parent":"E3"}]}
        instance = SentenceInstance.fromDict(data, Alphabets())
        assn = assign(instance, {1:"Start-Position"}, [(1, 0, "Person"), (1, 1, "Entity")])
        assert builder.getNodeLevelFeatures(instance, assn, 1, 1) == ["entitiesOverlap:tail=Person#head=Entity"]

    def test_related_roles(self, firingSentence, assign):
        assn = assign(firingSentence, {9:"Attack"}, [(9, 0, "Attacker"), (9, 5, "Target")])
        assert GlobalFeatureBuilder().getNodeLevelFeatures(firingSentence, assn, 9, 5) == []
        builder = GlobalFeatureBuilder(style="relatedRoles")
        assert builder.getNodeLevelFeatures(firingSentence, assn, 9, 5) == ["relevantRoles:Attacker#Target#depPath:nsubj#TriggerWord#conj#VBD#nsubj"]

    def test_unknown_mention(self, builder, firingSentence, gold):
        with pytest.raises(IndexError):
            builder.getNodeLevelFeatures(firingSentence, gold, 1, 6)


class TestNodeCompletionFeatures:
    def test_role_counts(self, builder, firingSentence, gold):
        features = builder.getNodeCompletionFeatures(firingSentence, gold, 1)
        assert features == ["roleNum:End-Position#Entity#1",
                            "roleNum:End-Position#Person#1",
                            "roleNum:End-Position#Place#0",
                            "roleNum:End-Position#Position#1",
                            "roleNum:End-Position#Time#1"]

    def test_single_trigger(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 3, "Person"), (1, 4, "Time-Within")])
        features = builder.getFeatures(firingSentence, assn, 1, complete=True)
        assert "roleNum:End-Position#Person#1" in features
        assert "roleNum:End-Position#Time#1" in features
        assert [x for x in features if x.startswith("triggerPair") or x.startswith("timeArgPair")] == []

    def test_count_limit(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 0, "Person"), (1, 1, "Person"), (1, 3, "Person")])
        assert "roleNum:End-Position#Person#3" in builder.getNodeCompletionFeatures(firingSentence, assn, 1)
        assn.setRole(1, 5, "Person")
        assert "roleNum:End-Position#Person#4" in builder.getNodeCompletionFeatures(firingSentence, assn, 1)
        assn.setRole(1, 2, "Person")
        assert "roleNum:End-Position#Person#4" in builder.getNodeCompletionFeatures(firingSentence, assn, 1)

    def test_time_pairs(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 0, "Time-Starting"), (1, 4, "Time-Within"), (1, 5, "Time-Within")])
        features = builder.getNodeCompletionFeatures(firingSentence, assn, 1)
        assert "roleNum:End-Position#Time#3" in features
        assert [x for x in features if x.startswith("timeArgPair=")] == ["timeArgPair=Time-Starting#Time-Within"]

    def test_observed_role_outside_constraints(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"End-Position"}, [(1, 0, "Attacker")])
        assert builder.getNodeCompletionFeatures(firingSentence, assn, 1)[0] == "roleNum:End-Position#Attacker#1"

    def test_unknown_label(self, builder, firingSentence, assign):
        assn = assign(firingSentence, {1:"Celebrate"})
        with pytest.raises(Exception, match="no argument role constraints"):
            builder.getNodeCompletionFeatures(firingSentence, assn, 1)

    def test_custom_constraints(self, firingSentence, assign):
        builder = GlobalFeatureBuilder(TypeConstraints({"Celebrate":["Agent", "Time-Within"]}))
        assn = assign(firingSentence, {1:"Celebrate"}, [(1, 0, "Agent")])
        assert builder.getNodeCompletionFeatures(firingSentence, assn, 1) == ["roleNum:Celebrate#Agent#1", "roleNum:Celebrate#Time#0"]

    def test_non_trigger(self, builder, firingSentence, gold):
        assert builder.getNodeCompletionFeatures(firingSentence, gold, 0) == []


class TestSentenceLevelFeatures:
    def test_same_entity(self, builder, firingSentence, assign):
        # mentions 3 and 5 are coreferent
        assn = assign(firingSentence, GOLD_TRIGGERS, [(1, 3, "Person"), (1, 5, "Person"), (9, 5, "Artifact")])
        features = builder.getSentenceLevelFeatures(firingSentence, assn, 9, 5)
        assert features == ["same_mention_triggers:End-Position#Transport",
                            "same_mention_roles:ArtifactTransport#PersonEnd-Position",
                            "same_mention_dep:conj",
                            "same_entity_triggers:End-Position#Transport",
                            "same_entity_roles:ArtifactTransport#PersonEnd-Position"]

    def test_same_entity_needs_same_mention(self, builder, firingSentence, gold, assign):
        # mention 5 has the default role for trigger 1 in the gold assignment
        assert builder.getSentenceLevelFeatures(firingSentence, gold, 9, 5) == []
        assn = assign(firingSentence, GOLD_TRIGGERS, [(1, 3, "Person"), (9, 5, "Artifact")])
        assert builder.getSentenceLevelFeatures(firingSentence, assn, 9, 5) == []

    def test_same_entity_is_symmetric(self, builder, firingSentence, assign):
        assn = assign(firingSentence, GOLD_TRIGGERS, [(1, 3, "Person"), (1, 5, "Person"), (9, 5, "Artifact")])
        swapped = assign(firingSentence, GOLD_TRIGGERS, [(1, 3, "Person"), (1, 5, "Person"), (9, 3, "Artifact")])
        assert builder.getSentenceLevelFeatures(firingSentence, swapped, 9, 3) == builder.getSentenceLevelFeatures(firingSentence, assn, 9, 5)

    def test_same_mention(self, builder, firingSentence, assign):
        assn = assign(firingSentence, GOLD_TRIGGERS, [(1, 3, "Person"), (9, 3, "Artifact")])
        features = builder.getSentenceLevelFeatures(firingSentence, assn, 9, 3)
        assert features == ["same_mention_triggers:End-Position#Transport",
                            "same_mention_roles:ArtifactTransport#PersonEnd-Position",
                            "same_mention_dep:conj"]

    def test_same_mention_without_path(self, builder, assign):
        data = {"tokens":[{"text":x, "POS":y} for x, y in [("troops", "NNS"), ("attacked", "VBD"), ("and", "CC"), ("killed", "VBD"), ("rebels", "NNS")]],
                "mentions":[{"extent":[0, 0], "type":"PER"}, {"extent":[4, 4], "type":"PER"}]}
        instance = SentenceInstance.fromDict(data, Alphabets())
        assn = assign(instance, {1:"Attack", 3:"Die"}, [(1, 1, "Target"), (3, 1, "Victim")])
        assert builder.getSentenceLevelFeatures(instance, assn, 3, 1) == ["same_mention_triggers:Attack#Die",
                                                                          "same_mention_roles:TargetAttack#VictimDie"]

    def test_first_trigger(self, builder, firingSentence, gold):
        assert builder.getSentenceLevelFeatures(firingSentence, gold, 1, 3) == []

    def test_default_role(self, builder, firingSentence, gold):
        assert builder.getSentenceLevelFeatures(firingSentence, gold, 9, 3) == []


class TestFeatures:
    def test_trigger_query(self, builder, firingSentence, gold):
        triggerFeatures = builder.getTriggerFeatures(firingSentence, gold, 9)
        completionFeatures = builder.getNodeCompletionFeatures(firingSentence, gold, 9)
        assert builder.getFeatures(firingSentence, gold, 9) == triggerFeatures
        assert builder.getFeatures(firingSentence, gold, 9, complete=True) == triggerFeatures + completionFeatures
        assert "roleNum:Transport#Artifact#1" in completionFeatures

    def test_argument_query(self, builder, firingSentence, gold):
        features = builder.getFeatures(firingSentence, gold, 9, 5)
        assert features == builder.getNodeLevelFeatures(firingSentence, gold, 9, 5) + builder.getSentenceLevelFeatures(firingSentence, gold, 9, 5)
        # mention 5 is not an argument of the earlier trigger
        assert "same_entity_triggers:End-Position#Transport" not in features

    def test_disconnected_graph(self, builder, firingData, assign):
        connected = SentenceInstance.fromDict(firingData, Alphabets())
        firingData["dependencies"] = [x for x in firingData["dependencies"] if x["type"] != "conj"]
        disconnected = SentenceInstance.fromDict(firingData, Alphabets())
        arguments = [(9, 0, "Artifact"), (9, 5, "Artifact"), (1, 3, "Person")]
        connectedAssn = assign(connected, GOLD_TRIGGERS, arguments)
        disconnectedAssn = assign(disconnected, GOLD_TRIGGERS, arguments)
        for index, entityIndex in [(9, None), (9, 5)]:
            full = builder.getFeatures(connected, connectedAssn, index, entityIndex, complete=True)
            partial = builder.getFeatures(disconnected, disconnectedAssn, index, entityIndex, complete=True)
            assert len(partial) < len(full)
            assert partial == [x for x in full if "DepPath" not in x and "depPath" not in x]
