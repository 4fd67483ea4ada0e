import copy
import json
import pytest
from JointEE.Core.Alphabet import Alphabets
from JointEE.Core.SentenceInstance import SentenceInstance
from JointEE.Core.SentenceAssignment import SentenceAssignment

# "Acme fired its chief executive John yesterday and he left ."
FIRING_SENTENCE = {
    "id":"s1",
    "tokens":[
        {"text":"Acme", "POS":"NNP", "clause":0},
        {"text":"fired", "POS":"VBD", "clause":0, "synonyms":["fire", "dismiss"]},
        {"text":"its", "POS":"PRP$", "clause":0},
        {"text":"chief", "POS":"NN", "clause":0},
        {"text":"executive", "POS":"NN", "clause":0},
        {"text":"John", "POS":"NNP", "clause":0},
        {"text":"yesterday", "POS":"NN", "clause":0},
        {"text":"and", "POS":"CC", "clause":0},
        {"text":"he", "POS":"PRP", "clause":1},
        {"text":"left", "POS":"VBD", "clause":1, "synonyms":["leave", "go"]},
        {"text":".", "POS":"."},
    ],
    "dependencies":[
        {"t1":1, "t2":0, "type":"nsubj"},
        {"t1":1, "t2":4, "type":"dobj"},
        {"t1":4, "t2":2, "type":"poss"},
        {"t1":4, "t2":3, "type":"amod"},
        {"t1":4, "t2":5, "type":"appos"},
        {"t1":1, "t2":6, "type":"tmod"},
        {"t1":1, "t2":7, "type":"cc"},
        {"t1":1, "t2":9, "type":"conj"},
        {"t1":9, "t2":8, "type":"nsubj"},
        {"t1":1, "t2":10, "type":"punct"},
    ],
    "mentions":[
        {"id":"m0", "extent":[0, 0], "type":"ORG", "parent":"E1"},
        {"id":"m1", "extent":[2, 2], "type":"ORG", "parent":"E1"},
        {"id":"m2", "extent":[3, 4], "head":[4, 4], "type":"Job-Title", "kind":"Value"},
        {"id":"m3", "extent":[2, 5], "head":[5, 5], "type":"PER", "parent":"E2"},
        {"id":"m4", "extent":[6, 6], "type":"Time", "kind":"Timex"},
        {"id":"m5", "extent":[8, 8], "type":"PER", "parent":"E2"},
    ],
    "triggers":{"1":"End-Position", "9":"Transport"},
    "arguments":[
        {"trigger":1, "mention":0, "role":"Entity"},
        {"trigger":1, "mention":2, "role":"Position"},
        {"trigger":1, "mention":3, "role":"Person"},
        {"trigger":1, "mention":4, "role":"Time-Within"},
        {"trigger":9, "mention":5, "role":"Artifact"},
    ],
}

# "The war ended and the war began", no parse
WAR_SENTENCE = {
    "id":"s2",
    "tokens":[
        {"text":"The", "POS":"DT"},
        {"text":"war", "POS":"NN", "synonyms":["war", "warfare"]},
        {"text":"ended", "POS":"VBD"},
        {"text":"and", "POS":"CC"},
        {"text":"the", "POS":"DT"},
        {"text":"war", "POS":"NN", "synonyms":["war"]},
        {"text":"began", "POS":"VBD"},
    ],
    "mentions":[],
    "triggers":{"1":"Attack", "5":"Attack"},
    "arguments":[],
}

@pytest.fixture
def firingData():
    return copy.deepcopy(FIRING_SENTENCE)

@pytest.fixture
def warData():
    return copy.deepcopy(WAR_SENTENCE)

@pytest.fixture
def firingSentence(firingData):
    return SentenceInstance.fromDict(firingData, Alphabets())

@pytest.fixture
def warSentence(warData):
    return SentenceInstance.fromDict(warData, Alphabets())

@pytest.fixture
def assign():
    """
    Build an assignment for a sentence from a trigger dictionary and (trigger, mention, role) tuples.
    """
    def makeAssignment(instance, triggers, arguments=()):
        data = {"triggers":triggers, "arguments":[{"trigger":t, "mention":m, "role":r} for t, m, r in arguments]}
        return SentenceAssignment.fromDict(instance, data)
    return makeAssignment

@pytest.fixture
def corpusFile(tmp_path):
    """
    A JSON lines corpus with the test sentences.
    """
    filename = str(tmp_path / "corpus.jsonl")
    f = open(filename, "wt", encoding="utf-8")
    f.write(json.dumps(FIRING_SENTENCE) + "\n")
    f.write("\n")
    f.write(json.dumps(WAR_SENTENCE) + "\n")
    f.close()
    return filename
