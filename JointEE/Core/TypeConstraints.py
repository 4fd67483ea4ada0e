"""
Argument roles allowed for each event type.
"""
import sys
import gzip

TIME_PREFIX = "Time"

# ACE 2005 event subtypes and their argument roles. All of the time roles
# (Time-Within, Time-Holds, Time-Starting, ...) are represented by "Time".
ACE2005_ARGUMENT_ROLES = {
    "Be-Born":["Person", "Time", "Place"],
    "Marry":["Person", "Time", "Place"],
    "Divorce":["Person", "Time", "Place"],
    "Injure":["Agent", "Victim", "Instrument", "Time", "Place"],
    "Die":["Agent", "Victim", "Instrument", "Time", "Place"],
    "Transport":["Agent", "Artifact", "Vehicle", "Price", "Origin", "Destination", "Time"],
    "Transfer-Ownership":["Buyer", "Seller", "Beneficiary", "Artifact", "Price", "Time", "Place"],
    "Transfer-Money":["Giver", "Recipient", "Beneficiary", "Money", "Time", "Place"],
    "Start-Org":["Agent", "Org", "Time", "Place"],
    "Merge-Org":["Org", "Time", "Place"],
    "Declare-Bankruptcy":["Org", "Time", "Place"],
    "End-Org":["Org", "Time", "Place"],
    "Attack":["Attacker", "Target", "Instrument", "Time", "Place"],
    "Demonstrate":["Entity", "Time", "Place"],
    "Meet":["Entity", "Time", "Place"],
    "Phone-Write":["Entity", "Time"],
    "Start-Position":["Person", "Entity", "Position", "Time", "Place"],
    "End-Position":["Person", "Entity", "Position", "Time", "Place"],
    "Nominate":["Person", "Agent", "Position", "Time", "Place"],
    "Elect":["Person", "Entity", "Position", "Time", "Place"],
    "Arrest-Jail":["Person", "Agent", "Crime", "Time", "Place"],
    "Release-Parole":["Person", "Entity", "Crime", "Time", "Place"],
    "Trial-Hearing":["Defendant", "Prosecutor", "Adjudicator", "Crime", "Time", "Place"],
    "Charge-Indict":["Defendant", "Prosecutor", "Adjudicator", "Crime", "Time", "Place"],
    "Sue":["Plaintiff", "Defendant", "Adjudicator", "Crime", "Time", "Place"],
    "Convict":["Defendant", "Adjudicator", "Crime", "Time", "Place"],
    "Sentence":["Defendant", "Adjudicator", "Crime", "Sentence", "Time", "Place"],
    "Fine":["Entity", "Adjudicator", "Money", "Crime", "Time", "Place"],
    "Execute":["Person", "Agent", "Crime", "Time", "Place"],
    "Extradite":["Agent", "Person", "Destination", "Origin", "Crime", "Time"],
    "Acquit":["Defendant", "Adjudicator", "Crime", "Time", "Place"],
    "Appeal":["Defendant", "Prosecutor", "Adjudicator", "Crime", "Time", "Place"],
    "Pardon":["Defendant", "Adjudicator", "Crime", "Time", "Place"],
}

def foldRole(role, timePrefix=TIME_PREFIX):
    """
    All time roles are counted as one role.
    """
    if role.startswith(timePrefix):
        return timePrefix
    return role

class TypeConstraints:
    """
    A lookup from trigger labels to the set of argument roles they can take.
    """
    def __init__(self, argumentRoles=None, filename=None):
        """
        @type argumentRoles: dictionary of str -> iterable of str
        @param argumentRoles: the roles of each trigger label, defaults to ACE 2005
        @type filename: str
        @param filename: load the roles from a file instead
        """
        self.argumentRoles = {}
        if filename != None:
            self.load(filename)
        else:
            if argumentRoles == None:
                argumentRoles = ACE2005_ARGUMENT_ROLES
            for label in argumentRoles:
                self.argumentRoles[label] = frozenset(argumentRoles[label])

    def __contains__(self, label):
        return label in self.argumentRoles

    def getLabels(self):
        return sorted(self.argumentRoles.keys())

    def getRoles(self, label):
        """
        Returns the allowed roles of a trigger label. Labels not in the table are a data error.
        """
        if label not in self.argumentRoles:
            raise Exception("Trigger label '" + str(label) + "' has no argument role constraints (known labels: " + ",".join(self.getLabels()) + ")")
        return self.argumentRoles[label]

    def isPossibleRole(self, label, role, timePrefix=TIME_PREFIX):
        return foldRole(role, timePrefix) in set([foldRole(x, timePrefix) for x in self.getRoles(label)])

    def load(self, filename):
        """
        Loads the table from a file with one trigger label per line, in the format
        "Label: Role1,Role2,...". Lines beginning with "#" are comments.
        """
        if filename.endswith(".gz"):
            f = gzip.open(filename, "rt", encoding="utf-8")
        else:
            f = open(filename, "rt", encoding="utf-8")
        self.argumentRoles = {}
        for line in f:
            line = line.strip()
            if line == "" or line.startswith("#"):
                continue
            if ":" not in line:
                f.close()
                raise Exception("Malformed argument role line '" + line + "' in " + filename)
            label, roles = line.split(":", 1)
            roles = [x.strip() for x in roles.split(",") if x.strip() != ""]
            self.argumentRoles[label.strip()] = frozenset(roles)
        f.close()
        print("Loaded argument roles for", len(self.argumentRoles), "trigger labels from", filename, file=sys.stderr)

    def write(self, filename):
        if filename.endswith(".gz"):
            f = gzip.open(filename, "wt", encoding="utf-8")
        else:
            f = open(filename, "wt", encoding="utf-8")
        for label in self.getLabels():
            f.write(label + ": " + ",".join(sorted(self.argumentRoles[label])) + "\n")
        f.close()
