"""
Write global features as a feature table
"""
import sys
import gzip
from collections import defaultdict

class FeatureTableWriter:
    """
    Writes the global features of each query point of a sentence as one line of text:
    the query name, the label of the query point and the features, each with the value 1.

    Trigger queries are named "Trigger<token index>" and argument queries
    "Argument<token index>_<mention index>". Every token gets a trigger line, and every
    mention with a role for a trigger gets an argument line.
    """
    def __init__(self, featureBuilder, filename):
        """
        @type featureBuilder: GlobalFeatureBuilder
        @type filename: str
        @param filename: output file, gzipped if the name ends with ".gz"
        """
        self.featureBuilder = featureBuilder
        self.filename = filename
        self.counts = defaultdict(int)
        if filename.endswith(".gz"):
            self.file = gzip.open(filename, "wt", encoding="utf-8")
        else:
            self.file = open(filename, "wt", encoding="utf-8")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def writeLine(self, name, label, features):
        self.file.write(name + " " + label)
        for feature in features:
            self.file.write(" " + feature + ":1")
        self.file.write("\n")
        self.counts["features"] += len(features)

    def writeSentence(self, instance, assn):
        """
        Write the trigger and argument lines of one sentence.

        @type instance: SentenceInstance
        @type assn: SentenceAssignment
        @param assn: the assignment whose labels are written and from which the features are built
        """
        for i in range(len(instance)):
            features = self.featureBuilder.getFeatures(instance, assn, i, complete=True)
            self.writeLine("Trigger" + str(i), assn.getLabelAtToken(i), features)
            self.counts["triggers"] += 1
        for i in assn.getTriggerIndices():
            for k in range(len(instance.mentions)):
                role = assn.getRole(i, k)
                if role == None:
                    continue
                features = self.featureBuilder.getFeatures(instance, assn, i, k)
                self.writeLine("Argument" + str(i) + "_" + str(k), role, features)
                self.counts["arguments"] += 1
        self.counts["sentences"] += 1

    def close(self):
        if self.file.closed:
            return
        self.file.close()
        print("Wrote", self.filename + ":", dict(sorted(self.counts.items())), file=sys.stderr)
