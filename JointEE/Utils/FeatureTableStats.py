"""
Statistics of feature table files
"""
import sys, os
from JointEE.Core.SentenceInstance import openFile

def getFeatureName(feature):
    """
    The name of a feature without its value and without the part after the first "=",
    e.g. "triggerPair=Attack#Die:1" -> "triggerPair".
    """
    name = feature.rsplit(":", 1)[0]
    return name.split("=", 1)[0]

def getTableFiles(path):
    """
    A feature table file, or all files in a directory of feature tables.
    """
    if os.path.isdir(path):
        return [os.path.join(path, x) for x in sorted(os.listdir(path)) if os.path.isfile(os.path.join(path, x))]
    return [path]

def readTables(path):
    """
    Yields the split lines of the feature tables.
    """
    filenames = getTableFiles(path)
    for i in range(len(filenames)):
        f = openFile(filenames[i])
        for line in f:
            splits = line.split()
            if len(splits) >= 2:
                yield splits
        f.close()
        print("Read", filenames[i], "(" + str(i + 1) + "/" + str(len(filenames)) + ")", file=sys.stderr)

def getFeatureNames(path, output=None):
    """
    The sorted distinct feature names used in the feature tables.

    @param path: a feature table or a directory of them
    @param output: if defined, the names are also written to this file, one per line
    """
    names = set()
    for splits in readTables(path):
        for feature in splits[2:]:
            names.add(getFeatureName(feature))
    names = sorted(names)
    if output != None:
        f = openFile(output, "wt")
        for name in names:
            f.write(name + "\n")
        f.close()
    return names

def getTriggerRate(path):
    """
    The fraction of trigger lines labeled with an event type (a label other than "O").
    """
    triggers = 0
    total = 0
    for splits in readTables(path):
        if not splits[0].startswith("Trigger"):
            continue
        if splits[1] != "O":
            triggers += 1
        total += 1
    if total == 0:
        return 0.0
    return float(triggers) / total

if __name__=="__main__":
    from optparse import OptionParser
    optparser = OptionParser(description="Feature table statistics")
    optparser.add_option("-i", "--input", default=None, dest="input", help="feature table file or directory")
    optparser.add_option("-o", "--output", default=None, dest="output", help="write the feature names to this file")
    optparser.add_option("-r", "--rate", default=False, action="store_true", dest="rate", help="print the trigger rate")
    (options, args) = optparser.parse_args()
    assert options.input != None

    if options.rate:
        print("Trigger rate:", getTriggerRate(options.input))
    else:
        for name in getFeatureNames(options.input, options.output):
            print(name)
