"""
Build the global feature table of a corpus
"""
import sys
from optparse import OptionParser
import JointEE.Utils.Stream as Stream
import JointEE.Utils.Parameters as Parameters
from JointEE.Utils.ProgressCounter import ProgressCounter
from JointEE.Core.Alphabet import Alphabets
from JointEE.Core.TypeConstraints import TypeConstraints
from JointEE.Core.SentenceInstance import loadSentences, countSentences
from JointEE.Core.SentenceAssignment import SentenceAssignment
from JointEE.FeatureBuilders.GlobalFeatureBuilder import GlobalFeatureBuilder
from JointEE.ExampleWriters.FeatureTableWriter import FeatureTableWriter

def buildFeatures(input, output, constraints=None, parameters=None, alphabets=None):
    """
    Write the global features of the annotated assignments of a corpus.

    @param input: a JSON lines corpus file
    @param output: the feature table file
    @param constraints: argument role constraint file, ACE 2005 roles are used if None
    @param parameters: feature builder parameters, e.g. "maxDistance=2:relatedRoles"
    @param alphabets: file stem for writing the label alphabets, or None
    """
    print("Building global features for", input, file=sys.stderr)
    typeConstraints = TypeConstraints(filename=constraints)
    builder = GlobalFeatureBuilder(typeConstraints, parameters)
    print("Feature builder parameters:", Parameters.toString(builder.style), file=sys.stderr)
    corpusAlphabets = Alphabets()
    counter = ProgressCounter(countSentences(input), "Sentences")
    writer = FeatureTableWriter(builder, output)
    try:
        for instance, data in loadSentences(input, corpusAlphabets):
            counter.update(1, "Processing sentence " + str(instance.id) + ": ")
            assn = SentenceAssignment.fromDict(instance, data)
            writer.writeSentence(instance, assn)
        counter.showLastUpdate()
    finally:
        writer.close()
    if alphabets != None:
        print("Writing alphabets to", alphabets + ".labels/.roles", file=sys.stderr)
        corpusAlphabets.write(alphabets)
    return corpusAlphabets

def main(argv=None):
    optparser = OptionParser(description="Build the global feature table of a corpus")
    optparser.add_option("-i", "--input", default=None, dest="input", help="corpus in JSON lines format")
    optparser.add_option("-o", "--output", default=None, dest="output", help="feature table (gzipped if the name ends with .gz)")
    optparser.add_option("-c", "--constraints", default=None, dest="constraints", help="argument role constraints file (default: ACE 2005)")
    optparser.add_option("-p", "--parameters", default=None, dest="parameters", help="feature builder parameters")
    optparser.add_option("-a", "--alphabets", default=None, dest="alphabets", help="write the label alphabets with this file stem")
    optparser.add_option("-l", "--log", default=None, dest="log", help="log file")
    (options, args) = optparser.parse_args(argv)
    if options.input == None or options.output == None:
        optparser.error("both input and output must be defined")

    if options.log != None:
        Stream.openLog(options.log)
    try:
        buildFeatures(options.input, options.output, options.constraints, options.parameters, options.alphabets)
    finally:
        if options.log != None:
            Stream.closeLog(options.log)

if __name__=="__main__":
    main()
