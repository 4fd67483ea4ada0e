"""
Joint Event Extraction, global feature generation.

JointEE computes the global features of a candidate joint labeling of a
sentence, i.e. an assignment of event trigger labels to tokens and argument
roles to entity mentions. The features describe how the labels of one
assignment relate to each other: trigger label pairs, dependency paths between
triggers and arguments, coreferent and overlapping arguments and shared
arguments between two events. The resulting feature strings are consumed by a
linear classifier.
"""
__version__ = "1.0.0"
