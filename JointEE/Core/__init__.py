"""
Central classes of the global feature generator.

The Core classes describe a single sentence and one candidate labeling of it.
SentenceInstance is the central object for working with the annotated text,
SentenceAssignment holds the labels under evaluation and the Alphabets
context maps label strings to stable integer ids.
"""
