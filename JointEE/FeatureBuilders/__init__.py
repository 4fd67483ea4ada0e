"""
Turn a sentence assignment into feature name strings.

A feature builder reads a SentenceInstance and a SentenceAssignment and
produces, for one query point (a trigger token and optionally an argument
candidate), a list of feature names. Each feature is an indicator with an
implicit value of 1.
"""
