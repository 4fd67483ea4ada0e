"""
Token span tools.

A span is a tuple (first, last) of token indices. Both ends are inclusive,
so a single token span is (i, i).
"""

def isValid(span):
    return span[0] <= span[1]

def contains(range1, range2):
    """
    Checks whether range2 lies within range1.
    """
    if range1[0] <= range2[0] and range1[1] >= range2[1]:
        return True
    else:
        return False

def within(range1, range2):
    """
    Checks whether range1 lies within range2.
    """
    return contains(range2, range1)

def length(range):
    return range[1] - range[0] + 1

def overlap(range1, range2):
    """ Checks whether two spans share at least one token

    Keyword arguments:
    range1 -- a tuple where range1[0] <= range1[1]
    range2 -- a tuple where range2[0] <= range2[1]

    Returns:
    True (spans overlap) or False (no overlap)
    """
    assert(range1[0] <= range1[1]), (range1, range2)
    assert(range2[0] <= range2[1]), (range1, range2)
    # Non-overlapping cases:
    # x1 <= x2 < y1 <= y2
    # y1 <= y2 < x1 <= x2
    return not (range1[1] < range2[0] or range2[1] < range1[0])

def gap(range1, range2):
    """
    Returns the (first, last) pair of the token indices that bound the gap between two
    non-overlapping spans, i.e. the last token of the earlier span and the first token
    of the later span. Returns None if the spans overlap.
    """
    if overlap(range1, range2):
        return None
    if range1[1] < range2[0]:
        return (range1[1], range2[0])
    else:
        return (range2[1], range1[0])


def indices(span):
    """
    The token indices covered by the span, in textual order.
    """
    return list(range(span[0], span[1] + 1))
