'''Tie-break scores for options sharing the same majority grade.

A tie-break score function takes a tally and its majority grade and returns
a number; among options with equal majority grades, the higher score wins.
All scores are derived from three proportions of the ballots, computed by
:func:`proportions`:

-   ``p``, the proportion of ballots strictly better than the majority grade
    (the proponents),
-   ``q``, the proportion of ballots strictly worse than the majority grade
    (the opponents),
-   ``r``, the proportion of ballots exactly at the majority grade.

The scores are the "usual", "typical" and "central" judgments of Fabre.
[#fabre]_ The usual judgment is the default one.

All supported score functions are assembled in the `TIEBREAKS` dictionary
keyed by their name. `get()` retrieves from this dictionary by string key;
`construct()` also accepts callables and passes them through.

.. [#fabre] Fabre, A. (2021): "Tie-breaking the highest median: alternatives
    to the majority judgment", Social Choice and Welfare 56, 101-124.
'''

import logging
from fractions import Fraction
from numbers import Real
from typing import Callable, Optional, Tuple

import judgelib.component.core
from judgelib.component.median import majority_grade
from judgelib.grade import Grade
from judgelib.tally import MentionTally


TIEBREAKS = {}


tiebreak_mark, get, construct = judgelib.component.core.register_functions(
    TIEBREAKS, 'tie-breaking method'
)

ScorerType = Callable[[MentionTally, Optional[Grade]], Real]

DEFAULT: str = 'usual'


def proportions(tally: MentionTally,
                grade: Grade,
                ) -> Tuple[Fraction, Fraction, Fraction]:
    '''Return the proportions of ballots above, below and at the grade.

    :returns: A tuple ``(p, q, r)`` of exact fractions; all zero for an empty
        tally.
    '''
    if tally.total == 0:
        return Fraction(0), Fraction(0), Fraction(0)
    return (
        Fraction(tally.above(grade), tally.total),
        Fraction(tally.below(grade), tally.total),
        Fraction(tally.count(grade), tally.total),
    )


@tiebreak_mark
def usual(tally: MentionTally, majority: Optional[Grade] = None) -> Fraction:
    '''Usual judgment, ``(p - q) / r``.

    Falls back to ``p - q`` if no ballot gives exactly the majority grade,
    which never happens with a majority grade determined by
    :func:`judgelib.component.median.majority_grade`. The score is always
    finite.
    '''
    if majority is None:
        majority = majority_grade(tally)
    p, q, r = proportions(tally, majority)
    if tally.total == 0:
        return Fraction(0)
    elif r == 0:
        logging.warning('no ballots at grade %s of %r, using p - q',
                        majority, tally)
        return p - q
    else:
        return (p - q) / r


@tiebreak_mark
def typical(tally: MentionTally, majority: Optional[Grade] = None) -> Fraction:
    '''Typical judgment, ``p - q``.'''
    if majority is None:
        majority = majority_grade(tally)
    p, q, r = proportions(tally, majority)
    return p - q


@tiebreak_mark
def central(tally: MentionTally, majority: Optional[Grade] = None) -> Real:
    '''Central judgment, the ratio of proponents to opponents ``p / q``.

    With no opponents, the score is infinite if there are any proponents and
    1 if all ballots give the majority grade. With no proponents (and some
    opponents), it is zero, as it is for an empty tally.
    '''
    if majority is None:
        majority = majority_grade(tally)
    p, q, r = proportions(tally, majority)
    if tally.total == 0:
        return Fraction(0)
    elif q == 0:
        return float('inf') if p > 0 else Fraction(1)
    else:
        return p / q


def score(tally: MentionTally, method: str = DEFAULT) -> Real:
    '''Compute the tie-break score of a tally by the named method.'''
    return construct(method)(tally, majority_grade(tally))
