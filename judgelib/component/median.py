'''Majority (median) grade of a tally.

The majority grade is the best grade such that at least half of the ballots
rate the option at least that well. With an even number of ballots split
exactly in half, this is the lower median, i.e. the better of the two middle
grades; the half-point is never rounded.

An empty tally has the worst grade of its scale as its majority grade. This
is a convention, not an error.
'''

from fractions import Fraction
from typing import Optional

from judgelib.grade import Grade
from judgelib.tally import MentionTally


def majority_grade(tally: MentionTally) -> Grade:
    '''Return the majority grade of the tally.

    :param tally: Ballot counts per grade for one option.
    '''
    if tally.total == 0:
        return tally.scale.worst
    median_position = Fraction(tally.total, 2)
    for grade, cumulative in zip(tally.scale, tally.cumulative()):
        if cumulative >= median_position:
            return grade
    # unreachable for a positive total, cumulative reaches the total
    return tally.scale.worst


def majority_share(tally: MentionTally,
                   grade: Optional[Grade] = None,
                   ) -> Fraction:
    '''Return the share of ballots rating the option at least this well.

    :param tally: Ballot counts per grade for one option.
    :param grade: The grade to measure the share for; defaults to the majority
        grade of the tally.
    :returns: An exact fraction between 0 and 1; zero for an empty tally.
    '''
    if tally.total == 0:
        return Fraction(0)
    if grade is None:
        grade = majority_grade(tally)
    return Fraction(tally.above(grade) + tally.count(grade), tally.total)
