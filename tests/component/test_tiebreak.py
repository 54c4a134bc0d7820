
import sys
import os
import math
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import judgelib.component.tiebreak
from judgelib.component.median import majority_grade
from judgelib.component.tiebreak import usual, typical, central, proportions
from judgelib.grade import Mention
from judgelib.tally import MentionTally

SCORERS = list(judgelib.component.tiebreak.TIEBREAKS.values())

SIGN_TALLIES = [
    {Mention.EXCELLENT: 2, Mention.VERY_GOOD: 2, Mention.GOOD: 1},
    {Mention.VERY_GOOD: 3, Mention.GOOD: 2},
    {Mention.BAD: 3, Mention.INADEQUATE: 1, Mention.PASSABLE: 1,
     Mention.FAIR: 2, Mention.GOOD: 1, Mention.VERY_GOOD: 1,
     Mention.EXCELLENT: 1},
    {Mention.BAD: 1, Mention.INADEQUATE: 1, Mention.PASSABLE: 1,
     Mention.FAIR: 4, Mention.GOOD: 1, Mention.VERY_GOOD: 1,
     Mention.EXCELLENT: 1},
    {Mention.BAD: 5, Mention.EXCELLENT: 5},
    {Mention.GOOD: 7},
]


def sign(value):
    return (value > 0) - (value < 0)


@pytest.mark.parametrize('scorer', SCORERS)
def test_empty(scorer):
    assert scorer(MentionTally({})) == 0


@pytest.mark.parametrize('grade', list(Mention))
def test_single_grade_mass(grade):
    tally = MentionTally({grade: 3})
    assert usual(tally) == 0
    assert typical(tally) == 0
    assert central(tally) == 1


def test_proportions():
    tally = MentionTally({
        Mention.BAD: 1, Mention.INADEQUATE: 1, Mention.FAIR: 1,
        Mention.GOOD: 2, Mention.VERY_GOOD: 1,
    })
    assert proportions(tally, Mention.GOOD) == (
        Fraction(1, 6), Fraction(1, 2), Fraction(1, 3)
    )
    assert proportions(MentionTally({}), Mention.GOOD) == (0, 0, 0)


def test_seven_grade_scenario():
    tally = MentionTally({
        Mention.BAD: 1, Mention.INADEQUATE: 1, Mention.PASSABLE: 0,
        Mention.FAIR: 1, Mention.GOOD: 2, Mention.VERY_GOOD: 1,
        Mention.EXCELLENT: 0,
    })
    score = usual(tally)
    assert math.isfinite(score)
    assert score == -1


def test_balanced():
    tally = MentionTally({
        Mention.BAD: 2, Mention.INADEQUATE: 1, Mention.PASSABLE: 1,
        Mention.FAIR: 2, Mention.VERY_GOOD: 1, Mention.EXCELLENT: 3,
    })
    assert majority_grade(tally) == Mention.FAIR
    assert usual(tally) == 0


def test_positive():
    tally = MentionTally({
        Mention.EXCELLENT: 2, Mention.VERY_GOOD: 2, Mention.GOOD: 1,
    })
    assert usual(tally) == Fraction(1, 2)
    assert typical(tally) == Fraction(1, 5)
    assert central(tally) == 2


def test_negative():
    tally = MentionTally({Mention.VERY_GOOD: 3, Mention.GOOD: 2})
    assert usual(tally) == Fraction(-2, 3)
    assert typical(tally) == Fraction(-2, 5)
    assert central(tally) == 0


def test_central_no_opponents():
    tally = MentionTally({Mention.EXCELLENT: 1, Mention.VERY_GOOD: 2})
    assert central(tally) == float('inf')


@pytest.mark.parametrize('counts', SIGN_TALLIES)
def test_sign_invariant(counts):
    tally = MentionTally(counts)
    p, q, r = proportions(tally, majority_grade(tally))
    assert r > 0
    assert sign(usual(tally)) == sign(p - q)
    assert sign(typical(tally)) == sign(p - q)


def test_no_ballots_at_grade():
    tally = MentionTally({Mention.EXCELLENT: 2, Mention.BAD: 1})
    assert usual(tally, Mention.FAIR) == Fraction(1, 3)
    tally = MentionTally({Mention.EXCELLENT: 1, Mention.BAD: 1})
    assert usual(tally, Mention.FAIR) == 0


def test_registry():
    assert judgelib.component.tiebreak.get('usual') is usual
    assert judgelib.component.tiebreak.construct('central') is central
    assert judgelib.component.tiebreak.construct(len) is len
    with pytest.raises(KeyError):
        judgelib.component.tiebreak.get('ballot_removal')


def test_score_by_name():
    tally = MentionTally({
        Mention.EXCELLENT: 2, Mention.VERY_GOOD: 2, Mention.GOOD: 1,
    })
    assert judgelib.component.tiebreak.score(tally) == Fraction(1, 2)
    assert judgelib.component.tiebreak.score(tally, 'typical') == \
        Fraction(1, 5)
