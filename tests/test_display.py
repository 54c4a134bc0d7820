
import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import judgelib.display
from judgelib.evaluate.cardinal import AnalysisResult
from judgelib.grade import Mention
from judgelib.tally import MentionTally, OptionSummary


def result(rank=1, is_ex_aequo=False, score=Fraction(1, 4)):
    return AnalysisResult(
        option=OptionSummary('o', 'Option', MentionTally({Mention.GOOD: 1})),
        majority_grade=Mention.GOOD,
        score=score,
        rank=rank,
        is_ex_aequo=is_ex_aequo,
        majority_share=Fraction(1),
    )


@pytest.mark.parametrize('score, expected', [
    (0.2543, '0.25'),
    (Fraction(1, 3), '0.33'),
    (-0.5, '-0.50'),
    (Fraction(0), '0.00'),
    (float('inf'), '∞'),
    (float('-inf'), '-∞'),
])
def test_format_score(score, expected):
    assert judgelib.display.format_score(score) == expected


def test_format_share():
    assert judgelib.display.format_share(Fraction(3, 10)) == '30.0%'
    assert judgelib.display.format_share(Fraction(2, 3), digits=0) == '67%'


def test_summary():
    assert judgelib.display.summary(result()) == 'Good • score: 0.25'


def test_format_rank():
    assert judgelib.display.format_rank(result()) == '1'
    assert judgelib.display.format_rank(result(2, True)) == '2='


def test_explain_score():
    assert 'supporters' in judgelib.display.explain_score(Fraction(1, 2))
    assert 'opponents outweigh' in judgelib.display.explain_score(-1)
    assert judgelib.display.explain_score(0) == 'balanced support'
