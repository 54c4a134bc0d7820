
import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
from judgelib.evaluate.approval import ApprovalVoting
from judgelib.evaluate.core import Tie
from judgelib.tally import ApprovalSummary, CountError

VOTES = {'A': 5, 'B': 3, 'C': 3, 'D': 1}


def test_rank():
    results = ApprovalVoting().rank(VOTES)
    assert [res.option.id for res in results] == ['A', 'B', 'C', 'D']
    assert [res.rank for res in results] == [1, 2, 2, 4]
    assert [res.is_ex_aequo for res in results] == [False, True, True, False]
    assert [res.is_winner for res in results] == [True, False, False, False]
    assert all(res.approval_rate is None for res in results)


def test_tie_keeps_input_order():
    results = ApprovalVoting().rank({'C': 3, 'A': 5, 'B': 3})
    assert [res.option.id for res in results] == ['A', 'C', 'B']


def test_gap_after_tie_group():
    results = ApprovalVoting().rank([
        ApprovalSummary('5', 'Last', 0),
        ApprovalSummary('2', 'Tied A', 4),
        ApprovalSummary('1', 'Winner', 9),
        ApprovalSummary('3', 'Tied B', 4),
        ApprovalSummary('4', 'Tied C', 4),
    ])
    assert [res.rank for res in results] == [1, 2, 2, 2, 5]
    assert [res.option.label for res in results] == \
        ['Winner', 'Tied A', 'Tied B', 'Tied C', 'Last']


def test_no_approvals():
    results = ApprovalVoting().rank({'A': 0, 'B': 0})
    assert [res.rank for res in results] == [1, 1]
    assert all(res.is_winner and res.is_ex_aequo for res in results)


def test_approval_rate():
    results = ApprovalVoting().rank(VOTES, n_ballots=10)
    assert [res.approval_rate for res in results] == [
        Fraction(1, 2), Fraction(3, 10), Fraction(3, 10), Fraction(1, 10)
    ]
    results = ApprovalVoting().rank({'A': 0}, n_ballots=0)
    assert results[0].approval_rate is None


@pytest.mark.parametrize('n_ballots', [4, -1])
def test_invalid_ballot_count(n_ballots):
    with pytest.raises(CountError):
        ApprovalVoting().rank(VOTES, n_ballots=n_ballots)


def test_evaluate():
    assert ApprovalVoting().evaluate(VOTES) == ['A']
    assert ApprovalVoting().evaluate(VOTES, 2) == ['A', Tie(['B', 'C'])]
    assert ApprovalVoting().evaluate(VOTES, 3) == ['A', 'B', 'C']


def test_serialization():
    assert ApprovalVoting().to_dict() == {
        'class': 'judgelib.evaluate.approval.ApprovalVoting'
    }
