'''Approval voting: ranking options by their number of approvals.

Each voter approves of any number of options. Options are ordered by their
raw approval count with the same rank policy as majority judgment. Options
with equal approval counts stay tied: they share their rank and there is no
secondary ordering among them.
'''

from __future__ import annotations

import dataclasses
import logging
from fractions import Fraction
from typing import Any, Dict, List, Optional, Union

import judgelib.evaluate.core
from judgelib.persist import simple_serialization
from judgelib.tally import ApprovalSummary, CountError, check_count


@simple_serialization
@dataclasses.dataclass(frozen=True)
class ApprovalResult:
    '''Result of approval voting for a single option.

    :param option: The option evaluated.
    :param approvals: Number of ballots approving of the option.
    :param rank: Rank of the option, 1 being the best.
    :param is_ex_aequo: Whether another option shares the rank.
    :param approval_rate: Share of the ballots cast that approve of the
        option; None if the number of ballots is unknown.
    '''
    option: ApprovalSummary
    approvals: int
    rank: int
    is_ex_aequo: bool
    approval_rate: Optional[Fraction] = None

    @property
    def is_winner(self) -> bool:
        return self.rank == 1


@simple_serialization
class ApprovalVoting(judgelib.evaluate.core.RankingEvaluator):
    '''Rank options by the number of approvals they received.'''

    def rank(self,
             options: Union[List[ApprovalSummary], Dict[Any, int]],
             n_ballots: Optional[int] = None,
             ) -> List[ApprovalResult]:
        '''Rank the options by their approval counts.

        :param options: Options with their approval counts. A mapping of
            option ids to approval counts is also accepted.
        :param n_ballots: Total number of ballots cast in the vote, used to
            compute approval rates.
        :returns: One result per option, best first. Options with equal
            approval counts share a rank and keep their input order.
        :raises judgelib.tally.CountError: If the number of ballots is
            invalid or lower than some approval count.
        :raises ValueError: If two options have the same id.
        '''
        options = self._as_summaries(options)
        judgelib.evaluate.core.check_unique_ids(opt.id for opt in options)
        if n_ballots is not None:
            check_count(n_ballots)
            for option in options:
                if option.approvals > n_ballots:
                    raise CountError(n_ballots)
        ranked = judgelib.evaluate.core.assign_ranks(
            (option, option.approvals) for option in options
        )
        rank_counts = judgelib.evaluate.core.shared_ranks(
            rank for option, approvals, rank in ranked
        )
        for rank, count in rank_counts.items():
            if count > 1:
                logging.info('%d options tied with equal approvals at rank %d',
                             count, rank)
        return [
            ApprovalResult(
                option=option,
                approvals=approvals,
                rank=rank,
                is_ex_aequo=rank_counts[rank] > 1,
                approval_rate=(
                    Fraction(approvals, n_ballots) if n_ballots else None
                ),
            )
            for option, approvals, rank in ranked
        ]

    @staticmethod
    def _as_summaries(options: Union[
                          List[ApprovalSummary],
                          Dict[Any, int]
                      ]) -> List[ApprovalSummary]:
        if hasattr(options, 'items'):
            return [
                ApprovalSummary(id=opt_id, label=str(opt_id), approvals=count)
                for opt_id, count in options.items()
            ]
        return list(options)
