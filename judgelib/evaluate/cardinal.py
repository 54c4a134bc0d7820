'''Majority judgment, a median-based graded voting system.

Each voter gives every option a grade from a fixed qualitative scale. Options
are ordered by their majority (median) grade first; options sharing the
majority grade are ordered by a tie-break score computed from the proportions
of ballots above, below and at the majority grade (see
:mod:`judgelib.component.tiebreak`). Options equal in both are tied and share
their rank.
'''

from __future__ import annotations

import dataclasses
import logging
from fractions import Fraction
from numbers import Real
from typing import Any, Dict, List, Mapping, Tuple, Union

import judgelib.component.tiebreak
import judgelib.evaluate.core
from judgelib.component.median import majority_grade, majority_share
from judgelib.grade import Grade, ScaleError
from judgelib.persist import simple_serialization
from judgelib.tally import MentionTally, OptionSummary


@simple_serialization
@dataclasses.dataclass(frozen=True)
class AnalysisResult:
    '''Result of majority judgment for a single option.

    A value computed anew by every ranking; it is never updated in place.

    :param option: The option analyzed.
    :param majority_grade: Majority (median) grade of the option.
    :param score: Tie-break score of the option.
    :param rank: Rank of the option, 1 being the best.
    :param is_ex_aequo: Whether another option shares the rank.
    :param majority_share: Share of ballots giving the option at least its
        majority grade.
    '''
    option: OptionSummary
    majority_grade: Grade
    score: Real
    rank: int
    is_ex_aequo: bool
    majority_share: Fraction

    @property
    def is_winner(self) -> bool:
        return self.rank == 1


@simple_serialization
class MajorityJudgment(judgelib.evaluate.core.RankingEvaluator):
    '''Rank options by majority judgment.

    The evaluator holds no state apart from its configuration, so a single
    instance can rank any number of votes.

    :param tie_breaking: Tie-break score used to order options with the same
        majority grade; the name of a function from
        :mod:`judgelib.component.tiebreak` (`'usual'`, `'typical'`,
        `'central'`) or a callable accepting the tally and its majority grade.
    '''
    def __init__(self,
                 tie_breaking: Union[
                     str, judgelib.component.tiebreak.ScorerType
                 ] = judgelib.component.tiebreak.DEFAULT,
                 ):
        self.tie_breaking = tie_breaking
        self.scorer = judgelib.component.tiebreak.construct(tie_breaking)

    def analyze(self, tally: MentionTally) -> Tuple[Grade, Real]:
        '''Return the majority grade and tie-break score of a tally.'''
        grade = majority_grade(tally)
        return grade, self.scorer(tally, grade)

    def rank(self,
             options: Union[List[OptionSummary], Dict[Any, MentionTally]],
             ) -> List[AnalysisResult]:
        '''Rank the options by majority judgment.

        :param options: Options with their tallies. A mapping of option ids to
            tallies is also accepted; plain mappings of grades (or grade
            names) to counts are turned into tallies.
        :returns: One result per option, best first. Options with equal
            majority grades and scores share a rank and keep their input
            order.
        :raises judgelib.grade.ScaleError: If the tallies use different grade
            scales.
        :raises ValueError: If two options have the same id.
        '''
        options = self._as_summaries(options)
        judgelib.evaluate.core.check_unique_ids(opt.id for opt in options)
        self._check_scales(options)
        keyed = []
        analyses = {}
        for option in options:
            grade, score = self.analyze(option.tally)
            logging.debug('%s: majority grade %s, score %s',
                          option.label, grade, score)
            analyses[option.id] = grade, score
            position = option.tally.scale.position(grade)
            keyed.append((option, (-position, score)))
        ranked = judgelib.evaluate.core.assign_ranks(keyed)
        rank_counts = judgelib.evaluate.core.shared_ranks(
            rank for option, key, rank in ranked
        )
        for rank, count in rank_counts.items():
            if count > 1:
                logging.info('%d options ex aequo at rank %d', count, rank)
        results = []
        for option, key, rank in ranked:
            grade, score = analyses[option.id]
            results.append(AnalysisResult(
                option=option,
                majority_grade=grade,
                score=score,
                rank=rank,
                is_ex_aequo=rank_counts[rank] > 1,
                majority_share=majority_share(option.tally, grade),
            ))
        return results

    @staticmethod
    def _as_summaries(options: Union[
                          List[OptionSummary],
                          Dict[Any, Union[MentionTally, Mapping]]
                      ]) -> List[OptionSummary]:
        if hasattr(options, 'items'):
            return [
                OptionSummary(
                    id=opt_id,
                    label=str(opt_id),
                    tally=(
                        tally if isinstance(tally, MentionTally)
                        else MentionTally(tally)
                    ),
                )
                for opt_id, tally in options.items()
            ]
        return list(options)

    @staticmethod
    def _check_scales(options: List[OptionSummary]) -> None:
        scales = {option.tally.scale for option in options}
        if len(scales) > 1:
            raise ScaleError(
                'options graded on different scales: '
                + ', '.join(sorted(repr(scale) for scale in scales))
            )
