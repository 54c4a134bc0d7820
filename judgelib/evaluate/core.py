'''General ranking machinery shared by the evaluators.

Both evaluators order the options by a sort key (higher is better) and
assign ranks by the same policy: tied options share a rank and the next
option after a tie group gets its 1-based position in the ordering, so that
e.g. a winner followed by three tied options and a last one are ranked
``1, 2, 2, 2, 5``.
'''

from __future__ import annotations

import abc
import collections
import logging
import operator
from typing import Any, Dict, Iterable, List, Tuple, Union


class Tie(frozenset):
    '''Options tied for a seat.

    This object, a subclass of ``frozenset``, is produced by
    :meth:`RankingEvaluator.evaluate` when two or more options share a rank
    across the cutoff of the number of seats. It is repeated the number of
    times equal to the number of tied seats.
    '''
    @staticmethod
    def any(result: List[Union[Any, Tie]]) -> bool:
        '''Return True if there is any tie in the list, False otherwise.'''
        return any(isinstance(item, Tie) for item in result)


def assign_ranks(keyed: Iterable[Tuple[Any, Any]]
                 ) -> List[Tuple[Any, Any, int]]:
    '''Sort items by their keys in descending order and rank them.

    The sort is stable, so tied items keep their input order. The first item
    gets rank 1; every following item gets its 1-based position if its key
    differs from the key of its predecessor, or the rank of its predecessor
    otherwise.

    :param keyed: Pairs of items and their sort keys (higher is better).
    :returns: Triples of items, their keys and ranks, best first.
    '''
    ordered = sorted(keyed, key=operator.itemgetter(1), reverse=True)
    ranked = []
    for i, (item, key) in enumerate(ordered):
        if i > 0 and key == ordered[i-1][1]:
            rank = ranked[-1][2]
        else:
            rank = i + 1
        ranked.append((item, key, rank))
    return ranked


def shared_ranks(ranks: Iterable[int]) -> Dict[int, int]:
    '''Return the number of items holding each rank.'''
    return collections.Counter(ranks)


def select_n_best(ranked: List[Tuple[Any, int]],
                  n_seats: int,
                  ) -> List[Union[Any, Tie]]:
    '''Return n_seats best items from a ranking.

    :param ranked: Pairs of items and their ranks, best first, as produced by
        :func:`assign_ranks`.
    :param n_seats: Number of seats to be filled.
    :returns: A list of top n_seats items. If there is a tie across the
        cutoff, the last items will refer to a single Tie object containing
        the tied items.
    '''
    if len(ranked) > n_seats:
        threshold_rank = ranked[n_seats-1][1]
        if ranked[n_seats][1] == threshold_rank:
            tied = [item for item, rank in ranked if rank == threshold_rank]
            # the tie group starts at the position given by its rank
            n_untied = threshold_rank - 1
            logging.info('%d options tied at rank %d for %d seats',
                         len(tied), threshold_rank, n_seats - n_untied)
            return (
                [item for item, rank in ranked[:n_untied]]
                + [Tie(tied)] * (n_seats - n_untied)
            )
        else:
            return [item for item, rank in ranked[:n_seats]]
    else:
        return [item for item, rank in ranked]


def check_unique_ids(ids: Iterable[Any]) -> None:
    seen = set()
    for option_id in ids:
        if option_id in seen:
            raise ValueError(f'duplicate option id: {option_id!r}')
        seen.add(option_id)


class RankingEvaluator(metaclass=abc.ABCMeta):
    '''Rank options of a vote and select the best ones.

    A root abstract base class for all evaluators. Subclasses must provide
    a `rank()` method returning result objects that have `option` and `rank`
    attributes, best first.
    '''
    @abc.abstractmethod
    def rank(self, options, *args, **kwargs) -> List[Any]:
        '''Rank the options, best first.'''
        raise NotImplementedError

    def evaluate(self,
                 options,
                 n_seats: int = 1,
                 *args,
                 **kwargs
                 ) -> List[Union[Any, Tie]]:
        '''Select the ids of n_seats best options.

        :param options: Options to evaluate, in the form accepted by `rank()`.
        :param n_seats: Number of options to select.
        :returns: Ids of the selected options, best first. Options tied across
            the cutoff are represented by a repeated :class:`Tie` of their ids.
        '''
        return select_n_best(
            [
                (result.option.id, result.rank)
                for result in self.rank(options, *args, **kwargs)
            ],
            n_seats
        )

    def winners(self, options, *args, **kwargs) -> List[Any]:
        '''Return the ids of all options ranked first.'''
        return [
            result.option.id
            for result in self.rank(options, *args, **kwargs)
            if result.rank == 1
        ]
