'''Tallies of ballots per option, the input of the evaluators.

The tallies are produced by whatever collects the ballots (a database, a live
ballot store...) and only describe aggregate counts: how many ballots gave
the option each of the grades (:class:`MentionTally`), or how many ballots
approved of the option (:class:`ApprovalSummary`).

Tallies are validated eagerly on construction. A negative count or a grade
outside the scale would silently corrupt the result, so they raise
a subclass of :class:`TallyError` (or :class:`judgelib.grade.GradeError`)
instead.
'''

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from judgelib.grade import Grade, GradeScale, DEFAULT_SCALE
from judgelib.persist import simple_serialization


class TallyError(Exception, metaclass=abc.ABCMeta):
    '''A tally is invalid.'''
    pass


class CountError(TallyError):
    '''A ballot count is negative or not an integer.

    :param count: The invalid count.
    :param grade: The grade the count was given for, if any.
    '''
    def __init__(self, count: Any, grade: Optional[Grade] = None):
        self.count = count
        self.grade = grade
        message = f'invalid ballot count: {count!r}'
        if grade is not None:
            message += f' for grade {grade}'
        message += ', must be a non-negative integer'
        super().__init__(message)


class DuplicateGradeError(TallyError):
    '''A grade was given more than one count in a single tally.

    :param grade: The grade counted repeatedly.
    '''
    def __init__(self, grade: Grade):
        self.grade = grade
        super().__init__(f'grade {grade} counted more than once')


def check_count(count: Any, grade: Optional[Grade] = None) -> int:
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise CountError(count, grade)
    return count


@simple_serialization
class MentionTally:
    '''Numbers of ballots giving an option each grade of a scale.

    The tally is immutable; grades not mentioned in the input count zero.

    :param counts: A mapping of grades (grade objects, or their names to be
        parsed by the scale) to non-negative ballot counts.
    :param scale: Grade scale of the vote. If not given, it is inferred from
        the grade objects in counts, or the default seven-grade
        :class:`judgelib.grade.Mention` scale is used.
    :raises CountError: If a count is negative or not an integer.
    :raises DuplicateGradeError: If two keys denote the same grade.
    :raises judgelib.grade.GradeError: If a grade is not a part of the scale.
    '''
    def __init__(self,
                 counts: Dict[Union[Grade, str], int],
                 scale: Optional[GradeScale] = None,
                 ):
        if scale is None:
            scale = self._infer_scale(counts)
        self.scale = scale
        parsed = {}
        for key, count in counts.items():
            grade = scale.parse(key)
            if grade in parsed:
                raise DuplicateGradeError(grade)
            parsed[grade] = check_count(count, grade)
        self._counts = tuple(parsed.get(grade, 0) for grade in scale)
        self.total = sum(self._counts)

    @staticmethod
    def _infer_scale(counts: Dict[Union[Grade, str], int]) -> GradeScale:
        for key in counts:
            if isinstance(key, Grade):
                return GradeScale(type(key))
        return DEFAULT_SCALE

    @classmethod
    def empty(cls, scale: GradeScale = DEFAULT_SCALE) -> MentionTally:
        return cls({}, scale)

    @property
    def counts(self) -> Dict[Grade, int]:
        '''Ballot counts for all grades of the scale, best to worst.'''
        return dict(self.items())

    def items(self) -> Iterator[Tuple[Grade, int]]:
        return zip(self.scale, self._counts)

    def count(self, grade: Union[Grade, str]) -> int:
        '''Number of ballots giving exactly the grade.'''
        return self._counts[self.scale.position(self.scale.parse(grade))]

    def above(self, grade: Union[Grade, str]) -> int:
        '''Number of ballots giving a grade strictly better than this one.'''
        return sum(self._counts[:self.scale.position(self.scale.parse(grade))])

    def below(self, grade: Union[Grade, str]) -> int:
        '''Number of ballots giving a grade strictly worse than this one.'''
        position = self.scale.position(self.scale.parse(grade))
        return sum(self._counts[position+1:])

    def cumulative(self) -> List[int]:
        '''Running sums of counts from the best grade to the worst.'''
        sums = []
        running = 0
        for count in self._counts:
            running += count
            sums.append(running)
        return sums

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, MentionTally)
            and self.scale == other.scale
            and self._counts == other._counts
        )

    def __hash__(self) -> int:
        return hash((self.scale, self._counts))

    def __repr__(self) -> str:
        nonzero = ', '.join(
            f'{grade}: {count}' for grade, count in self.items() if count
        )
        return f'{self.__class__.__name__}({{{nonzero}}})'


@simple_serialization
@dataclasses.dataclass(frozen=True)
class OptionSummary:
    '''An option of a graded vote together with its current tally.'''
    id: Any
    label: str
    tally: MentionTally

    def __post_init__(self):
        if not isinstance(self.tally, MentionTally):
            raise TypeError(
                f'tally must be a MentionTally, got {self.tally!r}'
            )


@simple_serialization
@dataclasses.dataclass(frozen=True)
class ApprovalSummary:
    '''An option of an approval vote with its number of approvals.'''
    id: Any
    label: str
    approvals: int

    def __post_init__(self):
        check_count(self.approvals)
