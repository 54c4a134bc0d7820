'''Grade scales - the ordered qualitative mentions options are rated with.

A grade is a member of an enumeration derived from :class:`Grade`. The members
must be declared from the best grade to the worst one; the declaration index
is the grade position (0 for the best grade). Grades are never compared by
their names or values, only by their positions within the scale.

Three scales used in practice are predefined:

-   :class:`Mention`, a seven-grade English scale from *Excellent* to *Bad*,
-   :class:`JudgmentMention`, a seven-grade scale following the French wording
    of majority judgment (*Excellent* to *To reject*),
-   :class:`ShortMention`, a five-grade scale.

Custom scales can be created by subclassing :class:`Grade` and wrapping the
subclass in a :class:`GradeScale`.
'''

from __future__ import annotations

import enum
from typing import Any, Dict, Iterator, List, Type, Union

from judgelib.persist import simple_serialization


class ScaleError(Exception):
    '''A grade scale is invalid or scales were mixed where one is required.'''
    pass


class GradeError(Exception):
    '''A grade does not belong to the grade scale in use.

    :param grade: The grade (or its name) that was found to be invalid.
    :param scale: The scale in whose context the grade was checked.
    '''
    def __init__(self, grade: Any, scale: GradeScale = None):
        self.grade = grade
        self.scale = scale
        message = f'invalid grade: {grade!r}'
        if scale is not None:
            message += ', must be one of ' + ', '.join(
                g.value for g in scale
            )
        super().__init__(message)


class Grade(enum.Enum):
    '''Base for grade enumerations. Declare members from best to worst.'''

    @property
    def position(self) -> int:
        '''Position of the grade within its scale, 0 being the best.'''
        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.value


class Mention(Grade):
    EXCELLENT = 'Excellent'
    VERY_GOOD = 'VeryGood'
    GOOD = 'Good'
    FAIR = 'Fair'
    PASSABLE = 'Passable'
    INADEQUATE = 'Inadequate'
    BAD = 'Bad'


class JudgmentMention(Grade):
    EXCELLENT = 'Excellent'
    VERY_GOOD = 'VeryGood'
    GOOD = 'Good'
    GOOD_ENOUGH = 'GoodEnough'
    ONLY_AVERAGE = 'OnlyAverage'
    INSUFFICIENT = 'Insufficient'
    TO_REJECT = 'ToReject'


class ShortMention(Grade):
    EXCELLENT = 'Excellent'
    GOOD = 'Good'
    FAIR = 'Fair'
    POOR = 'Poor'
    REJECT = 'Reject'


@simple_serialization
class GradeScale:
    '''A fixed ordered sequence of grades, from best to worst.

    :param grades: A :class:`Grade` subclass with at least two members.
    '''
    def __init__(self, grades: Type[Grade]):
        if not (isinstance(grades, type) and issubclass(grades, Grade)):
            raise ScaleError(f'grade scale must be a Grade enum: {grades!r}')
        self.grades = grades
        self._order = list(grades)
        if len(self._order) < 2:
            raise ScaleError(
                f'grade scale needs at least two grades: {grades.__name__}'
            )
        self._positions = {grade: i for i, grade in enumerate(self._order)}

    def __iter__(self) -> Iterator[Grade]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, grade: Any) -> bool:
        return grade in self._positions

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, GradeScale) and self.grades is other.grades

    def __hash__(self) -> int:
        return hash(self.grades)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.grades.__name__})'

    @property
    def best(self) -> Grade:
        return self._order[0]

    @property
    def worst(self) -> Grade:
        return self._order[-1]

    def position(self, grade: Grade) -> int:
        '''Return the position of the grade, 0 being the best.

        :raises GradeError: If the grade is not a part of this scale.
        '''
        try:
            return self._positions[grade]
        except KeyError:
            raise GradeError(grade, self) from None

    def grade_at(self, position: int) -> Grade:
        '''Return the grade at the given position (0 is the best grade).'''
        if not 0 <= position < len(self._order):
            raise GradeError(position, self)
        return self._order[position]

    def parse(self, grade: Union[Grade, str]) -> Grade:
        '''Return the grade of this scale denoted by the argument.

        Accepts grade objects of this scale, their values (such as
        ``'VeryGood'``) and their member names (such as ``'VERY_GOOD'``).

        :raises GradeError: If no grade of this scale matches.
        '''
        if grade in self._positions:
            return grade
        if isinstance(grade, str):
            for member in self._order:
                if grade == member.value or grade == member.name:
                    return member
        raise GradeError(grade, self)

    def compare(self, first: Grade, second: Grade) -> int:
        '''Compare two grades; negative if the first one is better.'''
        return self.position(first) - self.position(second)


SCALES: Dict[str, GradeScale] = {
    'mention': GradeScale(Mention),
    'judgment': GradeScale(JudgmentMention),
    'short': GradeScale(ShortMention),
}

DEFAULT_SCALE: GradeScale = SCALES['mention']


def get_scale(name: str) -> GradeScale:
    '''Return a predefined grade scale by its name.'''
    try:
        return SCALES[name]
    except KeyError:
        raise KeyError(
            f'unknown grade scale: {name}, available: '
            + ', '.join(SCALES.keys())
        )


def scale_names() -> List[str]:
    return list(SCALES.keys())
