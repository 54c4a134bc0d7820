"""Read tally tables and write ranking tables as delimited text.

A graded tally table has a header row with the ``id`` and ``label`` columns
followed by one column per grade (named by grade values such as
``VeryGood``, or member names such as ``VERY_GOOD``); grades without
a column count zero. Every following row holds one option::

    id,label,Excellent,VeryGood,Good,Fair,Passable,Inadequate,Bad
    1,Pizza,0,1,2,1,0,1,1
    2,Sushi,1,0,3,0,0,0,0

An approval tally table has a single ``approvals`` column after the label.
Empty lines and lines starting with ``#`` are ignored.
"""

import csv
import dataclasses
import io
from typing import Iterable, List, Union

import judgelib.display
import judgelib.io.core
from judgelib.evaluate.approval import ApprovalResult
from judgelib.evaluate.cardinal import AnalysisResult
from judgelib.grade import GradeScale, GradeError, DEFAULT_SCALE
from judgelib.tally import (
    ApprovalSummary, MentionTally, OptionSummary, TallyError
)

APPROVAL_COLUMN: str = 'approvals'
KEY_COLUMNS: List[str] = ['id', 'label']


class TableParseError(judgelib.io.core.ParseError):
    pass


@dataclasses.dataclass
class TallyTable:
    """Options loaded from a tally table."""
    options: List[Union[OptionSummary, ApprovalSummary]]
    is_approval: bool = False


def load_lines(lines: Iterable[str],
               scale: GradeScale = DEFAULT_SCALE,
               delimiter: str = ',',
               ) -> TallyTable:
    """Load option tallies from the lines of a table.

    :param lines: Lines of the table, including the header.
    :param scale: Grade scale to interpret the grade columns with.
    :param delimiter: Column delimiter.
    :raises ValueError: If the delimiter is not a single character.
    :raises TableParseError: If the header or a row is malformed.
    """
    check_delimiter(delimiter)
    header = None
    grades = None
    options = []
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        row = [cell.strip() for cell in _parse_row(line, delimiter)]
        if header is None:
            header = row
            grades = _parse_header(header, scale, line_no)
            continue
        if len(row) != len(header):
            raise TableParseError(
                f'expected {len(header)} columns, got {len(row)}', line_no
            )
        opt_id, label = row[:2]
        try:
            counts = [int(cell) for cell in row[2:]]
        except ValueError as e:
            raise TableParseError(f'invalid count: {e}', line_no) from e
        try:
            if grades is None:
                options.append(ApprovalSummary(opt_id, label, counts[0]))
            else:
                tally = MentionTally(dict(zip(grades, counts)), scale)
                options.append(OptionSummary(opt_id, label, tally))
        except TallyError as e:
            raise TableParseError(str(e), line_no) from e
    if header is None:
        raise TableParseError('missing header')
    return TallyTable(options=options, is_approval=(grades is None))


load, loads = judgelib.io.core.loaders(load_lines)


def check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(
            f'delimiter must be a single character, got {delimiter!r}'
        )


def _parse_row(line: str, delimiter: str) -> List[str]:
    return next(csv.reader([line], delimiter=delimiter))


def _parse_header(header: List[str], scale: GradeScale, line_no: int):
    if [col.lower() for col in header[:2]] != KEY_COLUMNS:
        raise TableParseError(
            'header must start with ' + ', '.join(KEY_COLUMNS), line_no
        )
    value_cols = header[2:]
    if not value_cols:
        raise TableParseError('no grade or approval columns', line_no)
    if [col.lower() for col in value_cols] == [APPROVAL_COLUMN]:
        return None
    try:
        grades = [scale.parse(col) for col in value_cols]
    except GradeError as e:
        raise TableParseError(str(e), line_no) from e
    if len(set(grades)) != len(grades):
        raise TableParseError('duplicate grade column', line_no)
    return grades


def dump_lines(results: List[Union[AnalysisResult, ApprovalResult]],
               delimiter: str = ',',
               ) -> Iterable[str]:
    """Write ranking results as a table, best first.

    :param results: Results of a single evaluator's `rank()` call.
    :param delimiter: Column delimiter.
    :raises ValueError: If the delimiter is not a single character.
    """
    check_delimiter(delimiter)
    if results and isinstance(results[0], ApprovalResult):
        yield _dump_row(
            ['rank', 'id', 'label', 'approvals', 'approval_rate'], delimiter
        )
        for result in results:
            yield _dump_row([
                judgelib.display.format_rank(result),
                result.option.id,
                result.option.label,
                result.approvals,
                (
                    '' if result.approval_rate is None
                    else judgelib.display.format_share(result.approval_rate)
                ),
            ], delimiter)
    else:
        yield _dump_row(
            ['rank', 'id', 'label', 'majority_grade', 'score',
             'majority_share'],
            delimiter
        )
        for result in results:
            yield _dump_row([
                judgelib.display.format_rank(result),
                result.option.id,
                result.option.label,
                str(result.majority_grade),
                judgelib.display.format_score(result.score),
                judgelib.display.format_share(result.majority_share),
            ], delimiter)


dump, dumps = judgelib.io.core.dumpers(dump_lines)


def _dump_row(values: List, delimiter: str) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, delimiter=delimiter, lineterminator='').writerow(values)
    return buffer.getvalue()
