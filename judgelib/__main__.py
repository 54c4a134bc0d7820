"""A commandline tool to rank the options of a vote from a tally table.

Reads a table of per-option grade counts (or approval counts) and prints the
options ranked by majority judgment (or by approvals), with shared ranks
marked by an equals sign.
"""

import argparse
import io
import logging
import sys
import warnings
from typing import List, Optional

import judgelib.component.tiebreak
import judgelib.display
import judgelib.grade
import judgelib.io.table
from judgelib.evaluate.approval import ApprovalVoting
from judgelib.evaluate.cardinal import MajorityJudgment

argparser = argparse.ArgumentParser(
    prog='judgelib',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load the tally table from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the tally table from standard input',
)
argparser.add_argument(
    '-s', '--scale',
    default='mention',
    choices=judgelib.grade.scale_names(),
    help='grade scale of the graded tally columns',
)
argparser.add_argument(
    '-t', '--tie-breaking',
    default=judgelib.component.tiebreak.DEFAULT,
    choices=list(judgelib.component.tiebreak.TIEBREAKS.keys()),
    help='tie-break score for options with equal majority grades',
)
argparser.add_argument(
    '-d', '--delimiter',
    default=',',
    help='column delimiter of the tally table',
)
argparser.add_argument(
    '-n', '--n-ballots',
    type=int,
    help='total number of ballots cast, to show approval rates',
)
argparser.add_argument(
    '-c', '--csv',
    action='store_true',
    help='print the ranking as a delimited table',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages',
)


def main(input_file: io.TextIOBase,
         use_stdin: bool = False,
         scale: str = 'mention',
         tie_breaking: str = judgelib.component.tiebreak.DEFAULT,
         delimiter: str = ',',
         n_ballots: Optional[int] = None,
         csv: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    table = judgelib.io.table.load(
        input_file,
        scale=judgelib.grade.get_scale(scale),
        delimiter=delimiter,
    )
    if not table.options:
        warnings.warn('no options in the tally table, terminating')
        return
    if table.is_approval:
        logging.info('ranking %d options by approvals', len(table.options))
        results = ApprovalVoting().rank(table.options, n_ballots=n_ballots)
    else:
        if n_ballots is not None:
            warnings.warn('number of ballots only applies to approval tables,'
                          ' ignoring')
        logging.info('ranking %d options by majority judgment (%s)',
                     len(table.options), tie_breaking)
        results = MajorityJudgment(tie_breaking).rank(table.options)
    if csv:
        judgelib.io.table.dump(sys.stdout, results, delimiter=delimiter)
    elif table.is_approval:
        show_approval_ranking(results)
    else:
        show_judgment_ranking(results)


def show_judgment_ranking(results) -> None:
    """Print majority judgment results as an aligned table."""
    rows = [
        (
            judgelib.display.format_rank(result),
            result.option.label,
            judgelib.display.summary(result),
        )
        for result in results
    ]
    _print_rows(rows)


def show_approval_ranking(results) -> None:
    """Print approval results as an aligned table."""
    rows = []
    for result in results:
        approvals = f'{result.approvals} approvals'
        if result.approval_rate is not None:
            approvals += ' ({})'.format(
                judgelib.display.format_share(result.approval_rate)
            )
        rows.append((
            judgelib.display.format_rank(result),
            result.option.label,
            approvals,
        ))
    _print_rows(rows)


def _print_rows(rows) -> None:
    rank_width = max(len(row[0]) for row in rows)
    label_width = max(len(row[1]) for row in rows)
    for rank, label, info in rows:
        print(rank.rjust(rank_width), ' ', label.ljust(label_width), ' ', info)


def run(argv: Optional[List[str]] = None) -> None:
    args = argparser.parse_args(argv)
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        main(**vars(args))


if __name__ == '__main__':
    run()
