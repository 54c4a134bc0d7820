'''Text rendering of ranking results.'''

import math
from numbers import Real
from typing import Union

from judgelib.evaluate.approval import ApprovalResult
from judgelib.evaluate.cardinal import AnalysisResult


def format_score(score: Real, digits: int = 2) -> str:
    '''Format a tie-break score with a fixed number of decimal places.

    Infinite scores (which only the central judgment produces) are shown as
    the infinity sign.
    '''
    if math.isinf(score):
        return '∞' if score > 0 else '-∞'
    return f'{float(score):.{digits}f}'


def format_share(share: Real, digits: int = 1) -> str:
    '''Format a share (such as an approval rate) as a percentage.'''
    return f'{float(share) * 100:.{digits}f}%'


def format_rank(result: Union[AnalysisResult, ApprovalResult]) -> str:
    '''Format the rank, marking shared ranks with an equals sign.'''
    return f'{result.rank}=' if result.is_ex_aequo else str(result.rank)


def summary(result: AnalysisResult) -> str:
    '''Return a one-line summary of a majority judgment result.'''
    return f'{result.majority_grade} • score: {format_score(result.score)}'


def explain_score(score: Real) -> str:
    if score > 0:
        return 'supporters outweigh opponents'
    elif score < 0:
        return 'opponents outweigh supporters'
    else:
        return 'balanced support'
