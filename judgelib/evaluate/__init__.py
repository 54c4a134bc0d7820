'''Evaluate the results of graded and approval votes.

Evaluators rank the options of a vote given their tallies. The `rank()`
method of every evaluator returns one result object per option, best first,
holding its rank and whether it shares the rank with other options
(*ex aequo*). The `evaluate()` method selects a given number of best options;
if some of them are tied across the cutoff, a :class:`core.Tie` object will
appear in the list, repeated the number of times equal to the number of tied
seats.

None of the evaluators validate individual ballots; they work with aggregate
tallies from :mod:`judgelib.tally`, which are validated on construction.
'''

from judgelib.evaluate.core import *    # noqa
