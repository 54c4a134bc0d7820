"""Judgelib - a library for ranking the options of graded votes.

In a graded vote, every participant rates every option on a fixed ordered
scale of qualitative grades (from *Excellent* to *Bad*, for example). The
options are then ranked by majority judgment: by their majority (median)
grade first, and among options sharing the majority grade, by a tie-break
score computed from the shares of ballots above and below it.

The library is organized as follows:

-   The ``grade`` module defines the grade scales.
-   The ``tally`` module defines the input of the evaluators - the numbers of
    ballots giving each grade to an option, as collected elsewhere.
-   The ``component`` subpackage holds the building blocks - the majority
    grade resolution and the tie-break scores.
-   The ``evaluate`` subpackage holds the evaluators that rank the options,
    for majority judgment and for simple approval voting.
-   The ``display``, ``io`` and ``persist`` modules render, read and
    serialize the inputs and results.
"""
