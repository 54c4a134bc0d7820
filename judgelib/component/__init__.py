'''Building blocks of the evaluators: median resolution and tie-break scores.

The components are plain functions over tallies. Those that come in several
variants (tie-break scores) are collected in registers keyed by name, so that
an evaluator can be configured by a string.
'''
