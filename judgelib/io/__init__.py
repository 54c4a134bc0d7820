"""Reading tallies from files and writing ranking results.

This subpackage is structured into modules by file format. Only simple
delimited tables are supported at the moment, see :mod:`judgelib.io.table`.
"""
