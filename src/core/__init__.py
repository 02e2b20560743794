"""
Core math substrate: scalar tolerances, homogeneous tuples, matrices and the
contracts guarding them.

Nothing here performs I/O; every operation is a pure function over values.
"""
