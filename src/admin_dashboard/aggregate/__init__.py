"""Dashboard aggregation helpers.

This package contains the pure routines that convert flat entity collections
into the dashboard view-model: first-seen group counts, stable top-N
rankings, newest-first selections and KPI counts. None of them performs I/O
or keeps state, so they can be recomputed whenever a source collection
changes.
"""
