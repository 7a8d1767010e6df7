"""admin_dashboard package.

Turns the raw collections an administration backend serves (users, subjects,
departments, classes) into the summarized view-model shown on the admin
dashboard: KPI counts, per-group totals, top-N rankings and newest-first
lists.

Architecture:
- ingest: record sources and snapshot loading (validated with Pydantic)
- aggregate: pure grouping / ranking / recency functions and the assembler
- pandas is used for the group counts, ranks and timestamp coercion
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
