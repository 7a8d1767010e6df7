"""Ingestion helpers.

Record sources answer `fetch_list(resource)` for the four dashboard
resources; `load_snapshot` fetches each one independently and validates the
records into entity models.
"""
