"""
Per-concern repository modules for database access.

`documents` and `records` are row-level adapters, `record_registry` and
`inquiry_sources` are pure helpers, `citizenship` aggregates hints, and
`life_situations` is the async facade application code uses.
"""
