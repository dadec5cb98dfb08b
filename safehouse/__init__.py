"""
SafeHouse case-file persistence.

Life-situation documents, the records attached to them, and the repository
that stores both.
"""
