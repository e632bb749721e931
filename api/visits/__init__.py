"""
Visits: append-only visit records, the `VisitManager` and view mapping.
"""
