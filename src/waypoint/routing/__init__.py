"""Routing — ordered pattern table with memoized segment matching.

Patterns are registered during setup and the table is frozen before
the first navigation call.
"""
