"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and lookup outcomes are plain values, not HTTP responses

Design Decisions:
    - Functional core separated from imperative shell
"""
