"""Services Layer — persistence operations consumed by the API routes.

Invariants:
    - Services own the AsyncSession unit of work (commit per operation)
    - Services return domain results (LookupResult), never HTTP responses
"""
