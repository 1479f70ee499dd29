"""API Layer — FastAPI routes, error handlers and content negotiation.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error responses share one envelope shape: {"error": {...}}

Design Decisions:
    - Thin routes delegate to services
"""
