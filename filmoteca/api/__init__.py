"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies or empty bodies

Design Decisions:
    - Thin routes delegate to catalog services
"""
