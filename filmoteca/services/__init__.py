"""Service Layer — one catalog service per resource.

Invariants:
    - Services receive the request's AsyncSession; they never open sessions themselves
    - Services raise FilmotecaError subclasses, never HTTP responses
    - Every store round trip runs inside guard_store()
"""
