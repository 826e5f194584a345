"""Filmoteca Application Package — movie and genre catalog API.

Invariants:
    - Package root holds only the version constant (import side-effects prohibited)

Design Decisions:
    - explicit imports only, no star exports
"""

__version__ = "1.0.0"
