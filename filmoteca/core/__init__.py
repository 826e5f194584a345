"""Core Layer — pure domain code: error hierarchy, domain types, localized strings.

Invariants:
    - Core never imports from api/, services/ or infrastructure/
    - No IO in core modules
"""
