"""Core Layer: domain types, errors, validation and the merge rule. No IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic (clock values are passed in)

Design Decisions:
    - Functional core separated from imperative shell
"""
