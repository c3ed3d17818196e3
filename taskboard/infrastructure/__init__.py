"""Infrastructure Layer: the in-memory store, locking and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Domain errors raised here come from core/errors.py

Design Decisions:
    - Store lives here rather than in core/: it owns a lock and shared state
"""
