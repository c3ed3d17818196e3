"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Schemas check JSON shape only; field rules live in core/validate.py

Design Decisions:
    - Separate from core.task.Task: schemas are API contracts, Task is the domain record
"""
