"""Services Layer: orchestration between the API and the store.

Invariants:
    - Services validate input before touching the store
    - Store errors propagate unchanged (no wrapping, no retries)
"""
