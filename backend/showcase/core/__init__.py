"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and randomness injected or isolated)

Design Decisions:
    - Functional core separated from imperative shell: stores in services/ orchestrate
      persistence around the pure rules defined here
"""
