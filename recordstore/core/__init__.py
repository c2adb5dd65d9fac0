"""Core Layer — pure record logic, no IO, no logging, no global state.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - Functions never mutate the sequences they receive

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
