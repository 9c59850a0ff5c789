"""Core Layer — pure balancing logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic for a given input order

Design Decisions:
    - Functional core separated from imperative shell: services read the
      partition, ask core what to do, then write
"""
