"""Infrastructure Layer — database sessions, the SQLAlchemy partition store, logging.

Invariants:
    - Everything here does IO; nothing here makes balancing decisions
"""
