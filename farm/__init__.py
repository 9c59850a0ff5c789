"""Farm Package — balanced barn allocation for animals partitioned by favorite color.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
