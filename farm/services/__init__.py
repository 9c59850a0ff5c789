"""Services Layer — async orchestration of balancing decisions over a PartitionStore.

Invariants:
    - Services read the partition, ask core/ what to do, then write through the store
    - No in-memory state survives between calls; the store is the only source of truth
"""
