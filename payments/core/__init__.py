"""Core Layer — pure payment logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All pipeline stages are pure and deterministic (the executor takes `today` as input)
    - Stages return tagged results; none raises across the pipeline boundary

Design Decisions:
    - Functional core separated from imperative shell (services/ logs, api/ maps to HTTP)
"""
