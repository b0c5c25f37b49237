"""Services Layer — imperative shell around the pure payment core.

Invariants:
    - Services orchestrate core stages and log outcomes; they hold no business rules

Design Decisions:
    - One module per use case (ADR: ExMA no god objects)
"""
