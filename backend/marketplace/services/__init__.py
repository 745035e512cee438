"""Services Layer — entity handlers (the imperative shell around core rules).

Invariants:
    - One handler class per aggregate, each wrapping an AsyncSession
    - Referential lookups happen here; the decisions happen in core/

Design Decisions:
    - One handler file per aggregate for locality
"""
