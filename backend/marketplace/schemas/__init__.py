"""Schemas — Pydantic models for RPC inputs (validation) and outputs (coercion).

Invariants:
    - Input models reject malformed/out-of-range data before any store access
    - Output models coerce fixed-point Decimal columns to native numbers
"""
