"""Core Layer — pure marketplace rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (timestamps aside)

Design Decisions:
    - Workflow and ownership rules live here so every entry point shares them
"""
