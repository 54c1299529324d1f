"""Core Layer — pure resolution logic, no I/O, no async, no module loading.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - All functions are pure and deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell: token grammars and path
      anchoring are testable without a filesystem
"""
