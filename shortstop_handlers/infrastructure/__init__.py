"""Infrastructure Layer — module loading, async adapters, and logging.

Invariants:
    - Infrastructure never imports from services/
    - Process-wide state (the module registry) lives here and is injectable

Design Decisions:
    - Side-effecting code isolated from core/ grammars (ADR: single responsibility)
"""
