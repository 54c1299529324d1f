"""Shortstop Handlers — value-resolution handlers for protocol-tagged config tokens.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
      (factories live in services.handle_*, collected in services.handlers_registry)
"""
