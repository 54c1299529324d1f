"""Services Layer — one handler factory per protocol.

Invariants:
    - Each factory captures its configuration once and returns a stateless handler
    - Sync handlers raise on failure; async handlers fail through their awaitable
    - Protocol -> factory mapping is explicit (handlers_registry, no auto-discovery)

Design Decisions:
    - One handle_*.py file per protocol for locality
"""
