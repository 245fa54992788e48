"""Services Layer: orchestrates validation, identity generation and storage.

Invariants:
    - Services receive their repository by injection, never import a backend
"""
