"""
Domain layer for contact confirmation business logic.

This layer contains:
- Data models (type-safe structures)
- Delivery client interface (injected capability)
- Request handling (validation, rendering, dispatch)
"""
