"""
Pydantic schema definitions for provider values and API payloads.

Schemas are separated from the storage layer to decouple the API
representation from the table layout.
"""
