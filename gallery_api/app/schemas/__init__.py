"""
Pydantic schema definitions for API payloads.

Schemas describe the response bodies in the OpenAPI document.
"""
