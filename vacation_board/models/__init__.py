"""
API request/response schemas.

Dependencies: pydantic
System role: HTTP API contracts
"""
