"""
Pydantic schema definitions for user records and API payloads.
"""
