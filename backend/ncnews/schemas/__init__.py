"""Pydantic Schemas - response shapes for API endpoints.

Invariants:
    - Schemas describe what leaves the API; request bodies are checked by
      core/validate_request.py so the error message stays under our control
"""
