"""NC News Application Package - topics, articles and comments over HTTP.

Invariants:
    - Package root contains no executable code (no import side-effects)
"""
