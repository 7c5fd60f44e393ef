"""Services Layer - per-resource handlers running validate -> query -> translate.

Invariants:
    - Handlers depend on the ContentStore protocol, never on a session or engine
    - Validation runs before any store call; store rejections are translated, never
      passed through raw
"""
