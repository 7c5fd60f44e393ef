"""Infrastructure Layer - database sessions, the SQL query layer and logging setup.

Invariants:
    - Backend exceptions never leave this layer untranslated: query failures become
      StoreRejection, session failures become DatabaseError
"""
