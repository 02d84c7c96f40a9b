"""Database Metadata: SQLAlchemy declarative base shared by every model.

Invariants:
    - Only Base lives here; engine and sessions belong to infrastructure/database.py
"""
