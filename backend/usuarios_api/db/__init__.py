"""Database Infrastructure — declarative base and statement builders.

Invariants:
    - Every statement is a SQLAlchemy construct with bound parameters
"""
