"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
"""

from usuarios_api.models.usuario import Usuario  # noqa: F401
