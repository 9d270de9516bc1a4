"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are NOT mapped to tables: each store is one document row

Design Decisions:
    - All models imported here so Base.metadata is populated before create_all
"""

from showcase.models.document import StoredDocument  # noqa: F401
