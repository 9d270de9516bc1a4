"""Database Infrastructure — SQLAlchemy Base shared by all ORM models.

Invariants:
    - Single engine per process (initialized via init_db)
    - Sessions are synchronous; store operations never suspend

Design Decisions:
    - SQLite file by default: local, durable across restarts, no server process
"""
