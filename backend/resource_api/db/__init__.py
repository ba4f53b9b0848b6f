"""Database Infrastructure: SQLAlchemy Base shared by models and migrations.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL in deployment, aiosqlite in tests
"""
