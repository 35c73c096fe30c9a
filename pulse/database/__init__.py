"""Database package - SQLAlchemy base, ORM models and migration URL."""
