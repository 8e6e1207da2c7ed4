"""Infrastructure: database engine, sessions and ORM models."""
