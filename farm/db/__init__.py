"""Database Infrastructure — SQLAlchemy declarative base shared by all models."""
