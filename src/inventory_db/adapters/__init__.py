"""Adapters – concrete integrations (SQLAlchemy)."""
