"""SQLAlchemy credential store for users."""
