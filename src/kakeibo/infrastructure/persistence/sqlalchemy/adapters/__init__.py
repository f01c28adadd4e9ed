"""SQLAlchemy adapters implementing application ports."""
