"""Data transfer objects returned by the application layer."""
