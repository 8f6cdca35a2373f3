"""Infrastructure adapters: logging, settings, database, repositories."""
