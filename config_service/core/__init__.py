"""Core settings, logging, database and error types."""
