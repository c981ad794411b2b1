"""Application layer for the items bounded context."""
