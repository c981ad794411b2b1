"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure
is consistently translated into an error envelope.
"""
