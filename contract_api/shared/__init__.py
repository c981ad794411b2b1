"""
Shared module package.

Contains the request/response contract pipeline and cross-cutting concerns
used by every router:
- Input sanitization and the sanitizing route class
- Response envelopes and pagination metadata
- Error types, classification and handlers
- Security middleware and rate limiting
- Logging configuration
"""
