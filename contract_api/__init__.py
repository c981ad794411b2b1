"""
Contract API — versioned JSON API service.

Application package root. Follows a hexagonal layout (ports & adapters).

Layers:
    - domain: Entities, ports (ABCs).
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependencies.
    - shared: The request/response contract pipeline (sanitization,
      envelopes, pagination, error classification) plus cross-cutting
      concerns (logging, security).
"""
