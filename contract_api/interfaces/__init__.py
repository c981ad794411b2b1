"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and dependency
wiring. Every router uses SanitizingRoute and returns envelopes built
by contract_api.shared.responses. No business logic belongs here.
"""
