"""
Rate limiting configuration.

Uses slowapi, keyed on the client address. Endpoints opt in with
`@limiter.limit(...)`; rejections surface as RateLimitExceeded and are
turned into an error envelope by the central error handlers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from contract_api.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)
