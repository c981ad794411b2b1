"""
Shared test fixtures.
"""

import pytest

from contract_api.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield
    limiter.reset()
