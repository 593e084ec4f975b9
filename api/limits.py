"""Request rate limiting shared by the app and its routers."""

from fastapi import Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from config import config


def per_minute_limit() -> str:
    """Current per-client limit, read on every request."""
    return f"{config.rate_limit.requests_per_minute}/minute"


limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )
