from .body_limit import BodySizeLimitMiddleware
from .error_handling import ErrorHandlingMiddleware
from .origin import OriginAllowListMiddleware
from .rate_limit import RateLimitMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "BodySizeLimitMiddleware",
    "ErrorHandlingMiddleware",
    "OriginAllowListMiddleware",
    "RateLimitMiddleware",
    "RequestLoggingMiddleware",
]
