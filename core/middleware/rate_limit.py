"""
Rate limiting middleware.

Limits license activation attempts per client address so that license
keys cannot be enumerated by brute force.
"""

import hashlib
import time
from typing import List, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.metrics import errors_total


class ActivationRateLimitMiddleware:
    """
    Fixed-window rate limiting for the activation endpoint.

    Limits are read from ACTIVATION_RATE_LIMIT (requests per window) and
    ACTIVATION_RATE_LIMIT_WINDOW (seconds); counters live in the cache.
    """

    DEFAULT_RATE_LIMIT = 30
    DEFAULT_WINDOW = 60

    def __init__(self, get_response):
        """Initialize middleware."""
        self.get_response = get_response

    @property
    def limit(self) -> int:
        return getattr(settings, "ACTIVATION_RATE_LIMIT", self.DEFAULT_RATE_LIMIT)

    @property
    def window(self) -> int:
        return getattr(settings, "ACTIVATION_RATE_LIMIT_WINDOW", self.DEFAULT_WINDOW)

    @property
    def trusted_proxies(self) -> List[str]:
        return getattr(settings, "ACTIVATION_RATE_LIMIT_TRUSTED_PROXIES", [])

    def _client_address(self, request: HttpRequest) -> str:
        """
        Return the caller address used as the rate limit key.

        X-Forwarded-For is only read when the direct peer is a trusted proxy;
        the client is then the nearest hop that is not itself a trusted proxy.
        """
        peer = request.META.get("REMOTE_ADDR", "unknown")
        trusted = self.trusted_proxies
        if peer not in trusted:
            return peer

        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
        for hop in reversed(hops):
            if hop not in trusted:
                return hop
        return peer

    def _get_rate_limit_key(self, address: str, window_start: int) -> str:
        """Generate cache key for rate limiting."""
        address_hash = hashlib.sha256(address.encode()).hexdigest()[:16]
        return f"rate_limit:activate:{address_hash}:{window_start}"

    def _check_rate_limit(self, address: str) -> Tuple[bool, int, int]:
        """
        Check if request is within rate limit.

        Args:
            address: Client address

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        window_start = int(time.time() / self.window)
        reset_time = (window_start + 1) * self.window
        cache_key = self._get_rate_limit_key(address, window_start)

        if cache.add(cache_key, 1, timeout=self.window):
            count = 1
        else:
            try:
                count = cache.incr(cache_key, 1)
            except ValueError:
                # Expired between add() and incr()
                cache.set(cache_key, 1, timeout=self.window)
                count = 1

        if count > self.limit:
            return False, 0, reset_time
        return True, self.limit - count, reset_time

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response with rate limit headers
        """
        protected = getattr(settings, "ACTIVATION_RATE_LIMITED_PATHS", [])
        if request.method != "POST" or request.path not in protected:
            return self.get_response(request)

        is_allowed, remaining, reset_time = self._check_rate_limit(self._client_address(request))

        if not is_allowed:
            errors_total.labels(error_type="rate_limit_exceeded", endpoint=request.path).inc()
            response = JsonResponse(
                {
                    "error": {
                        "code": "RATE_LIMIT_EXCEEDED",
                        "message": "Rate limit exceeded. Please try again later.",
                    }
                },
                status=429,
            )
            response["Retry-After"] = str(max(0, reset_time - int(time.time())))
        else:
            response = self.get_response(request)

        response["X-RateLimit-Limit"] = str(self.limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)
        return response
