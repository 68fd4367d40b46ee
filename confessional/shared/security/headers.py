"""
Secure HTTP headers.

The confession page loads only its own stylesheet and `confess.js`,
and posts JSON back to the same origin, so the content security
policy allows nothing but same-origin scripts, styles and requests.

The headers are added by SecurityHeadersMiddleware to routed responses
and by `apply_secure_headers` to error responses built outside the
middleware stack (the catch-all 500 handler runs in Starlette's
ServerErrorMiddleware, which wraps every user middleware).
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'none'",
        "script-src 'self'",
        "style-src 'self'",
        "img-src 'self'",
        "connect-src 'self'",
        "form-action 'self'",
        "base-uri 'none'",
        "frame-ancestors 'none'",
    ]
)

SECURE_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    # Confessions are anonymous: never tell other sites where a visitor came from.
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}

# Static assets may be cached; everything else reflects the current board.
_CACHEABLE_MEDIA_PREFIXES = ("text/css", "application/javascript", "text/javascript", "image/")


def apply_secure_headers(response: Response) -> Response:
    """Add the secure headers to a response without overriding explicit ones."""
    media_type = response.headers.get("content-type", "")
    for header_name, header_value in SECURE_HEADERS.items():
        if header_name == "Cache-Control" and media_type.startswith(
            _CACHEABLE_MEDIA_PREFIXES
        ):
            continue
        response.headers.setdefault(header_name, header_value)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds the secure headers to every routed response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return apply_secure_headers(await call_next(request))
