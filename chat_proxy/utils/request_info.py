from starlette.requests import Request


def get_peer_ip(request: Request) -> str:
    """
    Address of the connected peer.

    Behind a trusted proxy uvicorn rewrites the peer from forwarding headers
    (``TRUST_PROXY_HEADERS`` / ``FORWARDED_ALLOW_IPS``); client-supplied
    headers are never consulted here.
    """
    if request.client:
        return request.client.host
    return "unknown"


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request, for logging only."""
    # Check for forwarded headers (when behind proxy)
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    return get_peer_ip(request)
