"""
Request helpers shared by middleware and views.
"""
from typing import Optional

from django.conf import settings
from django.http import HttpRequest


def get_client_ip(request: HttpRequest) -> Optional[str]:
    """
    Return the client IP address.

    X-Forwarded-For is only read when NUM_PROXIES trusted proxies sit in
    front of the service; the address the outermost of them appended is
    used. Otherwise the peer address (REMOTE_ADDR) is the client.
    """
    remote_addr = request.META.get("REMOTE_ADDR") or None
    num_proxies = int(getattr(settings, "NUM_PROXIES", 0) or 0)
    forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR", "")

    if num_proxies <= 0 or not forwarded_for:
        return remote_addr

    hops = [hop.strip() for hop in forwarded_for.split(",") if hop.strip()]
    if not hops:
        return remote_addr
    return hops[-min(num_proxies, len(hops))]
