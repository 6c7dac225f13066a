"""Request header helpers for building absolute links behind a proxy."""

from typing import Mapping, Optional


def _lower_keys(headers: Mapping[str, str]) -> dict:
    return {k.lower(): v for k, v in headers.items()}


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Work out the public base URL of the service.
    
    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Configured fallback
    """
    lowered = _lower_keys(headers)
    proto = lowered.get("x-forwarded-proto")
    host = lowered.get("x-forwarded-host")
    if proto and host:
        return f"{proto}://{host}"
    
    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"
    
    return fallback_base_url.rstrip("/")


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """Path prefix stripped by a proxy (X-Forwarded-Prefix).
    
    Returns '/prefix' with a leading slash and no trailing one, or ''.
    """
    value = _lower_keys(headers).get("x-forwarded-prefix") or ""
    stripped = value.strip().strip("/")
    return "/" + stripped if stripped else ""
