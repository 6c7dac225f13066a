"""Short URL building."""


def build_short_url(
    short_id: str,
    base_url: str,
    path_prefix: str = "",
    redirect_prefix: str = "/u",
) -> str:
    """Build the public redirect URL for a short id.
    
    Args:
        short_id: The short id
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Prefix a proxy strips before the app (e.g., /tiny)
        redirect_prefix: Route prefix of the redirect handler
        
    Returns:
        Complete short URL, e.g. https://example.com/tiny/u/b2xVn2
    """
    parts = [base_url.rstrip("/")]
    for prefix in (path_prefix, redirect_prefix):
        prefix = prefix.strip("/")
        if prefix:
            parts.append(prefix)
    parts.append(short_id)
    return "/".join(parts)
