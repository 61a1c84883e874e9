"""Validation utilities for the link service."""

import ipaddress
import re
from typing import Tuple
from urllib.parse import urlparse

MAX_URL_LENGTH = 2048

ALLOWED_SCHEMES = ("http", "https", "ftp")

_LABEL_RE = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$", re.IGNORECASE)
_TLD_RE = re.compile(r"^([a-z]{2,63}|xn--[a-z0-9-]{1,59})$", re.IGNORECASE)


def _is_valid_host(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass

    labels = host.rstrip(".").split(".")
    if len(labels) < 2:
        return False
    if not all(_LABEL_RE.match(label) for label in labels):
        return False
    return bool(_TLD_RE.match(labels[-1]))


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate an absolute URL.

    The URL must carry an explicit scheme (http, https or ftp) and a host
    that is either an IP address or a dotted domain name.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)
        # Accessing port validates it
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        return False, "Invalid URL format. Please include http:// or https://"

    if not result.netloc or not result.hostname:
        return False, "URL must have a valid domain"

    if not _is_valid_host(result.hostname):
        return False, "URL must have a valid domain"

    return True, ""
