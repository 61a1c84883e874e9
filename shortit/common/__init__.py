"""Common utilities for the link service."""

from .validators import is_valid_url
from .headers import extract_forwarded_headers, build_base_url, parse_bearer_token
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "extract_forwarded_headers",
    "build_base_url",
    "parse_bearer_token",
    "build_short_url",
    "setup_logging",
]
