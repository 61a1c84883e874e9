"""Core business logic for the shortit link service."""

from .shortcode import ShortCodeGenerator
from .service import ShortLinkService

__all__ = ["ShortCodeGenerator", "ShortLinkService"]
