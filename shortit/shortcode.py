"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for links."""

    # URL-safe alphabet: a-zA-Z0-9 plus '_' and '-'
    URL_SAFE_CHARS = string.ascii_letters + string.digits + "_-"

    def __init__(self, default_length: int = 8, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            rng: Optional random source (defaults to the OS CSPRNG)
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length
        self._rng = rng or random.SystemRandom()

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self._rng.choices(self.URL_SAFE_CHARS, k=length))

    @classmethod
    def is_valid_format(cls, code: str) -> bool:
        """Check that every character of code is in the URL-safe alphabet."""
        return bool(code) and all(c in cls.URL_SAFE_CHARS for c in code)
