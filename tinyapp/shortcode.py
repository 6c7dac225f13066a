"""Random identifier generation for short links and accounts."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random base62 identifiers.

    The generator does not know which identifiers are taken; uniqueness is
    checked by the registry that stores them.
    """
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize generator.
        
        Args:
            default_length: Default length for generated identifiers
            rng: Optional random source (seeded instances make tests repeatable)
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length
        self._rng = rng or random.SystemRandom()
    
    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random identifier.
        
        Args:
            length: Length of the identifier (uses default if not specified)
            
        Returns:
            Random base62 string
        """
        length = length or self.default_length
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=length))
    
    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check that a code is non-empty and strictly alphanumeric."""
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
