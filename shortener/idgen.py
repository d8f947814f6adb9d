"""Short id generation for URL shortener."""

import random
import string
from typing import Optional

from .errors import RandomSourceError


# 64 characters: the URL-safe base64 set
ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase + "-_"
ID_LENGTH = 4
MAX_ID_TRIES = 5


class ShortIDGenerator:
    """Generate fixed-length random ids for short URLs."""

    def __init__(
        self,
        length: int = ID_LENGTH,
        alphabet: str = ALPHABET,
        rng: Optional[random.Random] = None,
    ):
        """Initialize short id generator.

        Args:
            length: Number of characters per id
            alphabet: Characters ids are drawn from
            rng: Random source (defaults to OS entropy via SystemRandom)

        Raises:
            ValueError: If length or alphabet is unusable
        """
        if length < 1:
            raise ValueError("length must be at least 1")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet must not contain duplicate characters")

        self.length = length
        self.alphabet = alphabet
        self.rng = rng or random.SystemRandom()

    @property
    def capacity(self) -> int:
        """Number of distinct ids this generator can produce."""
        return len(self.alphabet) ** self.length

    def generate(self) -> str:
        """Generate a random id.

        Returns:
            Random id of ``self.length`` characters

        Raises:
            RandomSourceError: If the random source fails
        """
        try:
            return ''.join(self.rng.choice(self.alphabet) for _ in range(self.length))
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"random source failure: {e}") from e

    def is_valid_format(self, code: str) -> bool:
        """Check if code could have been produced by this generator.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return len(code) == self.length and all(c in self.alphabet for c in code)
