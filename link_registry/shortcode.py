"""Short id generation utilities."""

import secrets
import string
import uuid
from typing import Optional


class ShortCodeGenerator:
    """Generate short ids for links."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    STRATEGIES = ("uuid", "random")

    def __init__(self, default_length: int = 8, strategy: str = "uuid"):
        """Initialize short id generator.

        Args:
            default_length: Default length for generated ids
            strategy: "uuid" (truncated base62 UUID4) or "random" (CSPRNG characters)
        """
        if strategy not in self.STRATEGIES:
            raise ValueError(f"Unknown id strategy '{strategy}', expected one of {self.STRATEGIES}")
        self.default_length = default_length
        self.strategy = strategy

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a short id with the configured strategy.

        Ids are practically unique, not guaranteed unique: callers must
        still check the store for collisions.

        Args:
            length: Length of the id (uses default if not specified)

        Returns:
            New short id
        """
        if self.strategy == "random":
            return self.generate_random(length)
        return self.generate_from_uuid(length)

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short id.

        Args:
            length: Length of the id (uses default if not specified)

        Returns:
            Random short id
        """
        length = length or self.default_length
        return ''.join(secrets.choice(self.BASE62_CHARS) for _ in range(length))

    def generate_from_uuid(self, length: Optional[int] = None) -> str:
        """Generate short id from a UUID4.

        At the default length of 8 this leaves about 2^47 combinations.

        Args:
            length: Length of the id (uses default if not specified)

        Returns:
            Short id based on UUID
        """
        length = length or self.default_length

        # Generate UUID and convert to integer
        uuid_int = uuid.uuid4().int

        # Convert to base62
        code = self._int_to_base62(uuid_int)

        # Return first N characters
        return code[:length].rjust(length, self.BASE62_CHARS[0])

    def _int_to_base62(self, num: int) -> str:
        """Convert integer to base62 string.

        Args:
            num: Integer to convert

        Returns:
            Base62 string
        """
        if num == 0:
            return self.BASE62_CHARS[0]

        result = []
        base = len(self.BASE62_CHARS)

        while num > 0:
            remainder = num % base
            result.append(self.BASE62_CHARS[remainder])
            num = num // base

        return ''.join(reversed(result))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if id has valid format (base62 only).

        Args:
            code: Id to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
