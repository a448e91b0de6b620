"""
OTP Codes
=========
Random 6-digit code generation.
"""

import secrets
from typing import Optional, Protocol

CODE_MIN = 100000
CODE_MAX = 999999

_system_random = secrets.SystemRandom()


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def generate_code(rng: Optional[RandomSource] = None) -> str:
    """
    Draw a code uniformly from [100000, 999999].

    Codes never start with zero, so they are always exactly 6 digits.

    Args:
        rng: Object with ``randint``; defaults to the OS random source

    Returns:
        6-digit code string
    """
    rng = rng or _system_random
    return str(rng.randint(CODE_MIN, CODE_MAX))
