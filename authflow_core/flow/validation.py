"""
Input Validation
================
Shape checks applied before user input reaches the OTP engine.
"""

import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
CODE_PATTERN = re.compile(r"^[0-9]{6}$")


def is_valid_email(email: str) -> bool:
    """Loose ``local@domain.tld`` check on the stripped value."""
    if not email:
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_well_formed_code(code: str) -> bool:
    """Exactly six ASCII digits."""
    return bool(code) and CODE_PATTERN.match(code) is not None
