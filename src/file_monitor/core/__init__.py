"""Core token handling for path expressions (no filesystem access)."""

from .tokens import (
    AUTO,
    CURRENT,
    FILE_NAME,
    SEPARATOR,
    Token,
)
from .substitution import (
    FILE_PATH,
    POST_COMBINE,
    PRE_COMBINE,
    SubstitutionContext,
    substitute_tokens,
)

__all__ = [
    # Tokens
    "AUTO",
    "CURRENT",
    "SEPARATOR",
    "FILE_NAME",
    "Token",
    # Substitution
    "PRE_COMBINE",
    "POST_COMBINE",
    "FILE_PATH",
    "SubstitutionContext",
    "substitute_tokens",
]
