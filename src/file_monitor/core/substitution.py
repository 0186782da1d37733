"""
@meta
name: core_substitution
type: utility
domain: core
responsibility:
  - Define ordered token substitution tables
  - Expand token markers in path expressions
inputs:
  - Path expressions
  - Substitution context (base directory, separator, file name)
outputs:
  - Expanded path strings
tags:
  - utility
  - tokens
lifecycle:
  status: active
"""

"""Ordered token substitution for path expressions."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .tokens import AUTO, CURRENT, FILE_NAME, SEPARATOR, Token


@dataclass(frozen=True)
class SubstitutionContext:
    """Values available to token replacement functions."""

    base_dir: str
    separator: str
    file_name: Optional[str] = None


Replacement = Callable[[SubstitutionContext], str]
SubstitutionTable = Tuple[Tuple[Token, Replacement], ...]


def _file_name(context: SubstitutionContext) -> str:
    if context.file_name is None:
        raise ValueError(
            f"Path expression uses {FILE_NAME.marker} but no file name was given"
        )
    return context.file_name


# Applied to the candidate before it is combined with the reference.
PRE_COMBINE: SubstitutionTable = (
    (CURRENT, lambda context: "."),
)

# Applied to combined (or single-contributor) results.
POST_COMBINE: SubstitutionTable = (
    (CURRENT, lambda context: context.base_dir),
    (SEPARATOR, lambda context: context.separator),
)

# Applied by file path resolution, after absolute resolution.
FILE_PATH: SubstitutionTable = (
    (AUTO, lambda context: context.base_dir),
    (FILE_NAME, _file_name),
)


def substitute_tokens(
    text: str,
    table: Sequence[Tuple[Token, Replacement]],
    context: SubstitutionContext,
) -> str:
    """
    Replace token markers in text following the order of a substitution table.

    Each entry is applied to the output of the previous one, so a replacement
    value may itself be rewritten by a later entry. Replacement functions are
    only called for tokens that actually occur in the text.

    Args:
        text: Path expression.
        table: Ordered (token, replacement function) pairs.
        context: Values for the replacement functions.

    Returns:
        Text with every marker of the table replaced.

    Examples:
        >>> ctx = SubstitutionContext(base_dir="/app", separator="/")
        >>> substitute_tokens("[RutaActual][DS]data", POST_COMBINE, ctx)
        '/app/data'
    """
    for token, replacement in table:
        if token.occurs_in(text):
            text = text.replace(token.marker, replacement(context))
    return text
