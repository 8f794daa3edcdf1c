"""Filename mask matching.

Masks are regular expressions searched anywhere in a file's name (not its
full path), so ``\\.py$`` selects python files and ``tmp`` selects any name
containing "tmp".
"""

import re
from typing import Sequence

from treechanges.exceptions import MaskError


def matches_mask(name: str, pattern: str) -> bool:
    """Search a single pattern in a filename.

    Raises:
        MaskError: If the pattern is not a valid regular expression
    """
    try:
        return re.search(pattern, name) is not None
    except re.error as e:
        raise MaskError(pattern, str(e)) from e


def matches_any(name: str, patterns: Sequence[str]) -> bool:
    """True if any pattern matches, stopping at the first one that does."""
    return any(matches_mask(name, pattern) for pattern in patterns)


def is_selected(
    name: str, include_masks: Sequence[str], exclude_masks: Sequence[str]
) -> bool:
    """Check whether a filename survives mask filtering.

    Exclude masks are checked first and win over include masks. An empty
    include list lets every non-excluded name through.
    """
    return not matches_any(name, exclude_masks) and (
        not include_masks or matches_any(name, include_masks)
    )
