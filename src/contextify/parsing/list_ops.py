"""
list_ops – Small, shared list operations for contextify.

This module centralizes the comma-separated list handling used by the CLI
and by RunConfig. Kept intentionally minimal and dependency-free.
"""
from typing import Iterable, List, Optional


def split_list(raw: Optional[str]) -> List[str]:
    """Return the items of a comma-separated string.

    Examples
    --------
    >>> split_list("node_modules, dist,,.git")
    ['node_modules', 'dist', '.git']

    Parameters
    ----------
    raw:
        Comma-separated value as received from the command line, or None.

    Returns
    -------
    List[str]
        Trimmed items in their original order, empty items removed.
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    seen = set()
    out: List[str] = []
    for itm in items:
        if itm in seen:
            continue
        seen.add(itm)
        out.append(itm)
    return out


def ensure_present(items: List[str], required: str) -> List[str]:
    """Return *items* with *required* appended when it is missing."""
    if required in items:
        return items
    return items + [required]
