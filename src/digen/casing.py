from __future__ import annotations

import unicodedata
from collections.abc import Callable

from digen.exceptions import DigenEmptyIdentifierError


def ucfirst(identifier: str) -> str:
    """Return ``identifier`` with its first code point upper-cased.

    Args:
        identifier: Non-empty identifier, e.g. a dependency base name.

    Raises:
        DigenEmptyIdentifierError: If ``identifier`` is empty.

    Examples:
        >>> ucfirst("alpha")
        'Alpha'
        >>> ucfirst("émile")
        'Émile'

    """
    return _map_first(identifier, str.upper)


def lcfirst(identifier: str) -> str:
    """Return ``identifier`` with its first code point lower-cased.

    Args:
        identifier: Non-empty identifier, e.g. a dependency base name.

    Raises:
        DigenEmptyIdentifierError: If ``identifier`` is empty.

    Examples:
        >>> lcfirst("Alpha")
        'alpha'
        >>> lcfirst("İstanbul")
        'istanbul'

    """
    return _map_first(identifier, str.lower, keep_base_letter=True)


def _map_first(
    identifier: str,
    mapping: Callable[[str], str],
    *,
    keep_base_letter: bool = False,
) -> str:
    if not identifier:
        msg = "Cannot change the case of an empty identifier."
        raise DigenEmptyIdentifierError(msg)

    first = identifier[0]
    mapped = mapping(first)
    if len(mapped) != 1:
        # Only a single code point may replace the first one.
        if keep_base_letter and all(unicodedata.combining(mark) for mark in mapped[1:]):
            mapped = mapped[0]
        else:
            mapped = first
    return mapped + identifier[1:]
