"""Identifiers for posts.

A post carries two identifiers:

- ``PostId``: generated by the application when the aggregate is built,
  before anything is persisted. Stable across store migrations.
- ``StoreId``: assigned by the store on first insert. In PostgreSQL this is
  an identity column, so its native shape is a string of decimal digits.

Callers hand the repository a raw string and let it figure out which of the
two it is looking at.
"""

import re
from typing import NewType, Optional
from uuid import UUID

PostId = NewType("PostId", UUID)
StoreId = NewType("StoreId", int)

_STORE_ID_PATTERN = re.compile(r"^[0-9]{1,19}$")
_MAX_STORE_ID = 2**63 - 1  # BIGINT


def parse_store_id(identifier: str) -> Optional[StoreId]:
    """Return the store identifier encoded in ``identifier``, if any.

    Args:
        identifier: Raw identifier from a caller

    Returns:
        StoreId if the string has the store's native shape, None otherwise
    """
    identifier = identifier.strip()
    if not _STORE_ID_PATTERN.match(identifier):
        return None
    value = int(identifier)
    if value < 1 or value > _MAX_STORE_ID:
        return None
    return StoreId(value)


def parse_post_id(identifier: str) -> Optional[PostId]:
    """Return the application identifier encoded in ``identifier``, if any."""
    try:
        return PostId(UUID(identifier.strip()))
    except ValueError:
        return None
