"""Strongly typed identifiers for blog domain entities.

Post ids are allocated by the store in increasing order, so comparing ids
also compares creation order.
"""

import re
from typing import NewType

from blog.domain.error import InvalidIdentifierError

PostId = NewType("PostId", int)
UserId = NewType("UserId", str)

_POST_ID_PATTERN = re.compile(r"[1-9][0-9]{0,18}")
_MAX_POST_ID = 2**63 - 1


def is_valid_post_id(raw: str) -> bool:
    """Check that a raw path value is a well-formed post id.

    A well-formed id is a positive decimal integer with no sign or leading
    zero that fits in a signed 64-bit column.
    """
    if not _POST_ID_PATTERN.fullmatch(raw):
        return False
    return int(raw) <= _MAX_POST_ID


def parse_post_id(raw: str) -> PostId:
    """Parse a raw path value into a PostId.

    Raises:
        InvalidIdentifierError: If the value is not a well-formed post id
    """
    if not is_valid_post_id(raw):
        raise InvalidIdentifierError("post", raw)
    return PostId(int(raw))
