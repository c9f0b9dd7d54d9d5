#!/usr/bin/env python3
"""Print an access token for local testing.

Usage:
    python scripts/issue_token.py USER_ID USERNAME

Send it as the ``access_token`` cookie (or whatever AUTH__COOKIE_NAME is).
"""

import sys

from blog.config import Settings
from blog.domain.model import Author
from blog.domain.service import JWTService
from blog.domain.value import UserId


def main() -> int:
    if len(sys.argv) != 3:
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    author = Author(id=UserId(sys.argv[1]), username=sys.argv[2])
    print(JWTService(auth_settings=settings.auth).create_token(author))
    return 0


if __name__ == "__main__":
    sys.exit(main())
