"""Create a catalog user and print an access token for it (Postgres only).

Usage:
    python -m scripts.create_test_user <username> [fullname]
The token goes in the Authorization header: Bearer <token>.
All imports use app.*.
"""

import asyncio
import sys

from app.core.config import get_settings
from app.domain.exceptions import InvariantException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.security.jwt import create_access_token


async def main() -> None:
    """Create the user, then mint a token whose sub is the new user id."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_test_user <username> [fullname]",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    fullname = sys.argv[2] if len(sys.argv) > 2 else username

    database = Database.from_settings(get_settings())
    try:
        async with database.session() as session:
            try:
                user_id = await UserRepository(session).add_user(username, fullname)
            except InvariantException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
    finally:
        await database.dispose()

    print(f"Created user: {user_id} ({username})")
    print(f"Token: {create_access_token(user_id)}")


if __name__ == "__main__":
    asyncio.run(main())
