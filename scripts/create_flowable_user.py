"""Create a user in the engine's identity store.

Usage:
    python -m scripts.create_flowable_user <user_id> <email> [password]
If password is omitted, a random one is printed.
Connection settings come from FLOWABLE_* environment variables or .env.
"""

import secrets
import sys

from flowable_client.domain.exceptions import FlowableException
from flowable_client.infrastructure.flowable.client import create_flowable_service
from flowable_client.schemas import NewUserForm
from flowable_client.shared.telemetry import setup_logging


def main() -> None:
    """Create the user; id and email from argv."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_flowable_user <user_id> <email> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    email = sys.argv[2]
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)

    setup_logging()
    try:
        service = create_flowable_service()
        user = service.create_user(
            NewUserForm(id=user_id, email=email, password=password)
        )
    except FlowableException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    print(f"Created user: {user.id} ({user.email})")
    if len(sys.argv) <= 3:
        print(f"Password: {password}")


if __name__ == "__main__":
    main()
