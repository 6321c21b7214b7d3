"""
Out-of-band account administration.

The API never changes the admin flag; operators do it from here:

    achilles-manage grant-admin someone@example.com
    python -m achilles_auth.manage revoke-admin someone@example.com
"""
import argparse
import asyncio
import logging
import sys

from achilles_auth.config import get_settings
from achilles_auth.core.logging import configure_logging
from achilles_auth.database.connections import create_mongo_client, get_database
from achilles_auth.services.account_directory import AccountDirectory

logger = logging.getLogger("achilles_auth.manage")

COMMANDS = {
    "grant-admin": True,
    "revoke-admin": False,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="achilles-manage", description=__doc__.splitlines()[1])
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument("email")
    return parser


async def set_admin_flag(directory: AccountDirectory, email: str, is_admin: bool) -> bool:
    """Apply the flag; returns False when no account has this email."""
    account = await directory.set_admin(email, is_admin)
    if account is None:
        logger.error(f"No account for {email}")
        return False
    logger.info(f"Account {account.id} ({account.email}) is_admin={account.is_admin}")
    return True


async def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    
    client = create_mongo_client(settings)
    try:
        directory = AccountDirectory(get_database(client, settings))
        ok = await set_admin_flag(directory, args.email, COMMANDS[args.command])
    finally:
        client.close()
    
    return 0 if ok else 1


def cli() -> None:
    """Console script entry point (``achilles-manage``)."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
