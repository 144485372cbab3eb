"""Command line interface for managing, rotating and inspecting secret keys."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from keyden.commons import KeyStoreError
from keyden.file_store import FileKeyStore
from keyden.key_manager import KeyManager

ENV_VAR = "KEYDEN_FILE"


def resolve_file(file_arg: str | None) -> str:
    """Return the key file path: the argument, else $KEYDEN_FILE, else raise."""
    if file_arg is not None:
        return file_arg
    env_path = os.environ.get(ENV_VAR)
    if env_path is not None:
        return env_path
    raise KeyStoreError("Other error: Missing key file argument and $KEYDEN_FILE not set")


def _size(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyden",
        description="Keyden: a lightweight CLI tool to manage, rotate, and inspect secret keys safely",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    rotate = commands.add_parser(
        "rotate", help="Rotate keys: generate new ones if needed based on key count and TTL."
    )
    rotate.add_argument("file", nargs="?", help="path to key file")
    rotate.add_argument("--size", type=_size, default=128, help="size of each secret key")

    current = commands.add_parser("current", help="Print the currently active secret key.")
    current.add_argument("file", nargs="?", help="path to key file")

    listing = commands.add_parser("list", help="List all stored secret keys.")
    listing.add_argument("file", nargs="?", help="path to key file")

    generate = commands.add_parser(
        "generate", help="Generate a one-time secret key without storing it."
    )
    generate.add_argument("--size", type=_size, default=128, help="size of the secret key")
    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "generate":
        print(KeyManager.generate_temp_key(args.size).secret)
        return

    store = FileKeyStore(resolve_file(args.file))
    if args.command == "rotate":
        manager = KeyManager(store, size=args.size)
        if manager.rotate_keys():
            print("New key rotated successfully.")
        else:
            print("No key rotation needed.")
    elif args.command == "current":
        key = KeyManager(store).current_key()
        if key is None:
            print("No active key found.", file=sys.stderr)
        else:
            print(key.secret)
    else:
        for key in KeyManager(store).list_keys():
            print(f"{key.kid} (created at {key.created_at_unix})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except KeyStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())