"""Command-line interface for utf8util."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO

import utf8util
from utf8util.errors import Utf8Error


def _check(name: str, stream: IO[bytes], args: argparse.Namespace) -> bool:
    """Report on one input and return whether it passed."""
    if args.length:
        text = stream.read().decode("utf-8", errors="surrogatepass")
        try:
            size = utf8util.encoded_length(text)
        except Utf8Error as e:
            print(f"utf8check: {name}: {e}", file=sys.stderr)
            return False
        print(size if args.minimal else f"{name}: {size} bytes")
        return True

    ok = utf8util.is_well_formed_stream(stream)
    verdict = "well-formed" if ok else "malformed"
    print(verdict if args.minimal else f"{name}: {verdict}")
    return ok


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf8check`` command-line tool.

    Exits with status 1 if any input is malformed or cannot be read.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Check whether files are well-formed UTF-8."
    )
    parser.add_argument("files", nargs="*", help="Files to check (default: stdin)")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the verdict"
    )
    parser.add_argument(
        "--length",
        action="store_true",
        help="Print the UTF-8 encoded length of the decoded text instead",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log why input is malformed"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8check {utf8util.__version__}"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    all_ok = True
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    ok = _check(filepath, f, args)
            except (OSError, UnicodeDecodeError) as e:
                print(f"utf8check: {filepath}: {e}", file=sys.stderr)
                ok = False
            all_ok = all_ok and ok
    else:
        try:
            all_ok = _check("stdin", sys.stdin.buffer, args)
        except UnicodeDecodeError as e:
            print(f"utf8check: stdin: {e}", file=sys.stderr)
            all_ok = False

    if not all_ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
