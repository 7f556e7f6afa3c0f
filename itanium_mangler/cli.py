"""
CLI for the mangler.
"""

import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from itanium_mangler.demangler import demangle
from itanium_mangler.mangler import try_mangle

logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(
    "itanium-mangler", description="Mangler for Itanium C++ ABI symbols."
)
parser.add_argument(
    "--verbose", "-v", help="Log every mangled symbol", action="store_true"
)
parser.add_argument(
    "--quiet", "-q", help="Only log errors, hiding input warnings", action="store_true"
)
subparsers = parser.add_subparsers(dest="command", required=True)

mangle_parser = subparsers.add_parser("mangle", help="Mangle declaration signatures.")
mangle_parser.add_argument("signatures", help="Signatures to mangle.", nargs="+", type=str)
mangle_parser.add_argument(
    "--keep-going",
    "-k",
    help="Continue with the remaining signatures after a malformed one",
    action="store_true",
)

demangle_parser = subparsers.add_parser("demangle", help="Demangle symbols.")
demangle_parser.add_argument("symbols", help="Symbols to demangle.", nargs="+", type=str)


def setup_logging(verbose: bool = False, quiet: bool = False):
    """
    Send log records to stderr through rich.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                markup=False,
            )
        ],
        force=True,
    )


def run_mangle(signatures: list[str], keep_going: bool = False) -> int:
    status = 0
    for signature in signatures:
        result = try_mangle(signature)
        if result:
            print(result.symbol)
            continue

        logger.error("%s", result.error)
        status = 1
        if not keep_going:
            break

    return status


def run_demangle(symbols: list[str]) -> int:
    for symbol in symbols:
        print(demangle(symbol))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parser.parse_args(argv)  # noqa
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if args.command == "mangle":
        return run_mangle(args.signatures, keep_going=args.keep_going)
    return run_demangle(args.symbols)


if __name__ == "__main__":
    raise SystemExit(main())
