"""CLI for genpass — generate a password, print it or copy it to the clipboard."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .clipboard import Delivery, select_deliverer
from .config import CATEGORY_FLAGS, MAX_LENGTH, load_config, save_config
from .errors import EmptySymbols, GenpassError, InvalidSymbol
from .generator import PasswordRequest, generate_password
from .symbols import SymbolSet
from .universe import Options

logger = logging.getLogger("genpass")


def _symbols(value: str) -> str:
    try:
        SymbolSet.from_text(value)
    except EmptySymbols:
        raise argparse.ArgumentTypeError("symbols set can't be empty")
    except InvalidSymbol as e:
        raise argparse.ArgumentTypeError(f"{e} (is the argument valid unicode?)")
    return value


def _length(value: str) -> int:
    try:
        length = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}")
    if not 0 < length <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(f"length must be between 1 and {MAX_LENGTH}")
    return length


def _add_category_flag(parser: argparse.ArgumentParser, name: str, what: str) -> None:
    dest = "no_" + name.replace("-", "_")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(f"--no-{name}", dest=dest, action="store_true", help=f"Turn off {what}")
    group.add_argument(f"--{name}", dest=dest, action="store_false", help=f"Turn {what} back on if saved as off")


def build_parser(cfg: Dict[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genpass",
        description="Generate a random password from a configurable set of symbols.",
    )
    _add_category_flag(parser, "latin-lower", "latin lowercase symbols")
    _add_category_flag(parser, "latin-upper", "latin uppercase symbols")
    _add_category_flag(parser, "latin", "latin symbols")
    _add_category_flag(parser, "digits", "digits")
    _add_category_flag(parser, "special", "special symbols")
    parser.add_argument(
        "-a", "--allow", dest="allowed", action="append", default=[], type=_symbols, metavar="SYMBOLS",
        help="Allow additional symbols (repeatable)",
    )
    parser.add_argument(
        "-d", "--deny", dest="disallowed", action="append", default=[], type=_symbols, metavar="SYMBOLS",
        help="Deny symbols (repeatable); takes precedence over --allow",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Be verbose")
    parser.add_argument(
        "-c", "--copy", action="store_true",
        help="Copy the password to the clipboard instead of printing it",
    )
    parser.add_argument("--no-copy", dest="copy", action="store_false", help="Print the password even if copying is the saved default")
    parser.add_argument(
        "--save-defaults", action="store_true",
        help="Remember length, copy mode, category switches and allow/deny lists for later runs",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "length", nargs="?", type=_length, default=cfg["length"],
        help="Length of the password, in unicode scalar values (default: %(default)s)",
    )
    parser.set_defaults(copy=cfg["copy"], **{flag: cfg[flag] for flag in CATEGORY_FLAGS})
    return parser


def setup_logging(verbose: bool = False) -> None:
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def options_from_args(args: argparse.Namespace, cfg: Dict[str, Any]) -> Options:
    # saved lists apply first, command line ones after
    return Options(
        no_latin_lower=args.no_latin_lower,
        no_latin_upper=args.no_latin_upper,
        no_latin=args.no_latin,
        no_digits=args.no_digits,
        no_special=args.no_special,
        allowed=list(cfg["allowed"]) + args.allowed,
        disallowed=list(cfg["disallowed"]) + args.disallowed,
        verbose=args.verbose,
        copy=args.copy,
        length=args.length,
    )


def defaults_from_options(options: Options) -> Dict[str, Any]:
    defaults = {
        "length": options.length,
        "copy": options.copy,
        "allowed": options.allowed,
        "disallowed": options.disallowed,
    }
    for flag in CATEGORY_FLAGS:
        defaults[flag] = getattr(options, flag)
    return defaults


def report_error(error: BaseException) -> None:
    console = Console(stderr=True)
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    cause = error.__cause__
    while cause is not None:
        console.print(f"  caused by: {escape(str(cause) or type(cause).__name__)}")
        cause = cause.__cause__


def run(argv: Optional[List[str]] = None) -> int:
    # handler goes in first so config warnings are rendered like the rest
    setup_logging()
    cfg = load_config()
    args = build_parser(cfg).parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    options = options_from_args(args, cfg)

    try:
        request = PasswordRequest.from_options(options)
        if args.save_defaults:
            path = save_config(defaults_from_options(options))
            logger.info("Defaults saved to %s", path)

        password = generate_password(request)

        if not request.copy:
            # plain print: rich would treat [..] in the password as markup
            print(password)
            return 0

        outcome = select_deliverer().deliver(password)
        if outcome is Delivery.DETACHED:
            logger.debug("Clipboard holder started in the background")
        return 0
    except (GenpassError, OSError) as e:
        report_error(e)
        return 1


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
