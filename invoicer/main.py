import argparse
import asyncio
import logging
from typing import List, Optional

from . import __version__
from .core.config import Settings, get_settings
from .core.errors import InvoiceError
from .core.logging import init_logging, run_context
from .services.calculator import InvoiceCalculator

logger = logging.getLogger("invoicer.cli")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicer",
        description="Print the total of a multi-currency invoice in its base currency.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=str(settings.invoice_path),
        help=f"invoice JSON file (default: {settings.invoice_path})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, settings_override: Settings | None = None) -> int:
    """Console entry point.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug, json_logs=settings.json_logs)
    args = build_parser(settings).parse_args(argv)

    with run_context():
        try:
            calculator = InvoiceCalculator(args.path, settings=settings)
            asyncio.run(calculator.print_invoice_total())
        except (InvoiceError, OSError) as e:
            logger.error("failed to compute invoice total for %s: %s", args.path, e)
            return 1
    return 0
