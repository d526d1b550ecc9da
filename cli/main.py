"""CLI entry point."""

import os
import sys
from typing import List, Optional, Tuple

from common.logging_config import setup_logging
from cli.commands import get_client
from cli.repl import repl_loop


def parse_options(argv: List[str]) -> Tuple[bool, Optional[str]]:
    """
    Extract ``--debug`` and ``--ledger PATH`` from the command line.

    Returns:
        (debug enabled, local ledger path or None)
    """
    debug = '--debug' in argv
    ledger_path = None
    if '--ledger' in argv:
        index = argv.index('--ledger')
        if index + 1 >= len(argv):
            raise SystemExit("--ledger requires a path")
        ledger_path = argv[index + 1]
    return debug, ledger_path


def main() -> None:
    """Entry point for CLI."""
    debug, ledger_path = parse_options(sys.argv[1:])
    log_level = 'DEBUG' if debug else os.getenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging('cli', log_level=log_level)
    setup_logging('filestorage', log_level=log_level)
    setup_logging('contract', log_level=log_level)

    if ledger_path:
        get_client().config.set_ledger_path(ledger_path)
        logger.info(f"Using local ledger {ledger_path}")

    logger.info("CLI starting...")
    try:
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()
