#!/usr/bin/env python3
"""Check that Yahoo Finance quotes can be fetched

This script fetches each symbol once through the same client the monitor
uses (v8 chart endpoint with v10 quote summary fallback) and reports the
result per symbol.

Usage:
    python scripts/check_quotes.py              # default diagnostic symbols
    python scripts/check_quotes.py GGAL ARS=X   # specific symbols
"""

import asyncio
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from loguru import logger

from adrwatch.core.config import Config
from adrwatch.infrastructure.yahoo import create_quote_client
from adrwatch.shared.exceptions import QuoteFetchError


class Colors:
    """ANSI color codes for terminal output"""

    GREEN = "\033[92m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    RESET = "\033[0m"


def print_status(success: bool, message: str) -> None:
    """Print status message with color"""
    if success:
        print(f"{Colors.GREEN}✓{Colors.RESET} {message}")
    else:
        print(f"{Colors.RED}✗{Colors.RESET} {message}")


async def check_quotes(symbols: list[str]) -> bool:
    """Fetch every symbol once

    Returns:
        True if all symbols were fetched, False otherwise
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"\n{Colors.BLUE}=== Quote Connectivity Check ==={Colors.RESET}")
    print(f"{Colors.BLUE}Timestamp: {timestamp}{Colors.RESET}\n")

    config = Config.from_env()
    client = create_quote_client(config.http)
    all_ok = True
    try:
        for symbol in symbols:
            try:
                quote = await client.fetch_quote(symbol)
            except QuoteFetchError as e:
                print_status(False, f"{symbol}: {e}")
                all_ok = False
                continue
            print_status(
                True,
                f"{symbol}: {quote.display_name} price={quote.price:.2f} "
                f"previous={quote.previous_close:.2f} volume={quote.volume}",
            )
    finally:
        await client.aclose()

    return all_ok


def main() -> int:
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    symbols = sys.argv[1:] or list(Config().diagnostic_symbols)
    ok = asyncio.run(check_quotes(symbols))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
