"""Terminal dashboard for exchange rates and Argentine ADRs"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adrwatch.domain.models import EquityQuote, ForexQuote, MarketSnapshot

NAME_WIDTH = 30


def change_style(change: float) -> str:
    return "green" if change >= 0 else "red"


def format_change(change: float, change_percent: float) -> str:
    return f"{change:+.2f} ({change_percent:+.2f}%)"


def truncate_name(name: str, width: int = NAME_WIDTH) -> str:
    return name[:width]


class Dashboard:
    """Renders one MarketSnapshot per refresh cycle"""

    def __init__(
        self,
        console: Console | None = None,
        foreign_market: str = "NYSE",
        clear_screen: bool = True,
    ) -> None:
        self.console = console or Console()
        self.foreign_market = foreign_market
        self.clear_screen = clear_screen

    def render(self, snapshot: MarketSnapshot) -> None:
        """Clear the screen and print both sections"""
        if self.clear_screen:
            self.console.clear()
        self._render_forex(snapshot)
        self._render_equities(snapshot.equities)
        self.console.print("\n[yellow]Press Ctrl+C to stop the monitor[/yellow]")

    def _render_forex(self, snapshot: MarketSnapshot) -> None:
        self.console.print("\n[bold cyan]=== EXCHANGE RATES ===[/bold cyan]")
        self.console.print(
            f"Updated: {snapshot.updated_at.strftime('%Y-%m-%d %H:%M:%S')}\n"
        )

        if not snapshot.forex:
            self.console.print("[red]No exchange rate data available[/red]")
            return

        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("Name", style="white", width=20)
        table.add_column("Price", justify="right")
        table.add_column("Change")
        for quote in snapshot.forex:
            table.add_row(*self.forex_row(quote))
        self.console.print(table)

    def _render_equities(self, equities: list[EquityQuote]) -> None:
        self.console.print(
            "\n[bold cyan]=== ARGENTINE STOCK MARKET ===[/bold cyan]"
        )

        if not equities:
            self.console.print("\n[red]No stock market data available[/red]")
            return

        listed = sorted(
            (q for q in equities if q.market == self.foreign_market),
            key=lambda q: q.symbol,
        )
        currency = "in pesos" if any(q.converted for q in listed) else "in USD"
        self.console.print(
            f"\n[yellow]Argentine stocks on {self.foreign_market} ({currency})[/yellow]\n"
        )

        table = Table(box=None, pad_edge=False)
        table.add_column("Symbol", width=10)
        table.add_column("Name", style="cyan", width=NAME_WIDTH + 1, no_wrap=True)
        table.add_column("Price", justify="right")
        table.add_column("Change")
        table.add_column("Volume", justify="right")
        for quote in listed:
            table.add_row(*self.equity_row(quote))
        self.console.print(table)

    def forex_row(self, quote: ForexQuote) -> tuple[str, str, str]:
        style = change_style(quote.change)
        return (
            escape(quote.display_name),
            f"${quote.price:.2f}",
            f"[{style}]{format_change(quote.change, quote.change_percent)}[/{style}]",
        )

    def equity_row(self, quote: EquityQuote) -> tuple[str, str, str, str, str]:
        style = change_style(quote.change)
        market_style = "yellow" if quote.market == self.foreign_market else "white"
        return (
            f"[{market_style}]{quote.symbol}[/{market_style}]",
            escape(truncate_name(quote.display_name)),
            f"${quote.price:.2f}",
            f"[{style}]{format_change(quote.change, quote.change_percent)}[/{style}]",
            f"Vol: {quote.volume}",
        )
