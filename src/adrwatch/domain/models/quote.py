"""Quote domain models"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


class QuoteCategory(Enum):
    """Category of a monitored symbol"""

    FOREX = "forex"
    EQUITY = "equity"


@dataclass(frozen=True)
class SymbolRequest:
    """Static configuration entry for one monitored symbol

    Attributes:
        symbol: Upstream ticker symbol (e.g. "ARS=X", "YPF")
        display_name: Name shown for forex pairs and matched for the official rate
        category: Forex pair or equity
        market: Exchange identifier, equities only
    """

    symbol: str
    display_name: str
    category: QuoteCategory
    market: str | None = None


@dataclass(frozen=True)
class Quote:
    """Canonical quote parsed from any upstream response shape"""

    symbol: str
    display_name: str
    price: float
    previous_close: float
    volume: int = 0


def compute_change(price: float, previous_close: float) -> tuple[float, float]:
    """Return absolute and percent change against the previous close

    Args:
        price: Current price
        previous_close: Previous session close

    Returns:
        Tuple of (change, change_percent); percent is 0.0 when the
        previous close is zero
    """
    change = price - previous_close
    change_percent = 0.0
    if previous_close != 0:
        change_percent = (change / previous_close) * 100
    return change, change_percent


@dataclass(frozen=True)
class ForexQuote:
    """Currency pair quote with derived change figures"""

    symbol: str
    display_name: str
    price: float
    previous_close: float
    change: float
    change_percent: float

    @classmethod
    def from_quote(cls, request: SymbolRequest, quote: Quote) -> "ForexQuote":
        # Forex rows are labelled with the configured name, not the upstream one
        change, change_percent = compute_change(quote.price, quote.previous_close)
        return cls(
            symbol=request.symbol,
            display_name=request.display_name,
            price=quote.price,
            previous_close=quote.previous_close,
            change=change,
            change_percent=change_percent,
        )


@dataclass(frozen=True)
class EquityQuote:
    """Equity quote with derived change figures

    ``converted`` marks that ``price`` and ``change`` are expressed in the
    local currency. ``previous_close`` and ``change_percent`` always keep
    their source-currency values.
    """

    symbol: str
    display_name: str
    price: float
    previous_close: float
    change: float
    change_percent: float
    volume: int
    market: str
    converted: bool = False

    @classmethod
    def from_quote(cls, request: SymbolRequest, quote: Quote) -> "EquityQuote":
        change, change_percent = compute_change(quote.price, quote.previous_close)
        return cls(
            symbol=request.symbol,
            display_name=quote.display_name,
            price=quote.price,
            previous_close=quote.previous_close,
            change=change,
            change_percent=change_percent,
            volume=quote.volume,
            market=request.market or "",
        )

    def converted_at(self, rate: float) -> "EquityQuote":
        """Return a copy with price and change scaled by ``rate``"""
        return replace(
            self,
            price=self.price * rate,
            change=self.change * rate,
            converted=True,
        )


DerivedQuote = ForexQuote | EquityQuote


def derive_quote(request: SymbolRequest, quote: Quote) -> DerivedQuote:
    """Build the derived quote matching the request category"""
    if request.category is QuoteCategory.FOREX:
        return ForexQuote.from_quote(request, quote)
    return EquityQuote.from_quote(request, quote)


@dataclass(frozen=True)
class RateContext:
    """Official exchange rate chosen for one refresh cycle

    A rate of 0.0 means no official rate was available this cycle.
    """

    rate: float = 0.0
    source_symbol: str | None = None

    @property
    def is_available(self) -> bool:
        return self.rate != 0


@dataclass
class MarketSnapshot:
    """Data handed to the renderer after each cycle"""

    forex: list[ForexQuote]
    equities: list[EquityQuote]
    rate: RateContext = field(default_factory=RateContext)
    updated_at: datetime = field(default_factory=datetime.now)
