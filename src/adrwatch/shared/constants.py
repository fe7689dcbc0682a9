"""Static symbol lists and upstream request constants."""

from adrwatch.domain.models.quote import QuoteCategory, SymbolRequest

CHART_URL_TEMPLATE = "https://query2.finance.yahoo.com/v8/finance/chart/{symbol}"
QUOTE_SUMMARY_URL_TEMPLATE = (
    "https://query1.finance.yahoo.com/v10/finance/quoteSummary/{symbol}"
    "?modules=price"
)

OFFICIAL_RATE_MARKER = "Dólar Oficial"
FOREIGN_MARKET = "NYSE"

# Browser-like header set sent with every quote request
REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "DNT": "1",
    "Connection": "keep-alive",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
    "Referer": "https://finance.yahoo.com/",
}

REQUEST_COOKIES = {"B": "59jd1o5g2nojr&b=3&s=ls"}

FOREX_SYMBOLS: tuple[SymbolRequest, ...] = (
    SymbolRequest("ARS=X", "Dólar Oficial", QuoteCategory.FOREX),
    SymbolRequest("EURARS=X", "Euro", QuoteCategory.FOREX),
    # Alternates in case one of the pairs stops resolving
    SymbolRequest("USDARS=X", "Dólar Oficial (alt)", QuoteCategory.FOREX),
    SymbolRequest("EURUSD=X", "Euro/USD", QuoteCategory.FOREX),
)


def _adr(symbol: str) -> SymbolRequest:
    return SymbolRequest(symbol, symbol, QuoteCategory.EQUITY, FOREIGN_MARKET)


# Argentine ADRs listed on the NYSE, grouped by sector
EQUITY_SYMBOLS: tuple[SymbolRequest, ...] = (
    # Banks and financials
    _adr("GGAL"),
    _adr("BMA"),
    _adr("BBAR"),
    _adr("SUPV"),
    _adr("BSMX"),
    # Energy
    _adr("YPF"),
    _adr("PAM"),
    _adr("EDN"),
    # Technology and telecom
    _adr("TEO"),
    _adr("GLOB"),
    _adr("MELI"),
    # Industry and materials
    _adr("TS"),
    _adr("TX"),
    # Real estate
    _adr("IRS"),
    _adr("IRCP"),
    # Agriculture
    _adr("CRESY"),
    # Infrastructure
    _adr("TGS"),
    _adr("VSH"),
)

# One well-known symbol per category, fetched once at startup
DIAGNOSTIC_SYMBOLS: tuple[str, ...] = ("AAPL", "ARS=X", "YPF")
