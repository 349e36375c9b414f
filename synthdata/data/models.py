"""
Data models for synthetic dataset generation.

All entities are immutable and live only for one generation pass; nothing
persists beyond the emitted CSV files.
"""

from dataclasses import astuple, dataclass
from datetime import datetime, timedelta

from synthdata.errors import InvalidDateRangeError

# Fixed CSV schema, order matches OHLCVRecord fields
CSV_COLUMNS = (
    "expiry", "symbol", "time",
    "askopen", "askhigh", "asklow", "askclose", "asksize",
    "bidopen", "bidhigh", "bidlow", "bidclose", "bidsize",
    "close", "high", "low", "open", "volume",
)

# Minutes per unit letter; months and years are approximations
UNIT_MINUTES = {
    "m": 1,
    "H": 60,
    "D": 60 * 24,
    "W": 60 * 24 * 7,
    "M": 60 * 24 * 30,
    "y": 60 * 24 * 365,
}


@dataclass(frozen=True)
class DateRange:
    """Global generation window, start inclusive and end exclusive."""
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise InvalidDateRangeError(
                f"Date range start {self.start} must be before end {self.end}",
                start=self.start,
                end=self.end,
            )


@dataclass(frozen=True)
class TimePeriod:
    """Fixed bar period parsed from `<amount><unit>`."""
    amount: int
    unit: str

    @property
    def delta(self) -> timedelta:
        return timedelta(minutes=self.amount * UNIT_MINUTES[self.unit])

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


@dataclass(frozen=True)
class ContractWindow:
    """Active trading period of one synthetic futures contract."""
    start: datetime
    end: datetime       # Contract expiry
    symbol: str


@dataclass(frozen=True)
class OHLCVRecord:
    """One synthetic bar with mid, ask and bid OHLC."""
    expiry: datetime
    symbol: str
    time: datetime
    askopen: float
    askhigh: float
    asklow: float
    askclose: float
    asksize: float
    bidopen: float
    bidhigh: float
    bidlow: float
    bidclose: float
    bidsize: float
    close: float
    high: float
    low: float
    open: float
    volume: float

    def as_row(self) -> tuple:
        """Field values in CSV_COLUMNS order."""
        return astuple(self)
