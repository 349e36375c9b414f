"""
Bounded random walk bar synthesizer.

Each bar moves a running price by at most `volatility` of itself, then derives
open/high/low/close around it plus ask and bid variants offset by half the
spread. The running price is an explicit accumulator threaded through
`step()`, so every contract owns its own price state and a seeded
numpy Generator reproduces output exactly.
"""

from collections.abc import Iterator
from datetime import datetime, timedelta
from typing import Optional, Union

import numpy as np

from synthdata.config.defaults import SynthesisParams
from synthdata.data.models import OHLCVRecord, TimePeriod
from synthdata.errors import DateOverflowError, InvalidTimePeriodError


class BarSynthesizer:
    """Produces OHLCV + bid/ask bars from a bounded random walk."""

    def __init__(
        self,
        params: Optional[SynthesisParams] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.params = params or SynthesisParams()
        self.rng = rng if rng is not None else np.random.default_rng()

    def _uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def step(
        self,
        price: float,
        time: datetime,
        expiry: datetime,
        symbol: str
    ) -> tuple[OHLCVRecord, float]:
        """
        Synthesize one bar.

        Args:
            price: Running price before this bar
            time: Bar timestamp
            expiry: Contract expiry written on the bar
            symbol: Instrument symbol

        Returns:
            Tuple of (bar, running price after this bar)
        """
        p = self.params

        price += self._uniform(-1.0, 1.0) * price * p.volatility

        open_ = price
        close = open_ * (1 + p.close_jitter * self._uniform(-1.0, 1.0))
        high = max(open_, close) * (1 + self._uniform(0.0, p.wick_pct))
        low = min(open_, close) * (1 - self._uniform(0.0, p.wick_pct))

        half_spread = price * p.spread_pct / 2

        volume = self._uniform(p.volume_min, p.volume_max)
        asksize = self._uniform(p.quote_size_min, p.quote_size_max)
        bidsize = self._uniform(p.quote_size_min, p.quote_size_max)

        record = OHLCVRecord(
            expiry=expiry,
            symbol=symbol,
            time=time,
            askopen=open_ + half_spread,
            askhigh=high + half_spread,
            asklow=low + half_spread,
            askclose=close + half_spread,
            asksize=asksize,
            bidopen=open_ - half_spread,
            bidhigh=high - half_spread,
            bidlow=low - half_spread,
            bidclose=close - half_spread,
            bidsize=bidsize,
            close=close,
            high=high,
            low=low,
            open=open_,
            volume=volume,
        )
        return record, price

    def bars(
        self,
        period: Union[TimePeriod, timedelta],
        start: datetime,
        end: datetime,
        symbol: str,
        expiry: Optional[datetime] = None
    ) -> Iterator[OHLCVRecord]:
        """
        Iterate bars from start (inclusive) to end (exclusive) every period.

        The price starts at the baseline for every call, so two calls never
        share state.

        Args:
            period: Bar spacing
            start: First bar timestamp
            end: Bars stop once time reaches this
            symbol: Instrument symbol
            expiry: Expiry written on every bar, defaults to end

        Raises:
            InvalidTimePeriodError: If period is not positive
        """
        delta = period.delta if isinstance(period, TimePeriod) else period
        if delta <= timedelta(0):
            raise InvalidTimePeriodError(
                f"Bar period must be positive, got {period}",
                context={"period": str(period)}
            )

        expiry = end if expiry is None else expiry
        return self._walk(delta, start, end, symbol, expiry)

    def _walk(
        self,
        delta: timedelta,
        start: datetime,
        end: datetime,
        symbol: str,
        expiry: datetime
    ) -> Iterator[OHLCVRecord]:
        price = self.params.baseline_price
        time = start

        while time < end:
            record, price = self.step(price, time, expiry, symbol)
            yield record
            try:
                time = time + delta
            except OverflowError as e:
                raise DateOverflowError(
                    f"Advancing {time} by {delta} leaves the representable date range",
                    base=time
                ) from e
