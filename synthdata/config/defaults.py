"""Default configuration parameters for synthetic dataset generation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SynthesisParams:
    """Bounded random walk parameters for the bar synthesizer."""
    # Price walk
    baseline_price: float = 100.0                    # Starting price for every contract
    volatility: float = 0.01                         # Max fractional move per bar

    # Bar shape
    close_jitter: float = 0.005                      # Max close offset from open
    wick_pct: float = 0.01                           # Max high/low extension

    # Quotes
    spread_pct: float = 0.001                        # Bid/ask spread as fraction of price

    # Sizes, [low, high)
    volume_min: float = 100.0
    volume_max: float = 10000.0
    quote_size_min: float = 10.0
    quote_size_max: float = 100.0


@dataclass(frozen=True)
class FuturesParams:
    """Futures chain parameters."""
    symbol: str = "VX"
    contract_length: str = "1M"
    time_period: str = "1D"
    output_template: str = "data.csv"                # e.g. "data_{symbol}_{expiry:%Y%m%d}.csv"


@dataclass(frozen=True)
class EquitiesParams:
    """Equities series parameters."""
    time_period: str = "1D"


@dataclass(frozen=True)
class OutputParams:
    """Output location parameters."""
    data_dir: str = "data"
    create_dirs: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    synthesis: SynthesisParams
    futures: FuturesParams
    equities: EquitiesParams
    output: OutputParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        synthesis=SynthesisParams(),
        futures=FuturesParams(),
        equities=EquitiesParams(),
        output=OutputParams(),
    )
