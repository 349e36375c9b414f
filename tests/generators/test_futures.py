"""Tests for the contract scheduler and futures generator."""

from datetime import datetime

import numpy as np
import pytest

from synthdata.data.models import DateRange
from synthdata.errors import (
    ConfigError,
    ContractLengthError,
    DateOverflowError,
    InvalidTimePeriodError,
    TimeExpressionError,
)
from synthdata.generators.futures import FuturesGenerator, render_output_path, schedule_contracts
from synthdata.utils.time import add_months, months_between


class TestScheduleContracts:
    """Test schedule_contracts function."""

    def test_two_monthly_contracts(self):
        """Jan 1 to Mar 1 with one-month contracts gives January and February."""
        date_range = DateRange(datetime(2024, 1, 1), datetime(2024, 3, 1))
        windows = list(schedule_contracts(date_range, 1, "VX"))
        assert [(w.start, w.end) for w in windows] == [
            (datetime(2024, 1, 1), datetime(2024, 2, 1)),
            (datetime(2024, 2, 1), datetime(2024, 3, 1)),
        ]
        assert {w.symbol for w in windows} == {"VX"}

    def test_overlapping_windows(self):
        """Longer contracts overlap; starts still advance one month."""
        date_range = DateRange(datetime(2024, 1, 1), datetime(2024, 4, 15))
        windows = list(schedule_contracts(date_range, 3, "VX"))
        assert [w.start.month for w in windows] == [1, 2, 3, 4]
        assert windows[0].end == datetime(2024, 4, 1)
        assert windows[-1].end == datetime(2024, 7, 1)

    @pytest.mark.parametrize("start,end,length", [
        (datetime(2024, 1, 1), datetime(2024, 1, 2), 1),
        (datetime(2023, 6, 15, 9, 30), datetime(2025, 2, 1), 3),
        (datetime(2024, 1, 31), datetime(2024, 12, 31), 2),
        (datetime(2020, 2, 29), datetime(2021, 3, 1), 12),
    ])
    def test_window_properties(self, start, end, length):
        """Non-empty; starts inside the range; fixed length; monthly spacing."""
        date_range = DateRange(start, end)
        windows = list(schedule_contracts(date_range, length, "VX"))

        assert windows
        assert windows[0].start == start
        for window in windows:
            assert window.start < end
            assert window.end == add_months(window.start, length)
            assert months_between(window.start, window.end) == length
        for previous, current in zip(windows, windows[1:]):
            assert current.start == add_months(previous.start, 1)
            assert months_between(previous.start, current.start) == 1

    def test_month_end_start(self):
        """A clamped month-end day carries into later starts."""
        date_range = DateRange(datetime(2024, 1, 31), datetime(2024, 5, 1))
        windows = list(schedule_contracts(date_range, 1, "VX"))
        assert [w.start for w in windows] == [
            datetime(2024, 1, 31),
            datetime(2024, 2, 29),
            datetime(2024, 3, 29),
            datetime(2024, 4, 29),
        ]
        assert windows[1].end == datetime(2024, 3, 29)

    def test_zero_length_contracts(self):
        date_range = DateRange(datetime(2024, 1, 1), datetime(2024, 2, 15))
        windows = list(schedule_contracts(date_range, 0, "VX"))
        assert [w.start == w.end for w in windows] == [True, True]

    def test_overflow_is_fatal(self):
        """Contracts running past year 9999 raise instead of stopping."""
        date_range = DateRange(datetime(9999, 11, 1), datetime(9999, 12, 31))
        with pytest.raises(DateOverflowError):
            list(schedule_contracts(date_range, 1, "VX"))


class TestRenderOutputPath:
    """Test render_output_path function."""

    def test_placeholders(self):
        path = render_output_path("{name}/{symbol}_{expiry:%Y%m%d}_{index}.csv",
                                  "chain", "VX", datetime(2024, 2, 1), 3)
        assert str(path) == "chain/VX_20240201_3.csv"

    def test_fixed_path(self):
        assert str(render_output_path("data.csv", "chain", "VX", datetime(2024, 2, 1), 0)) == "data.csv"


class TestFuturesGenerator:
    """Test FuturesGenerator end to end against the file system."""

    PER_CONTRACT = {"futures": {"output_template": "data_{symbol}_{expiry:%Y%m%d}.csv"}}

    def test_one_file_per_contract(self, make_dataset, read_csv, tmp_path, rng):
        """Daily bars for January and February land in separate files."""
        dataset = make_dataset(contract_length="1M", time_period="1D", params=self.PER_CONTRACT)
        result = FuturesGenerator(dataset, output_dir=tmp_path, rng=rng).generate()

        assert result.files == [tmp_path / "data_VX_20240201.csv", tmp_path / "data_VX_20240301.csv"]
        january = read_csv(result.files[0])
        february = read_csv(result.files[1])
        assert len(january) == 31
        assert len(february) == 29
        assert result.rows == 60
        assert {row["expiry"] for row in january} == {"2024-02-01 00:00:00"}
        assert {row["expiry"] for row in february} == {"2024-03-01 00:00:00"}
        assert january[0]["time"] == "2024-01-01 00:00:00"
        assert february[-1]["time"] == "2024-02-29 00:00:00"
        assert {row["symbol"] for row in january} == {"VX"}

    def test_each_contract_restarts_price(self, make_dataset, read_csv, tmp_path, rng):
        """Contracts do not share the running price."""
        dataset = make_dataset(contract_length="3M", time_period="1D", params=self.PER_CONTRACT)
        result = FuturesGenerator(dataset, output_dir=tmp_path, rng=rng).generate()
        for path in result.files:
            first = read_csv(path)[0]
            assert 99.0 <= float(first["open"]) <= 101.0

    def test_default_path_keeps_last_contract(self, make_dataset, read_csv, tmp_path, rng):
        """The default data.csv path is rewritten by each contract; the last one wins."""
        dataset = make_dataset()
        result = FuturesGenerator(dataset, output_dir=tmp_path, rng=rng).generate()

        assert result.files == [tmp_path / "data.csv"]
        rows = read_csv(tmp_path / "data.csv")
        assert len(rows) == 29
        assert rows[0]["expiry"] == "2024-03-01 00:00:00"

    def test_symbol_and_defaults(self, make_dataset, tmp_path):
        dataset = make_dataset(symbol="ES")
        generator = FuturesGenerator(dataset, output_dir=tmp_path, rng=np.random.default_rng(0))
        assert generator.symbol == "ES"
        assert generator.contract_length == 1
        assert str(generator.time_period) == "1D"
        assert generator.output_template == "data.csv"
        assert [w.symbol for w in generator.contracts()] == ["ES", "ES"]

    def test_synthesis_overrides(self, make_dataset, read_csv, tmp_path, rng):
        dataset = make_dataset(params={"synthesis": {"baseline_price": 5000.0}})
        result = FuturesGenerator(dataset, output_dir=tmp_path, rng=rng).generate()
        assert 4950.0 <= float(read_csv(result.files[0])[0]["open"]) <= 5050.0

    @pytest.mark.parametrize("entry,error", [
        ({"contract_length": "3"}, ContractLengthError),
        ({"time_period": "1d"}, TimeExpressionError),
        ({"time_period": "0H"}, InvalidTimePeriodError),
        ({"params": {"futures": {"output_template": "{unknown}.csv"}}}, ConfigError),
        ({"params": {"futures": {"output_template": "{name.foo}.csv"}}}, ConfigError),
        ({"params": {"futures": {"output_template": "{index[0]}.csv"}}}, ConfigError),
        ({"time_period": "99999999999D"}, TimeExpressionError),
    ])
    def test_malformed_settings_fail_before_writing(self, make_dataset, tmp_path, entry, error):
        """Bad settings raise from the constructor and nothing is written."""
        with pytest.raises(error):
            FuturesGenerator(make_dataset(**entry), output_dir=tmp_path)
        assert list(tmp_path.iterdir()) == []
