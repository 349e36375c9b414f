"""
Synthdata - Synthetic Market Dataset Generator

Generates artificial financial time series (futures contract chains and
equities bars) as CSV files for feeding into a backtesting system.
"""

__version__ = "0.1.0"
__author__ = "Synthdata Team"
