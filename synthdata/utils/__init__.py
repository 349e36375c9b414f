"""
Utility functions module.

Time Semantics:
- All timestamps are naive; no timezone conversion is ever applied
- Month arithmetic is calendar based, clamping to the last day of the month
- The single wire format for timestamps is `YYYY-MM-DD HH:MM:SS`
"""
