"""
Configuration module.

Frozen dataclass defaults, the dataset config loader and entry validation.
"""
