"""
Data models and parsers.

Holds the transient entities of one generation pass and the parsers that turn
compact user strings into them.
"""
