"""
Output delivery module.

Serializes synthesized bars to files.
"""
