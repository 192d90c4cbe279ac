"""Holder storage and SDK layer.

This module accumulates partial holders and merges them per identifier.
It exposes the registry client used by callers of the parser.
"""
