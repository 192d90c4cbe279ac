"""Row decoding layer.

This module turns raw positional CSV fields into typed row values.
It validates every code against its taxonomy before mapping runs.
"""
