"""Row-to-entity mapping layer.

This module turns decoded rows into partial holder entities.
It applies per-certificate expansion rules and required-field checks.
"""
