"""
Core module - Token, time and logging utilities.
"""
from docauth.core.clock import (
    utc_now,
    to_store_time,
    to_model_time,
    from_store_time,
    epoch_ms,
    from_epoch_ms,
)
from docauth.core.log import setup_logging
from docauth.core.security import generate_token, hash_token

__all__ = [
    "utc_now",
    "to_store_time",
    "to_model_time",
    "from_store_time",
    "epoch_ms",
    "from_epoch_ms",
    "setup_logging",
    "generate_token",
    "hash_token",
]
