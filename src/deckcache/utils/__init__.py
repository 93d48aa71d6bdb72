"""Utility helpers for deckcache."""

from deckcache.utils.hashing import hash_value
from deckcache.utils.metrics import log_metric

__all__ = ["hash_value", "log_metric"]
