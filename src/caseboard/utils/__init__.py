"""Utility functions."""

from .datetime import humanize_age, now_utc
from .ids import IdFactory, SequentialIds, make_id_factory, uuid_ids

__all__ = [
    "IdFactory",
    "SequentialIds",
    "humanize_age",
    "make_id_factory",
    "now_utc",
    "uuid_ids",
]
