"""Canonical roster models."""

from .player import (
    PLACEHOLDER,
    SCHEMA_WIDTH,
    Dataset,
    PlayerRecord,
    SchemaMismatch,
    is_sentinel,
)

__all__ = [
    "PLACEHOLDER",
    "SCHEMA_WIDTH",
    "Dataset",
    "PlayerRecord",
    "SchemaMismatch",
    "is_sentinel",
]
