"""Shared Pydantic base models and utilities."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CompanionBase(BaseModel):
    """Base model with shared config for all Companion API schemas."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
    )
