"""Pydantic value models for lincol."""

from lincol.models.position import Position

__all__ = ["Position"]
