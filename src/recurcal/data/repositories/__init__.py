"""Supabase repositories for first-class domain objects."""

from __future__ import annotations

from .events import EventRepository

__all__ = ["EventRepository"]
