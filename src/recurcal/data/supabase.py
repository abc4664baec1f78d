from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from supabase import Client, SupabaseException, create_client

from ..config.settings import SupabaseSettings
from .base import StorageError


class SupabaseNotInitializedError(StorageError):
    """Raised when the Supabase client is requested without a usable URL and key."""


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client."""

    settings: SupabaseSettings
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are missing: {missing}.")
        try:
            self._client = create_client(self.settings.url, self.settings.anon_key)
        except SupabaseException as exc:
            raise SupabaseNotInitializedError(f"Supabase client could not be created: {exc}") from exc
        return self._client

    def table(self, name: str):
        return self.ensure_client().table(name)
