"""Backend configuration from the environment or Streamlit secrets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class BackendConfig:
    url: str = ""
    anon_key: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.url) and bool(self.anon_key)


def _clean(value: Any) -> str:
    return str(value or "").strip()


def from_env(env: Optional[Mapping[str, str]] = None) -> BackendConfig:
    env = os.environ if env is None else env
    return BackendConfig(url=_clean(env.get("SUPABASE_URL")), anon_key=_clean(env.get("SUPABASE_ANON_KEY")))


def from_secrets(secrets: Mapping[str, Any]) -> BackendConfig:
    """Read either a ``[supabase]`` table (url/anon_key) or flat SUPABASE_* keys."""

    nested = secrets.get("supabase")
    if isinstance(nested, Mapping) and (nested.get("url") or nested.get("anon_key")):
        return BackendConfig(url=_clean(nested.get("url")), anon_key=_clean(nested.get("anon_key")))
    return BackendConfig(
        url=_clean(secrets.get("SUPABASE_URL")),
        anon_key=_clean(secrets.get("SUPABASE_ANON_KEY")),
    )


def load_config(secrets: Optional[Mapping[str, Any]] = None, env: Optional[Mapping[str, str]] = None) -> BackendConfig:
    """Secrets win when they are complete; otherwise fall back to the environment."""

    if secrets is not None:
        config = from_secrets(secrets)
        if config.enabled:
            return config
    return from_env(env)
