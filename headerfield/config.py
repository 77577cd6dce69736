"""Runtime settings read from the environment (and a ``.env`` file, via the CLI)."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from headerfield.sensitivity import DEFAULT_SENSITIVE_HEADERS, SensitivityPolicy

ENV_SENSITIVE_HEADERS = "HEADERFIELD_SENSITIVE_HEADERS"
ENV_SHOW_SECRETS = "HEADERFIELD_SHOW_SECRETS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    sensitive_headers: list[str] = Field(default_factory=list)
    show_secrets: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        raw_names = env.get(ENV_SENSITIVE_HEADERS, "")
        return cls(
            sensitive_headers=[n.strip() for n in raw_names.split(",") if n.strip()],
            show_secrets=env.get(ENV_SHOW_SECRETS, "").strip().lower() in _TRUTHY,
        )

    def policy(self) -> SensitivityPolicy:
        """Default sensitive headers plus the configured extras."""
        return SensitivityPolicy(names=DEFAULT_SENSITIVE_HEADERS).with_names(
            self.sensitive_headers
        )
