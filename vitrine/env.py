from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .config import parse_bool

PLACEHOLDER_ORIGIN = "https://example.com"


@dataclass(frozen=True)
class BuildEnv:
    """Environment inputs captured once at the start of a run."""

    public_url: str = ""
    ci: bool = False
    repository: str = ""
    site_url: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildEnv":
        if environ is None:
            environ = os.environ
        return cls(
            public_url=(environ.get("PUBLIC_URL") or "").strip(),
            ci=parse_bool(environ.get("GITHUB_ACTIONS")) or parse_bool(environ.get("CI")),
            repository=(environ.get("GITHUB_REPOSITORY") or "").strip(),
            site_url=(environ.get("SITE_URL") or "").strip(),
        )

    @property
    def repo_owner(self) -> str:
        owner, sep, name = self.repository.partition("/")
        return owner if sep and name else ""

    @property
    def repo_name(self) -> str:
        owner, sep, name = self.repository.partition("/")
        return name.strip("/") if sep and owner else ""


def is_absolute_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def compute_base_path(env: BuildEnv) -> str:
    if env.public_url:
        return env.public_url if env.public_url.endswith("/") else env.public_url + "/"
    if env.ci and env.repo_name:
        return f"/{env.repo_name}/"
    return "/"


def site_origin(env: BuildEnv) -> str:
    if env.site_url:
        return env.site_url.rstrip("/")
    if env.repo_owner:
        return f"https://{env.repo_owner.lower()}.github.io"
    return PLACEHOLDER_ORIGIN


def absolute_base_url(env: BuildEnv, base_path: str) -> str:
    if is_absolute_url(base_path):
        return base_path
    return site_origin(env) + "/" + base_path.lstrip("/")
