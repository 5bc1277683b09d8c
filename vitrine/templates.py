from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .errors import ConfigError
from .paths import first_existing

TEMPLATE_SUFFIX = ".html"
GENERIC_TEMPLATE = "page"
DEFAULT_TEMPLATE = "index"
HTML_SUFFIX_RE = re.compile(r"\.html?$", re.IGNORECASE)


def page_name(path: str) -> str:
    name = HTML_SUFFIX_RE.sub("", str(path or "").strip())
    if not name or "/" in name or "\\" in name or name.startswith("."):
        raise ConfigError(f"invalid page path: {path!r}")
    return name


def template_candidates(page: str, template_dir: Path, client_dir: Optional[Path] = None) -> list[Path]:
    candidates = []
    if client_dir is not None:
        candidates.append(client_dir / "pages" / f"{page}{TEMPLATE_SUFFIX}")
    candidates.extend(
        [
            template_dir / f"{page}{TEMPLATE_SUFFIX}",
            template_dir / f"{GENERIC_TEMPLATE}{TEMPLATE_SUFFIX}",
            template_dir / f"{DEFAULT_TEMPLATE}{TEMPLATE_SUFFIX}",
        ]
    )
    return candidates


def resolve_template(page: str, template_dir: Path, client_dir: Optional[Path] = None) -> Optional[Path]:
    return first_existing(template_candidates(page, template_dir, client_dir), Path.is_file)


def normalize_pages(pages: list, site_path: Optional[Path] = None) -> list[dict]:
    """Page entries as ``{path, title}`` with sanitized output names."""
    normalized = []
    for page in pages:
        if not isinstance(page, dict):
            raise ConfigError(f"page entries must be objects, got {page!r}", site_path)
        try:
            name = page_name(page.get("path", ""))
        except ConfigError as exc:
            raise ConfigError(str(exc), site_path) from exc
        normalized.append({"path": name, "title": page.get("title") or name})
    return normalized
