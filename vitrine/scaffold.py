from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from .assets import write_text
from .config import SITE_FILE, display_name, load_site_json, merge_config, slugify, write_site_json
from .discovery import RESERVED_PREFIX
from .errors import ClientExistsError, VitrineError

STARTER_DIR = f"{RESERVED_PREFIX}starter"

STARTER_INDEX = """<!doctype html>
<html lang="{{ site.lang }}">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>{{ site.title }}</title>
  <link rel="stylesheet" href="{{ basePath }}{{ clientOutDir }}assets/styles.css">
</head>
<body>
  <h1>{{ site.title }}</h1>
  <p>{{ site.description or '' }}</p>
  <footer>&copy; <span id="year">{{ year }}</span> {{ site.brand }}</footer>
  <script src="{{ basePath }}{{ clientOutDir }}assets/script.js"></script>
</body>
</html>
"""

STARTER_CSS = (
    ":root{--brand:#e11d48}"
    "body{margin:0;font-family:system-ui;background:#0c0c0d;color:#f3f3f3;padding:24px}\n"
)

STARTER_JS = (
    "document.addEventListener('DOMContentLoaded',()=>{"
    "const y=document.getElementById('year');if(y) y.textContent=new Date().getFullYear();});\n"
)

PLACEHOLDERS = ("assets/img/.keep", "assets/hero.webp", "assets/og.jpg")


def create_minimal_client(target: Path) -> None:
    for sub in ("assets/img", "pages", "partials"):
        (target / sub).mkdir(parents=True, exist_ok=True)
    write_text(target / "pages" / "index.html", STARTER_INDEX)
    write_text(target / "assets" / "styles.css", STARTER_CSS)
    write_text(target / "assets" / "script.js", STARTER_JS)


def add_client(clients_dir: Path, raw_name: str, title: Optional[str] = None) -> Path:
    """Create ``clients_dir/<slug>`` from the starter and persist a merged site.json."""
    slug = slugify(raw_name)
    if not slug:
        raise VitrineError(f"Cannot derive a client slug from {raw_name!r}.")
    target = clients_dir / slug
    if target.exists():
        raise ClientExistsError(f"Client directory already exists: {target}")

    starter = clients_dir / STARTER_DIR
    try:
        if starter.is_dir():
            shutil.copytree(starter, target)
        else:
            create_minimal_client(target)
        populate_client(target, raw_name, title)
    except BaseException:
        shutil.rmtree(target, ignore_errors=True)
        raise
    return target


def populate_client(target: Path, raw_name: str, title: Optional[str]) -> None:
    site_path = target / SITE_FILE
    existing = load_site_json(site_path) if site_path.exists() else {}
    # the starter's identity fields describe the starter, not the new client
    for key in ("slug", "title", "brand", "description"):
        existing.pop(key, None)
    merged = merge_config(existing, raw_name, display_name(raw_name, title) or None)
    write_site_json(site_path, merged)

    for rel in PLACEHOLDERS:
        path = target / rel
        if not path.exists():
            write_text(path, "")
