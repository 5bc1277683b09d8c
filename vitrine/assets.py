from __future__ import annotations

import shutil
from pathlib import Path

from .paths import first_existing

STYLE_DIR_NAMES = ("styles", "css")
FALLBACK_CSS = (
    ":root{--brand:#e11d48;--bg:#0c0c0d;--panel:#141416;--text:#f3f3f3;--muted:#a1a1aa}"
    "*{box-sizing:border-box}"
    "body{margin:0;font-family:system-ui,sans-serif;background:var(--bg);color:var(--text);line-height:1.5}"
    "main{max-width:960px;margin:0 auto;padding:24px}"
    "a{color:var(--brand)}"
)


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_tree(src: Path, dst: Path) -> None:
    dst.mkdir(parents=True, exist_ok=True)
    for item in src.iterdir():
        dest = dst / item.name
        if item.is_dir():
            shutil.copytree(item, dest, dirs_exist_ok=True)
        else:
            shutil.copy2(item, dest)


def stage_public(public_dir: Path, output_dir: Path) -> bool:
    if not public_dir.is_dir():
        return False
    copy_tree(public_dir, output_dir)
    return True


def stage_client_assets(template_dir: Path, client_dir: Path, out_dir: Path) -> None:
    if out_dir.exists():
        shutil.rmtree(out_dir)
    assets_out = out_dir / "assets"
    assets_out.mkdir(parents=True)

    shared_assets = template_dir / "assets"
    if shared_assets.is_dir():
        copy_tree(shared_assets, assets_out)

    styles_dir = first_existing([template_dir / name for name in STYLE_DIR_NAMES], Path.is_dir)
    if styles_dir is not None:
        copy_tree(styles_dir, assets_out / "css")
    else:
        write_text(assets_out / "css" / "styles.css", FALLBACK_CSS)

    client_assets = client_dir / "assets"
    if client_assets.is_dir():
        copy_tree(client_assets, assets_out)
