from __future__ import annotations

import shutil
from pathlib import Path

from .errors import VitrineError


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base + "/"
    return f"{base}/{path}"


def write_nojekyll(output_dir: Path) -> None:
    output_dir.joinpath(".nojekyll").write_text("", encoding="utf-8")


def check_output_dir(output_dir: Path, project_root: Path) -> None:
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved:
        raise VitrineError("Refusing to clean project root.")
    if not output_resolved.is_relative_to(root_resolved):
        raise VitrineError(f"Refusing to clean output directory outside project root: {output_dir}")


def replace_dir(staging: Path, target: Path) -> None:
    """Move a fully built staging tree into place of ``target``."""
    backup = target.with_name(target.name + ".old")
    if backup.exists():
        shutil.rmtree(backup)
    if target.exists():
        target.rename(backup)
    staging.rename(target)
    if backup.exists():
        shutil.rmtree(backup)
