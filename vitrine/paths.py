from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar

P = TypeVar("P", str, Path)

TEMPLATE_NAMES = ("template", "modèle", "modele")
CLIENTS_NAMES = ("clients", "client")
PUBLIC_NAMES = ("public", "publique")
OUTPUT_NAMES = ("dist",)


def first_existing(candidates: Iterable[P], exists: Callable[[P], bool] = os.path.exists) -> Optional[P]:
    for candidate in candidates:
        if exists(candidate):
            return candidate
    return None


def resolve_dir(root: Path, *names: str, exists: Callable[[Path], bool] = os.path.exists) -> Path:
    if not names:
        raise ValueError("resolve_dir needs at least one candidate name")
    candidates = [root / name for name in names]
    found = first_existing(candidates, exists)
    return found if found is not None else candidates[0]


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    template: Path
    clients: Path
    public: Path
    output: Path

    @classmethod
    def resolve(cls, root: Path, output: Optional[Path] = None) -> "ProjectPaths":
        root = root.resolve()
        if output is None:
            output = resolve_dir(root, *OUTPUT_NAMES)
        elif not output.is_absolute():
            output = root / output
        return cls(
            root=root,
            template=resolve_dir(root, *TEMPLATE_NAMES),
            clients=resolve_dir(root, *CLIENTS_NAMES),
            public=resolve_dir(root, *PUBLIC_NAMES),
            output=output,
        )
