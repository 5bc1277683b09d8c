from __future__ import annotations

from pathlib import Path
from typing import Optional


class VitrineError(Exception):
    """Base class for errors that abort a command with a readable message."""


class ConfigError(VitrineError):
    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class TemplateError(VitrineError):
    def __init__(self, message: str, template: Optional[Path], client: str) -> None:
        self.template = template
        self.client = client
        where = str(template) if template is not None else "<fallback>"
        super().__init__(f"[{client}] {where}: {message}")


class ClientExistsError(VitrineError):
    pass
