"""An Artifactory repository and the paths searched in it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import HelgaError, ValidationError, handle_errors


@dataclass
class Repo:
    """A named repository with a list of paths to search."""

    name: str = ""
    paths: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Repo:
        """Build a repo from a parsed YAML mapping."""
        data = data or {}
        return cls(
            name=str(data.get("name") or ""),
            paths=[str(p) for p in data.get("paths") or []],
        )

    def validate(self) -> list[Exception]:
        """Check the repo, log the problems and return them."""
        errors: list[Exception] = []
        if not self.name:
            errors.append(ValidationError("Repo", "repo name cannot be empty"))
        if not self.paths:
            errors.append(ValidationError("Repo", "length of repo paths list cannot be empty"))
        handle_errors(errors)
        return errors

    def sync(self, src: Repo) -> None:
        """Merge the paths of ``src`` into this repo, dropping duplicates.

        Raises HelgaError when the repo names differ.
        """
        if self.name != src.name:
            raise HelgaError(
                f"repo: {self.name} could be synced with repo: {src.name}. repos name do not match"
            )
        self.paths = list(dict.fromkeys([*self.paths, *src.paths]))