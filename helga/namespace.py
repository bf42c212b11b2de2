"""A namespace and the artifact source of its charts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from .artifact import Artifact
from .errors import HelgaError, ValidationError, handle_error, handle_errors
from .packages import HelmPackage, determine_newer_package


@dataclass
class Namespace:
    """A deployment namespace with its artifact source."""

    name: str = ""
    artifact: Artifact = field(default_factory=Artifact)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Namespace:
        """Build a namespace from a parsed YAML mapping."""
        data = data or {}
        return cls(name=str(data.get("name") or ""), artifact=Artifact.from_dict(data.get("artifact")))

    def validate(self) -> list[Exception]:
        """Check the namespace and its artifact; log and return the problems."""
        errors: list[Exception] = []
        if not self.name:
            errors.append(ValidationError("Namespace", "namespace name cannot be empty"))
        if self.artifact.validate():
            errors.append(ValidationError(
                "Namespace", f"error artifact {self.artifact.domain} did not pass validation"
            ))
        handle_errors(errors)
        return errors

    def organize_helm_packages(self, session: requests.Session | None = None) -> list[HelmPackage]:
        """Fetch the packages and keep the newest of each chart."""
        newest: dict[str, HelmPackage] = {}
        for pkg in self.artifact.fetch_helm_packages(session):
            try:
                chart, _ = pkg.name_and_version()
                current = newest.get(chart)
                newest[chart] = pkg if current is None else determine_newer_package(
                    pkg, current, bool(self.artifact.decide_by_version)
                )
            except HelgaError as exc:
                handle_error(exc)
        return list(newest.values())