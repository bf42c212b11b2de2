"""A Kubernetes cluster and the namespaces deployed into it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ValidationError, handle_errors
from .namespace import Namespace
from .settings import DOMAIN_VALIDATION_REGEX, is_valid_domain
from .validation import filter_by_validation


@dataclass
class Cluster:
    """A cluster's address, credentials and namespaces."""

    name: str = ""
    server: str = ""
    username: str = ""
    password: str = ""
    namespaces: list[Namespace] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Cluster:
        """Build a cluster from a parsed YAML mapping."""
        data = data or {}
        return cls(
            name=str(data.get("name") or ""),
            server=str(data.get("server") or ""),
            username=str(data.get("username") or ""),
            password=str(data.get("password") or ""),
            namespaces=[Namespace.from_dict(n) for n in data.get("namespaces") or []],
        )

    def validate(self) -> list[Exception]:
        """Check the cluster, drop invalid namespaces, log the problems and return them."""
        errors: list[Exception] = []
        if not self.name:
            errors.append(ValidationError("Cluster", "name field cannot be empty"))
        if not is_valid_domain(self.server):
            errors.append(
                ValidationError(
                    "Cluster",
                    f"server: {self.server}, did not pass regex validation please refer "
                    f"to this regex for fixing: {DOMAIN_VALIDATION_REGEX}",
                )
            )
        if not self.username:
            errors.append(ValidationError("Cluster", "username field cannot be empty"))
        if not self.password:
            errors.append(ValidationError("Cluster", "password field cannot be empty"))

        ns_errors, self.namespaces = filter_by_validation(
            self.namespaces, "namespace: {} did not pass validation, changing availability to false"
        )
        handle_errors(ns_errors)

        if not self.namespaces:
            errors.append(ValidationError("Cluster", "namespaces list cannot be empty"))

        handle_errors(errors)
        return errors