"""The configuration file: global defaults and the clusters to manage."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from .artifact import Artifact
from .cluster import Cluster
from .errors import ConfigLoadingError, ConfigNotValidError, ValidationError, handle_errors
from .settings import DOMAIN_VALIDATION_REGEX, config_file_path, is_valid_domain
from .validation import filter_by_validation


@dataclass
class Global:
    """Defaults shared by every cluster."""

    cluster: Cluster = field(default_factory=Cluster)
    artifact: Artifact = field(default_factory=Artifact)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Global:
        """Build the global section from a parsed YAML mapping."""
        data = data or {}
        return cls(
            cluster=Cluster.from_dict(data.get("cluster")),
            artifact=Artifact.from_dict(data.get("artifact")),
        )

    def validate(self) -> list[Exception]:
        """Check the global section, log the problems and return them."""
        errors: list[Exception] = []
        if not is_valid_domain(self.artifact.domain):
            errors.append(
                ValidationError(
                    "Global",
                    f"domain: {self.artifact.domain}, did not pass regex validation please "
                    f"refer to this regex for fixing: {DOMAIN_VALIDATION_REGEX}",
                )
            )

        if self.artifact.repos:
            repo_errors, self.artifact.repos = filter_by_validation(
                self.artifact.repos,
                "repo: {}, did not pass validation, changing availability to false",
            )
            handle_errors(repo_errors)

        if not self.cluster.name:
            errors.append(ValidationError("Global", "name field cannot be empty"))
        if not is_valid_domain(self.cluster.server):
            errors.append(
                ValidationError(
                    "Global",
                    f"server: {self.cluster.server}, did not pass regex validation please "
                    f"refer to this regex for fixing: {DOMAIN_VALIDATION_REGEX}",
                )
            )
        if not self.cluster.username:
            errors.append(ValidationError("Global", "username field cannot be empty"))
        if not self.cluster.password:
            errors.append(ValidationError("Global", "password field cannot be empty"))

        handle_errors(errors)
        return errors


@dataclass
class Config:
    """The whole configuration."""

    global_: Global = field(default_factory=Global)
    clusters: list[Cluster] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Config:
        """Build the configuration from a parsed YAML mapping."""
        data = data or {}
        return cls(
            global_=Global.from_dict(data.get("global")),
            clusters=[Cluster.from_dict(c) for c in data.get("clusters") or []],
        )

    def validate(self) -> list[Exception]:
        """Check everything, drop invalid clusters, log the problems and return them."""
        errors: list[Exception] = []
        if self.global_.validate():
            errors.append(
                ValidationError("Config", "global did not pass validation refer to logs and fix")
            )

        cluster_errors, self.clusters = filter_by_validation(
            self.clusters, "namespace: {} did not pass validation, changing availability to false"
        )
        handle_errors(cluster_errors)

        if not self.clusters:
            errors.append(ValidationError("Config", "clusters list cannot be empty"))

        handle_errors(errors)
        return errors

    def sync_with_global(self) -> None:
        """Fill every namespace's artifact with the global artifact defaults."""
        for cluster in self.clusters:
            for namespace in cluster.namespaces:
                namespace.artifact.sync(self.global_.artifact)


def load_config(path: str | None = None) -> Config:
    """Read, complete and validate the configuration file.

    ``path`` defaults to the path named by the environment. Raises
    ConfigLoadingError when the file cannot be read or parsed and
    ConfigNotValidError when it does not pass validation.
    """
    if path is None:
        path = config_file_path()
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        if data is not None and not isinstance(data, Mapping):
            raise TypeError("configuration root must be a mapping")
        config = Config.from_dict(data)
    except (OSError, yaml.YAMLError, TypeError, AttributeError, ValueError) as exc:
        error = ConfigLoadingError(exc)
        handle_errors([error])
        raise error from exc

    config.sync_with_global()
    errors = config.validate()
    if errors:
        raise ConfigNotValidError("; ".join(str(e) for e in errors))
    return config