"""Artifact source settings and Helm package lookup through AQL."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from .errors import ArtifactoryAPIError, ValidationError, handle_error, handle_errors
from .log import get_logger
from .packages import HelmPackage
from .repo import Repo
from .settings import AQL_ARTIFACT_PATH_POSTFIX, DOMAIN_VALIDATION_REGEX, is_valid_domain
from .validation import filter_by_validation

_AQL_TEMPLATE = """
items.find({
\t"repo": {"$eq": "%s"},
\t"path": {"$eq": "%s"},
\t"name": {"$match": "*.tgz"}
}).include("repo", "path", "name", "created", "modified")
"""


def build_aql_query(repo_name: str, path: str) -> str:
    """Return the AQL query that lists the chart archives in one repo path."""
    return _AQL_TEMPLATE % (repo_name, path)


@dataclass
class Artifact:
    """Where to find Helm charts: the Artifactory domain, credentials and repos."""

    decide_by_version: bool | None = None
    domain: str = ""
    username: str = ""
    password: str = ""
    repos: list[Repo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Artifact:
        """Build an artifact from a parsed YAML mapping."""
        data = data or {}
        decide = data.get("decideByVersion")
        return cls(
            decide_by_version=None if decide is None else bool(decide),
            domain=str(data.get("domain") or ""),
            username=str(data.get("username") or ""),
            password=str(data.get("password") or ""),
            repos=[Repo.from_dict(r) for r in data.get("repos") or []],
        )

    def validate(self) -> list[Exception]:
        """Check the artifact, drop invalid repos, log the problems and return them."""
        errors: list[Exception] = []
        if not is_valid_domain(self.domain):
            errors.append(
                ValidationError(
                    "Artifact",
                    f"domain: {self.domain}, did not pass regex validation please refer "
                    f"to this regex for fixing: {DOMAIN_VALIDATION_REGEX}",
                )
            )
        if not self.username:
            errors.append(ValidationError("Artifact", "username field cannot be empty"))
        if not self.password:
            errors.append(ValidationError("Artifact", "password field cannot be empty"))

        repo_errors, self.repos = filter_by_validation(
            self.repos, "repo: {}, did not pass validation, changing availability to false"
        )
        handle_errors(repo_errors)

        if not self.repos:
            errors.append(ValidationError("Artifact", "repos list cannot be empty"))

        handle_errors(errors)
        return errors

    def sync(self, src: Artifact) -> None:
        """Fill in what this artifact leaves unset from ``src`` and merge its repos."""
        if src.domain and not self.domain:
            self.domain = src.domain
        if src.username and not self.domain:
            self.username = src.username
        if src.password and not self.domain:
            self.password = src.password
        if src.decide_by_version is not None and self.decide_by_version is None:
            self.decide_by_version = src.decide_by_version

        seen = {repo.name: repo for repo in self.repos}
        for repo in src.repos:
            existing = seen.get(repo.name)
            if existing is not None:
                existing.sync(repo)
            else:
                self.repos.append(Repo(name=repo.name, paths=list(repo.paths)))

    def fetch_helm_packages(self, session: requests.Session | None = None) -> list[HelmPackage]:
        """Query every repo path for chart archives and return all that were found.

        Raises ArtifactoryAPIError when a request cannot be completed.
        """
        logger = get_logger()
        http = session if session is not None else requests.Session()
        credentials = base64.b64encode(f"{self.username}:{self.password}".encode()).decode()
        headers = {"Content-Type": "text/plain", "Authorization": "Basic " + credentials}
        url = self.domain + AQL_ARTIFACT_PATH_POSTFIX

        packages: list[HelmPackage] = []
        for repo in self.repos:
            for path in repo.paths:
                logger.info(f"initiating req - for repo: {repo.name}, path: {path}")
                try:
                    response = http.post(
                        url, data=build_aql_query(repo.name, path).encode(), headers=headers
                    )
                except requests.RequestException as exc:
                    error = ArtifactoryAPIError(exc, repo=repo.name, path=path)
                    handle_error(error)
                    raise error from exc

                log_msg = (
                    f"req - on repo: {repo.name}, path: {path}, "
                    f"gave status code: {response.status_code}"
                )
                if response.status_code != 200:
                    logger.warning(log_msg)
                    continue

                logger.info(log_msg)
                results = _results_of(response)
                logger.info(
                    f"found {len(results)} pacakges for repo: {repo.name} on path: {path}"
                )
                packages.extend(results)
        return packages


def _results_of(response: requests.Response) -> list[HelmPackage]:
    try:
        body = response.json()
    except ValueError:
        return []
    if not isinstance(body, Mapping):
        return []
    results = body.get("results") or []
    if not isinstance(results, list):
        return []
    return [HelmPackage.from_dict(item) for item in results if isinstance(item, Mapping)]