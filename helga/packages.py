"""Helm packages found in Artifactory and choosing the newer of two."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .errors import HelgaError, PackagesDoNotMatchError

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_NUM = r"0|[1-9][0-9]*"
_SEMVER_RE = re.compile(
    rf"v({_NUM})(?:\.({_NUM})(?:\.({_NUM})(?:-({_IDENT}))?(?:\+{_IDENT})?)?)?"
)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class HelmPackage:
    """A chart archive reported by an AQL search."""

    repo: str = ""
    path: str = ""
    name: str = ""
    created: str = ""
    modified: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> HelmPackage:
        """Build a package from one AQL result entry."""
        data = data or {}
        return cls(**{key: str(data.get(key) or "") for key in
                      ("repo", "path", "name", "created", "modified")})

    def name_and_version(self) -> tuple[str, str]:
        """Split the name at its last '-'; raise HelgaError if it is empty."""
        if not self.name:
            raise HelgaError(f"package: {self} name is invalid please check again")
        chart, _, version = self.name.rpartition("-")
        return chart, version


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _parse_semver(version: str) -> tuple[tuple[int, int, int], str] | None:
    match = _SEMVER_RE.fullmatch(version)
    if match is None:
        return None
    major, minor, patch, pre = match.groups()
    pre = pre or ""
    if any(p.isdigit() and len(p) > 1 and p[0] == "0" for p in pre.split(".")):
        return None
    return (int(major), int(minor or 0), int(patch or 0)), pre


def _compare_prerelease(a: str, b: str) -> int:
    if a == b or not (a and b):
        return _cmp(not a, not b)
    parts_a, parts_b = a.split("."), b.split(".")
    for x, y in zip(parts_a, parts_b):
        if x == y:
            continue
        if x.isdigit() and y.isdigit():
            return _cmp(int(x), int(y))
        if x.isdigit() != y.isdigit():
            return -1 if x.isdigit() else 1
        return _cmp(x, y)
    return _cmp(len(parts_a), len(parts_b))


def compare_semver(a: str, b: str) -> int:
    """Compare two 'v'-prefixed semantic versions, returning -1, 0 or 1.

    Invalid versions are equal to each other and older than valid ones.
    """
    pa, pb = _parse_semver(a), _parse_semver(b)
    if pa is None or pb is None:
        return _cmp(pa is not None, pb is not None)
    return _cmp(pa[0], pb[0]) or _compare_prerelease(pa[1], pb[1])


def _parse_rfc3339(value: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return _ZERO_TIME
    return parsed if parsed.tzinfo is not None else _ZERO_TIME


def _name_and_version_or_empty(pkg: HelmPackage) -> tuple[str, str]:
    try:
        return pkg.name_and_version()
    except HelgaError:
        return "", ""


def determine_newer_package(
    pkg_a: HelmPackage, pkg_b: HelmPackage, decide_by_version: bool
) -> HelmPackage:
    """Return the newer of two packages of the same chart.

    A higher version makes ``pkg_a`` win; unless ``decide_by_version`` is set,
    a later modification time does too. Raises PackagesDoNotMatchError when
    the chart names differ.
    """
    name_a, version_a = _name_and_version_or_empty(pkg_a)
    name_b, version_b = _name_and_version_or_empty(pkg_b)
    if name_a != name_b:
        raise PackagesDoNotMatchError(
            f"pkg's names: {name_a} and {name_b} do not match please determine which newer"
        )
    if compare_semver("v" + version_a, "v" + version_b) > 0:
        return pkg_a
    if not decide_by_version and _parse_rfc3339(pkg_a.modified) > _parse_rfc3339(pkg_b.modified):
        return pkg_a
    return pkg_b