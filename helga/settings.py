"""Settings read from the environment, and domain validation."""

from __future__ import annotations

import os
import re

LOGS_FILE_PATH_ENV = "LOGS_FILE_PATH"
CONFIG_FILE_PATH_ENV = "HELGA_CONF_FILE_PATH"
DOMAIN_VALIDATION_REGEX = r"^(https?:\/\/)?[a-zA-Z0-9][a-zA-Z0-9.-]*(:[0-9]+)?$"
AQL_ARTIFACT_PATH_POSTFIX = "/artifactory/api/search/aql"

_DOMAIN_RE = re.compile(DOMAIN_VALIDATION_REGEX)


def logs_file_path() -> str:
    """Return the log file path from the environment, or ''."""
    return os.environ.get(LOGS_FILE_PATH_ENV, "")


def config_file_path() -> str:
    """Return the configuration file path from the environment, or ''."""
    return os.environ.get(CONFIG_FILE_PATH_ENV, "")


def is_valid_domain(value: str) -> bool:
    """Tell whether ``value`` is an acceptable domain."""
    return _DOMAIN_RE.fullmatch(value) is not None