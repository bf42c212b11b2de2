"""Error types and the helpers that report them to the log."""

from __future__ import annotations

from collections.abc import Iterable


class HelgaError(Exception):
    """Base class for errors raised by this package."""


class ArtifactoryAPIError(HelgaError):
    """A request to the Artifactory API failed."""

    def __init__(self, cause: object, repo: str = "", path: str = "") -> None:
        self.cause = cause
        self.repo = repo
        self.path = path
        super().__init__(
            f"general Artifactory API error, repo name:{repo}, artifact path:{path}, error: {cause}"
        )


class PackagesDoNotMatchError(HelgaError):
    """Two packages with different names were compared."""


class ConfigLoadingError(HelgaError):
    """The configuration file could not be read or parsed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(
            "error loading configuration for helga please check the configuration again "
            f"derived from error: {cause}"
        )


class ConfigNotValidError(HelgaError):
    """The configuration was read but is not valid."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(
            "error validating configuration for helga please check the configuration again "
            f"derived from error: {cause}"
        )


class ValidationError(HelgaError):
    """A model failed one of its validation checks."""

    def __init__(self, struct_name: str, cause: object) -> None:
        self.struct_name = struct_name
        self.cause = cause
        super().__init__(
            f"error, validation error for struct: {struct_name} derived from: {cause}"
        )


def handle_error(err: BaseException | None) -> None:
    """Log ``err`` at error level, if there is one."""
    if err is not None:
        from .log import get_logger

        get_logger().error(str(err))


def handle_errors(errs: Iterable[BaseException] | None) -> None:
    """Log every error in ``errs``."""
    for err in errs or ():
        handle_error(err)