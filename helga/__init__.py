"""Configuration loading and validation, and Helm package selection, for Artifactory-backed clusters."""

__version__ = "0.1.0"