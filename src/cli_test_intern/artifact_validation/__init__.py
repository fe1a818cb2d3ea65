"""Artifact validation exports."""

from .build_artifacts import (
    MISSING_TESTS_MESSAGE,
    ArtifactCategory,
    MissingBuildArtifactError,
    required_artifact_categories,
    validate_build_artifacts,
)

__all__ = [
    "MISSING_TESTS_MESSAGE",
    "ArtifactCategory",
    "MissingBuildArtifactError",
    "required_artifact_categories",
    "validate_build_artifacts",
]
