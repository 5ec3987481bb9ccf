"""
Artifact models for h2o-assembly.

This package provides Pydantic data models for the release metadata the
assembly is built against and for the request handed to the artifact resolver.
"""

from .release_metadata import (
    ReleaseMetadata,
    MavenArtifact,
)
from .resolution_request import (
    ResolutionRequest,
    ORIGINAL_JAR_ENV_VAR,
)

__all__ = [
    # Release metadata
    "ReleaseMetadata",
    "MavenArtifact",
    # Resolution
    "ResolutionRequest",
    "ORIGINAL_JAR_ENV_VAR",
]
