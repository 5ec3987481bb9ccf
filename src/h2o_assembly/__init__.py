"""
h2o-assembly builds the extended h2o jar: it locates or downloads the h2o jar
(or the h2o driver jar for a hadoop distribution) and merges it with the
h2o-scala classes and the scala library.
"""

from h2o_assembly.assembly_config import AssemblyConfig
from h2o_assembly.assembly_exceptions import (
    ArchiveEntryNotFoundError,
    AssemblyConfigError,
    AssemblyException,
    DownloadError,
)
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.artifact_models import ReleaseMetadata, ResolutionRequest
from h2o_assembly.artifact_resolver import ArtifactResolver
from h2o_assembly.extend_jar import ExtendJarTask

__all__ = [
    "AssemblyConfig",
    "AssemblyLogger",
    "ArtifactResolver",
    "ExtendJarTask",
    "ReleaseMetadata",
    "ResolutionRequest",
    "AssemblyException",
    "AssemblyConfigError",
    "DownloadError",
    "ArchiveEntryNotFoundError",
]
