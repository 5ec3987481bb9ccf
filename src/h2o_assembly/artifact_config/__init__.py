"""
Merge artifact configuration management.

This package handles:
1. Deriving the Maven artifacts merged into the extended jar
2. Skipping artifacts already present in the download cache
3. Tracking download plans and per-artifact state
"""

from .config_manager import (
    ArtifactState,
    DownloadPlan,
    DownloadStatus,
    MergeArtifactsManager,
)

__all__ = ["ArtifactState", "DownloadPlan", "DownloadStatus", "MergeArtifactsManager"]
