"""
Merge artifact downloader.

This package handles:
1. Downloading artifacts from the Maven repository
2. Verifying downloads
3. Updating artifact states
"""

from .downloader import ArtifactDownloader

__all__ = ["ArtifactDownloader"]
