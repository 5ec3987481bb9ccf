"""
Artifact resolver.

This package decides which jar is extended:
1. The base h2o jar, downloaded on request
2. The h2o driver jar for a hadoop distribution, extracted from its release zip
3. A jar the user points to through the environment
"""

from .resolver import ArtifactResolver

__all__ = ["ArtifactResolver"]
