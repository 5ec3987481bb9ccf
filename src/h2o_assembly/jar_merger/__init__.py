"""
Jar merging for the extended h2o jar.
"""

from .merger import JarMerger, MergeResult, extended_jar_base_name

__all__ = ["JarMerger", "MergeResult", "extended_jar_base_name"]
