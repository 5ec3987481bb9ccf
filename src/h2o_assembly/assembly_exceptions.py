"""
This module contains the exceptions raised by the h2o-assembly framework.
"""

from typing import Optional


class AssemblyException(Exception):
    """
    Exceptions raised by the h2o-assembly framework.
    """

    def __init__(self, message: str):
        """
        Initializes the exception with the given message.
        """
        super().__init__(message)


class DownloadError(AssemblyException):
    """
    A remote fetch did not complete: transport failure or non-success status.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
        variant: Optional[str] = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.variant = variant


class ArchiveEntryNotFoundError(AssemblyException):
    """
    A fetched zip archive was exhausted without the expected entry.
    """

    def __init__(
        self,
        message: str,
        entry_name: str,
        url: Optional[str] = None,
        variant: Optional[str] = None,
    ):
        super().__init__(message)
        self.entry_name = entry_name
        self.url = url
        self.variant = variant


class AssemblyConfigError(AssemblyException):
    """
    The release metadata or assembly.toml could not be loaded.
    """
