"""
This file contains the thin I/O helpers used by h2o-assembly: fetching a URL,
pulling a single entry out of a zip archive and writing files into place.
"""

import io
import os
import pathlib
import zipfile
from typing import Optional, Union

import requests

from h2o_assembly.assembly_exceptions import ArchiveEntryNotFoundError, DownloadError


class FileUtils:
    """
    Utility functions for network and file operations
    """

    @staticmethod
    def fetch(url: str, timeout: Optional[float] = None) -> bytes:
        """
        Downloads the given url and returns the response body.

        Raises DownloadError on any transport failure or non-success status.
        """
        try:
            response = requests.get(url, timeout=timeout)
        except requests.exceptions.RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}", url=url) from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise DownloadError(
                f"Failed to download {url}: HTTP status {response.status_code}",
                url=url,
                status_code=response.status_code,
            ) from e

        return response.content

    @staticmethod
    def extract_entry(archive: bytes, entry_name: str) -> bytes:
        """
        Returns the decompressed bytes of the entry named exactly entry_name.

        Entries are scanned in archive order and the first match is used.
        """
        try:
            with zipfile.ZipFile(io.BytesIO(archive)) as zf:
                for info in zf.infolist():
                    if info.filename == entry_name:
                        return zf.read(info)
        except zipfile.BadZipFile as e:
            raise ArchiveEntryNotFoundError(
                f"Cannot look up {entry_name}: data is not a zip archive ({e})",
                entry_name=entry_name,
            ) from e

        raise ArchiveEntryNotFoundError(
            f"Entry {entry_name} not found in archive", entry_name=entry_name
        )

    @staticmethod
    def write_file(data: bytes, path: Union[str, pathlib.Path]) -> str:
        """
        Writes data to path and returns its absolute path.

        The bytes land in a sibling .part file first and are moved into place,
        so the target either does not exist or is complete.
        """
        target = pathlib.Path(path).absolute()
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp = target.with_name(target.name + ".part")
        try:
            with open(tmp, "wb") as f:
                f.write(data)
            os.replace(tmp, target)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        return str(target)
