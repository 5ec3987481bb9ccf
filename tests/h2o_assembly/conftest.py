"""
Shared fixtures for h2o-assembly tests.
"""

import io
import zipfile
from typing import Dict, List, Sequence, Tuple

import pytest

from h2o_assembly.assembly_exceptions import DownloadError
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.artifact_models import ReleaseMetadata


def make_zip(entries: Sequence[Tuple[str, bytes]]) -> bytes:
    """Build an in-memory zip archive with the given entries, in order."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buffer.getvalue()


class CountingFetch:
    """
    Stand-in for FileUtils.fetch serving canned responses and recording calls.
    """

    def __init__(self, responses: Dict[str, bytes] = None):
        self.responses = dict(responses or {})
        self.calls: List[str] = []

    def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        if url not in self.responses:
            raise DownloadError(f"Failed to download {url}: HTTP status 404", url=url, status_code=404)
        return self.responses[url]


@pytest.fixture
def release():
    return ReleaseMetadata(
        h2o_major_name="ueno",
        h2o_major_version="3.10.4",
        h2o_build="8",
        scala_base_version="2.11",
        scala_version="2.11.8",
    )


@pytest.fixture
def logger():
    return AssemblyLogger()


@pytest.fixture
def zip_bytes():
    return make_zip


@pytest.fixture
def counting_fetch():
    return CountingFetch
