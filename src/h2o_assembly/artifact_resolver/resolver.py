"""
Artifact resolver implementation.

Decides where the jar to extend comes from: an explicit local path, a
download of the base h2o jar, or the h2o driver jar for a hadoop distribution
extracted from its release zip.
"""

import logging
import pathlib
from typing import Callable, Optional

from h2o_assembly.assembly_exceptions import ArchiveEntryNotFoundError, DownloadError
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.assembly_utils import FileUtils
from h2o_assembly.artifact_models import ReleaseMetadata, ResolutionRequest


class ArtifactResolver:
    """
    Locates or downloads the jar to extend.

    The download flag has priority over the environment variable: if a
    variant selector is present the explicit local path is ignored.
    """

    def __init__(
        self,
        release: ReleaseMetadata,
        logger: AssemblyLogger,
        fetch: Callable[[str], bytes] = FileUtils.fetch,
    ):
        """
        Initialize the resolver.

        Args:
            release: Version metadata used to build URLs and file names
            logger: Logger for progress messages
            fetch: Callable downloading a URL into bytes
        """
        self.release = release
        self.logger = logger
        self.fetch = fetch

    def resolve(self, request: ResolutionRequest) -> Optional[str]:
        """
        Resolve the jar to extend.

        Args:
            request: The resolution request

        Returns:
            Path to the jar, or None when there is nothing to extend

        Raises:
            DownloadError: A fetch did not complete
            ArchiveEntryNotFoundError: The driver jar is missing from the fetched zip
        """
        if request.variant_selector is not None:
            cache_dir = pathlib.Path(request.cache_directory)
            cache_dir.mkdir(parents=True, exist_ok=True)
            if request.variant_selector == "":
                return self._resolve_base_jar(cache_dir)
            return self._resolve_driver_jar(cache_dir, request.variant_selector)

        if request.explicit_local_path:
            self.logger.log(
                f"Using jar from environment: {request.explicit_local_path}",
                logging.INFO,
            )
            return request.explicit_local_path

        return None

    def _resolve_base_jar(self, cache_dir: pathlib.Path) -> str:
        target = (cache_dir / self.release.base_jar_name()).absolute()
        if target.exists():
            self.logger.log(f"Using cached h2o jar {target}", logging.INFO)
            return str(target)

        url = self.release.base_jar_url()
        self.logger.log(f"Downloading h2o jar from: {url}", logging.INFO)
        return FileUtils.write_file(self.fetch(url), target)

    def _resolve_driver_jar(self, cache_dir: pathlib.Path, variant: str) -> str:
        target = (cache_dir / self.release.driver_jar_name(variant)).absolute()
        if target.exists():
            self.logger.log(f"Using cached h2o driver jar {target}", logging.INFO)
            return str(target)

        url = self.release.driver_archive_url(variant)
        entry_name = self.release.driver_archive_entry(variant)
        self.logger.log(
            f"Downloading h2o driver for hadoop version: {variant} from: {url}",
            logging.INFO,
        )
        try:
            archive = self.fetch(url)
            return FileUtils.write_file(
                FileUtils.extract_entry(archive, entry_name), target
            )
        except ArchiveEntryNotFoundError as e:
            raise ArchiveEntryNotFoundError(
                self._driver_problem(url, variant, e),
                entry_name=entry_name,
                url=url,
                variant=variant,
            ) from e
        except DownloadError as e:
            raise DownloadError(
                self._driver_problem(url, variant, e),
                url=url,
                status_code=e.status_code,
                variant=variant,
            ) from e

    @staticmethod
    def _driver_problem(url: str, variant: str, cause: Exception) -> str:
        return (
            f"Problem during downloading h2o driver from url: {url} ({cause}). "
            f"The hadoop version you have specified is {variant}. The most probable "
            f"cause is an invalid hadoop version, please consult the h2o "
            f"documentation for available hadoop versions."
        )
