"""
The extend-jar task: resolve the jar to extend, fetch the jars merged into
it and write the extended jar.
"""

import logging
import os
from typing import Callable, Optional

from h2o_assembly.assembly_config import AssemblyConfig
from h2o_assembly.assembly_exceptions import DownloadError
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.assembly_utils import FileUtils
from h2o_assembly.artifact_config import MergeArtifactsManager
from h2o_assembly.artifact_downloader import ArtifactDownloader
from h2o_assembly.artifact_models import ResolutionRequest
from h2o_assembly.artifact_resolver import ArtifactResolver
from h2o_assembly.jar_merger import JarMerger, extended_jar_base_name


class ExtendJarTask:
    """
    Builds h2o_extended.jar or h2odriver_extended.jar.

    Nothing is built when the resolver finds no jar to extend.
    """

    def __init__(
        self,
        config: AssemblyConfig,
        logger: AssemblyLogger,
        fetch: Callable[[str], bytes] = FileUtils.fetch,
    ):
        self.config = config
        self.logger = logger
        self.fetch = fetch

    def resolve(self, request: ResolutionRequest) -> Optional[str]:
        return ArtifactResolver(self.config.release, self.logger, self.fetch).resolve(
            request
        )

    def run(self, request: ResolutionRequest) -> Optional[str]:
        """
        Run the task.

        Args:
            request: Where to look for the jar to extend

        Returns:
            Path of the extended jar, or None if there was nothing to extend

        Raises:
            AssemblyException: If resolving, downloading or merging fails
        """
        original_jar = self.resolve(request)
        if original_jar is None:
            self.logger.log(
                f"{self.config.original_jar_env_var} is not set and no download was "
                f"requested, nothing to extend",
                logging.INFO,
            )
            return None

        manager = MergeArtifactsManager(self.config.release, self.config.maven_cache_dir)
        manager.create_download_plan()

        downloader = ArtifactDownloader(manager, self.logger, self.fetch)
        if not downloader.download_all_pending():
            failed = downloader.get_failed_artifacts()
            plans = manager.get_download_plans()
            first_key = next(iter(failed))
            raise DownloadError(
                "; ".join(state.error_message for state in failed.values()),
                url=plans[first_key].url,
            )

        summary = downloader.get_download_summary()
        self.logger.log(
            f"Download summary: {summary['completed']} completed, "
            f"{summary['failed']} failed, {summary['pending']} pending",
            logging.INFO,
        )

        output = os.path.join(
            self.config.libs_dir, f"{extended_jar_base_name(original_jar)}.jar"
        )
        result = JarMerger(self.logger).merge(
            manager.get_merge_inputs() + [original_jar], output
        )
        return result.output_path
