"""
Artifact downloader implementation.

Handles downloading the Maven artifacts merged into the extended jar.
"""

import logging
import pathlib
from collections import Counter
from typing import Callable, Dict

from h2o_assembly.assembly_exceptions import AssemblyException
from h2o_assembly.assembly_logger import AssemblyLogger
from h2o_assembly.assembly_utils import FileUtils
from h2o_assembly.artifact_config import (
    ArtifactState,
    DownloadPlan,
    DownloadStatus,
    MergeArtifactsManager,
)


class ArtifactDownloader:
    """
    Downloads merge artifacts.

    Executes download plans, manages progress, and updates artifact states.
    """

    def __init__(
        self,
        manager: MergeArtifactsManager,
        logger: AssemblyLogger,
        fetch: Callable[[str], bytes] = FileUtils.fetch,
    ):
        """
        Initialize the artifact downloader.

        Args:
            manager: The MergeArtifactsManager with download plans
            logger: Logger for progress and error messages
            fetch: Callable downloading a URL into bytes
        """
        self.manager = manager
        self.logger = logger
        self.fetch = fetch

    def download_all_pending(self) -> bool:
        """
        Download all pending artifacts.

        Returns:
            True if all downloads succeeded, False if any failed
        """
        pending = self.manager.get_pending_downloads()

        if not pending:
            self.logger.log("No pending downloads", logging.INFO)
            return True

        self.logger.log(
            f"Starting download of {len(pending)} artifacts",
            logging.INFO,
        )

        all_succeeded = True
        for plan in pending:
            if not self.download_artifact(plan):
                all_succeeded = False

        return all_succeeded

    def download_artifact(self, plan: DownloadPlan) -> bool:
        """
        Download a single artifact.

        Args:
            plan: The download plan to execute

        Returns:
            True if download succeeded, False otherwise
        """
        try:
            self.logger.log(
                f"Downloading {plan.artifact_key} from {plan.url}",
                logging.INFO,
            )
            plan.status = DownloadStatus.IN_PROGRESS

            FileUtils.write_file(self.fetch(plan.url), plan.destination_path)

            if not self._verify_download(plan):
                raise AssemblyException(
                    f"Download verification failed for {plan.artifact_key}"
                )

            self.manager.mark_download_completed(plan, success=True)
            self.logger.log(
                f"Successfully downloaded {plan.artifact_key} to {plan.destination_path}",
                logging.INFO,
            )
            return True

        except (AssemblyException, OSError) as e:
            error_msg = f"Failed to download {plan.artifact_key}: {str(e)}"
            self.logger.log(error_msg, logging.ERROR)
            plan.error_message = error_msg
            self.manager.mark_download_completed(plan, success=False)
            return False

    def _verify_download(self, plan: DownloadPlan) -> bool:
        """
        Verify that the downloaded jar exists and has content.
        """
        dest_path = pathlib.Path(plan.destination_path)

        if not dest_path.is_file():
            self.logger.log(
                f"Destination path does not exist: {dest_path}",
                logging.WARNING,
            )
            return False

        if dest_path.stat().st_size == 0:
            self.logger.log(
                f"Downloaded file is empty: {dest_path}",
                logging.WARNING,
            )
            return False

        return True

    def get_failed_artifacts(self) -> Dict[str, ArtifactState]:
        return {
            key: state
            for key, state in self.manager.get_artifact_states().items()
            if state.download_status == DownloadStatus.FAILED
        }

    def get_download_summary(self) -> Dict[str, int]:
        """
        Count artifacts per status: completed, failed and pending.
        """
        counts = Counter(
            state.download_status for state in self.manager.get_artifact_states().values()
        )
        return {
            "completed": counts[DownloadStatus.COMPLETED],
            "failed": counts[DownloadStatus.FAILED],
            "pending": len(self.manager.get_pending_downloads()),
        }
