"""
Merge artifact configuration manager.

Works out which Maven artifacts have to be merged into the extended jar,
where they are cached and which of them still need to be downloaded.
"""

import enum
import pathlib
from dataclasses import dataclass
from typing import Dict, List, Optional

from h2o_assembly.artifact_models import MavenArtifact, ReleaseMetadata


class DownloadStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class DownloadPlan:
    """A jar missing from the cache: where to fetch it and where to put it."""

    artifact_key: str
    url: str
    destination_path: str
    status: DownloadStatus = DownloadStatus.PENDING
    error_message: Optional[str] = None


@dataclass
class ArtifactState:
    """Outcome for one artifact, either found in the cache or downloaded."""

    artifact_key: str
    download_status: DownloadStatus
    downloaded_path: Optional[str] = None
    error_message: Optional[str] = None

    def is_downloaded(self) -> bool:
        return self.download_status == DownloadStatus.COMPLETED


class MergeArtifactsManager:
    """
    Manages the Maven artifacts merged into the extended jar.

    Artifacts already present in the cache are marked completed straight
    away; everything else gets a pending download plan.
    """

    def __init__(self, release: ReleaseMetadata, base_download_path: str):
        """
        Initialize the manager.

        Args:
            release: Release metadata naming the artifacts and the repository
            base_download_path: Base directory for downloaded artifacts
        """
        self.release = release
        self.base_download_path = base_download_path
        self.artifacts: List[MavenArtifact] = release.merge_artifacts()
        self.download_plans: Dict[str, DownloadPlan] = {}
        self.artifact_states: Dict[str, ArtifactState] = {}

    def create_download_plan(self) -> None:
        """
        Create download plans for every artifact missing from the cache.
        """
        self.download_plans = {}
        for artifact in self.artifacts:
            destination = self._get_destination_path(artifact)
            if pathlib.Path(destination).exists():
                self.artifact_states[artifact.key] = ArtifactState(
                    artifact_key=artifact.key,
                    download_status=DownloadStatus.COMPLETED,
                    downloaded_path=destination,
                )
                continue

            self.download_plans[artifact.key] = DownloadPlan(
                artifact_key=artifact.key,
                url=self.release.artifact_url(artifact),
                destination_path=destination,
            )

    def _get_destination_path(self, artifact: MavenArtifact) -> str:
        """
        Cache location of an artifact, mirroring the repository layout.
        """
        return str(
            pathlib.Path(self.base_download_path, artifact.repository_path()).absolute()
        )

    def get_download_plans(self) -> Dict[str, DownloadPlan]:
        return self.download_plans

    def get_pending_downloads(self) -> List[DownloadPlan]:
        """
        Get all pending downloads.

        Returns:
            List of DownloadPlan objects with PENDING status
        """
        return [
            p for p in self.download_plans.values() if p.status == DownloadStatus.PENDING
        ]

    def mark_download_completed(
        self, plan: DownloadPlan, success: bool = True
    ) -> None:
        """
        Mark a download plan as completed or failed.

        Args:
            plan: The download plan to mark
            success: Whether the download was successful
        """
        plan.status = DownloadStatus.COMPLETED if success else DownloadStatus.FAILED

        self.artifact_states[plan.artifact_key] = ArtifactState(
            artifact_key=plan.artifact_key,
            download_status=plan.status,
            downloaded_path=plan.destination_path if success else None,
            error_message=None if success else (plan.error_message or "Download failed"),
        )

    def get_artifact_states(self) -> Dict[str, ArtifactState]:
        return self.artifact_states

    def get_artifact_state(self, artifact_key: str) -> Optional[ArtifactState]:
        return self.artifact_states.get(artifact_key)

    def get_merge_inputs(self) -> List[str]:
        """
        Paths of all artifacts in merge order.

        Raises:
            RuntimeError: If an artifact is not available yet
        """
        paths = []
        for artifact in self.artifacts:
            state = self.artifact_states.get(artifact.key)
            if state is None or not state.is_downloaded():
                raise RuntimeError(f"Artifact {artifact.key} has not been downloaded")
            paths.append(state.downloaded_path)
        return paths
