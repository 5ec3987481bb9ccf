"""
Pydantic data models for release_metadata.json.

This module captures the fixed version metadata of an h2o release together
with the Maven coordinates of the artifacts merged into the extended jar, and
derives every URL, file name and archive entry name from it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class MavenArtifact(BaseModel):
    """
    A jar published to a Maven repository.
    """

    group: str = Field(..., description="Maven group id, e.g. ai.h2o")
    name: str = Field(..., description="Maven artifact id")
    version: str = Field(..., description="Artifact version")

    class Config:
        frozen = True

    @property
    def key(self) -> str:
        """The group:name:version coordinate string."""
        return f"{self.group}:{self.name}:{self.version}"

    @property
    def file_name(self) -> str:
        return f"{self.name}-{self.version}.jar"

    def repository_path(self) -> str:
        """
        Path of the jar relative to the repository root.

        Returns:
            e.g. "org/scala-lang/scala-library/2.11.8/scala-library-2.11.8.jar"
        """
        return "/".join(
            [self.group.replace(".", "/"), self.name, self.version, self.file_name]
        )


class ReleaseMetadata(BaseModel):
    """
    Version metadata of the h2o release the assembly is built against.

    Structure of release_metadata.json:
    {
      "_description": "...",
      "h2oMajorName": "ueno",
      "h2oMajorVersion": "3.10.4",
      "h2oBuild": "8",
      "scalaBaseVersion": "2.11",
      "scalaVersion": "2.11.8",
      "releaseRepositoryUrl": "https://s3.amazonaws.com/h2o-release/h2o",
      "mavenRepositoryUrl": "https://repo1.maven.org/maven2"
    }
    """

    description: Optional[str] = Field(None, alias="_description")
    h2o_major_name: str = Field(
        ..., alias="h2oMajorName", description="Release name, or master for nightly builds"
    )
    h2o_major_version: str = Field(..., alias="h2oMajorVersion")
    h2o_build: str = Field(..., alias="h2oBuild")
    scala_base_version: str = Field(..., alias="scalaBaseVersion")
    scala_version: str = Field(..., alias="scalaVersion")
    release_repository_url: str = Field(
        "https://s3.amazonaws.com/h2o-release/h2o", alias="releaseRepositoryUrl"
    )
    maven_repository_url: str = Field(
        "https://repo1.maven.org/maven2", alias="mavenRepositoryUrl"
    )

    class Config:
        extra = "allow"
        populate_by_name = True

    @field_validator(
        "h2o_major_version",
        "h2o_build",
        "scala_base_version",
        "scala_version",
        mode="before",
    )
    @classmethod
    def _versions_as_strings(cls, value):
        # TOML and JSON overrides may spell build numbers as integers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def h2o_version(self) -> str:
        """Full h2o version, e.g. 3.10.4.8."""
        return f"{self.h2o_major_version}.{self.h2o_build}"

    @property
    def release_name(self) -> str:
        return "master" if self.h2o_major_name == "master" else f"rel-{self.h2o_major_name}"

    def _build_url(self) -> str:
        base = self.release_repository_url.rstrip("/")
        return f"{base}/{self.release_name}/{self.h2o_build}"

    # Base artifact

    def base_jar_url(self) -> str:
        return f"{self._build_url()}/Rjar/h2o.jar"

    def base_jar_name(self) -> str:
        return f"h2o-{self.h2o_version}.jar"

    # Platform variant (h2o driver for a hadoop distribution)

    def driver_archive_url(self, variant: str) -> str:
        return f"{self._build_url()}/h2o-{self.h2o_version}-{variant}.zip"

    def driver_archive_entry(self, variant: str) -> str:
        """Name of the driver jar inside the variant zip archive."""
        return f"h2o-{self.h2o_version}-{variant}/h2odriver.jar"

    def driver_jar_name(self, variant: str) -> str:
        return f"h2odriver-{self.h2o_version}-{variant}.jar"

    # Jars merged into the extended jar

    def merge_artifacts(self) -> List[MavenArtifact]:
        """
        Maven artifacts merged together with the jar being extended, in merge order.
        """
        return [
            MavenArtifact(
                group="ai.h2o",
                name=f"h2o-scala_{self.scala_base_version}",
                version=self.h2o_version,
            ),
            MavenArtifact(
                group="org.scala-lang",
                name="scala-library",
                version=self.scala_version,
            ),
        ]

    def artifact_url(self, artifact: MavenArtifact) -> str:
        return f"{self.maven_repository_url.rstrip('/')}/{artifact.repository_path()}"
