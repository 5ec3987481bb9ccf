"""
The request handed to the artifact resolver.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, Field

ORIGINAL_JAR_ENV_VAR = "H2O_ORIGINAL_JAR"


class ResolutionRequest(BaseModel):
    """
    Everything the resolver needs to locate the jar to extend.

    variant_selector is None when no download was requested, "" for the base
    h2o jar and a hadoop distribution name (e.g. "cdh5.4") for the driver jar.
    A present variant_selector always wins over explicit_local_path.
    """

    explicit_local_path: Optional[str] = Field(None, description="Path from the environment")
    variant_selector: Optional[str] = Field(None, description="Download flag value")
    cache_directory: str = Field(..., description="Directory downloads are stored in")

    class Config:
        frozen = True

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str],
        variant_selector: Optional[str],
        cache_directory: str,
        env_var: str = ORIGINAL_JAR_ENV_VAR,
    ) -> "ResolutionRequest":
        """
        Build a request from a snapshot of the environment.

        Args:
            environ: Environment mapping, usually os.environ
            variant_selector: Value of the download flag, None if not given
            cache_directory: Directory downloads are stored in
            env_var: Name of the variable holding an explicit jar path

        Returns:
            ResolutionRequest
        """
        return cls(
            explicit_local_path=environ.get(env_var) or None,
            variant_selector=variant_selector,
            cache_directory=cache_directory,
        )
