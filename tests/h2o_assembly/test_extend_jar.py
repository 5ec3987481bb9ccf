"""
End-to-end tests for the extend-jar task with a fake network.
"""

import os
import zipfile

import pytest

from h2o_assembly.assembly_config import AssemblyConfig
from h2o_assembly.assembly_exceptions import ArchiveEntryNotFoundError, DownloadError
from h2o_assembly.artifact_models import ResolutionRequest
from h2o_assembly.extend_jar import ExtendJarTask

MAVEN = "https://repo1.maven.org/maven2"
SCALA_URL = f"{MAVEN}/org/scala-lang/scala-library/2.11.8/scala-library-2.11.8.jar"
H2O_SCALA_URL = f"{MAVEN}/ai/h2o/h2o-scala_2.11/3.10.4.8/h2o-scala_2.11-3.10.4.8.jar"
RELEASE = "https://s3.amazonaws.com/h2o-release/h2o/rel-ueno/8"


@pytest.fixture
def config(release, tmp_path):
    return AssemblyConfig(release=release, build_dir=str(tmp_path / "build"))


@pytest.fixture
def maven_responses(zip_bytes):
    return {
        H2O_SCALA_URL: zip_bytes([("water/H2OContext.class", b"h2o-scala")]),
        SCALA_URL: zip_bytes([("scala/Predef.class", b"scala")]),
    }


def request_for(config, variant=None, path=None):
    return ResolutionRequest(
        explicit_local_path=path,
        variant_selector=variant,
        cache_directory=config.cache_dir,
    )


class TestExtendJarTask:
    def test_nothing_to_extend(self, config, logger, counting_fetch):
        fetch = counting_fetch()

        assert ExtendJarTask(config, logger, fetch).run(request_for(config)) is None
        assert fetch.calls == []
        assert not os.path.exists(config.libs_dir)

    def test_extends_driver_jar(self, config, logger, counting_fetch, zip_bytes, maven_responses):
        driver = zip_bytes([("water/hadoop/h2odriver.class", b"driver")])
        archive = zip_bytes([("h2o-3.10.4.8-cdh5.4/h2odriver.jar", driver)])
        fetch = counting_fetch(
            {f"{RELEASE}/h2o-3.10.4.8-cdh5.4.zip": archive, **maven_responses}
        )

        output = ExtendJarTask(config, logger, fetch).run(request_for(config, "cdh5.4"))

        assert output == os.path.abspath(
            os.path.join(config.libs_dir, "h2odriver_extended.jar")
        )
        with zipfile.ZipFile(output) as zf:
            assert zf.read("water/hadoop/h2odriver.class") == b"driver"
            assert zf.read("water/H2OContext.class") == b"h2o-scala"
            assert zf.read("scala/Predef.class") == b"scala"
        assert len(fetch.calls) == 3

    def test_extends_local_jar_with_cached_artifacts(
        self, config, logger, counting_fetch, zip_bytes, maven_responses, tmp_path
    ):
        """A second run reuses cached merge artifacts without touching the network."""
        original = tmp_path / "h2o.jar"
        original.write_bytes(zip_bytes([("hex/Model.class", b"model")]))

        ExtendJarTask(config, logger, counting_fetch(maven_responses)).run(
            request_for(config, path=str(original))
        )
        fetch = counting_fetch()
        output = ExtendJarTask(config, logger, fetch).run(
            request_for(config, path=str(original))
        )

        assert os.path.basename(output) == "h2o_extended.jar"
        assert fetch.calls == []

    def test_merge_artifact_failure_is_fatal(self, config, logger, counting_fetch, zip_bytes, tmp_path):
        original = tmp_path / "h2o.jar"
        original.write_bytes(zip_bytes([("hex/Model.class", b"model")]))

        with pytest.raises(DownloadError) as exc_info:
            ExtendJarTask(config, logger, counting_fetch()).run(
                request_for(config, path=str(original))
            )

        assert exc_info.value.url == H2O_SCALA_URL
        assert not os.path.exists(config.libs_dir)

    def test_unsupported_hadoop_version(self, config, logger, counting_fetch, zip_bytes):
        archive = zip_bytes([("h2o-3.10.4.8-abc/README", b"")])
        fetch = counting_fetch({f"{RELEASE}/h2o-3.10.4.8-abc.zip": archive})

        with pytest.raises(ArchiveEntryNotFoundError):
            ExtendJarTask(config, logger, fetch).run(request_for(config, "abc"))

        assert len(fetch.calls) == 1
