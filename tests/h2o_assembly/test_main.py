"""
Tests for the command line entry point.
"""

import os
import pathlib

import pytest

from h2o_assembly.__main__ import build_parser, main


class TestParser:
    @pytest.mark.parametrize(
        "argv, expected",
        [
            ([], None),
            (["--download-and-extend"], ""),
            (["--download-and-extend", "cdh5.4"], "cdh5.4"),
            (["--download-and-extend=hdp2.4"], "hdp2.4"),
        ],
    )
    def test_download_flag(self, argv, expected):
        assert build_parser().parse_args(argv).download_and_extend == expected


class TestMain:
    def test_resolve_only_uses_environment(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("H2O_ORIGINAL_JAR", "/opt/h2o/h2o.jar")

        code = main(["--project-dir", str(tmp_path), "--resolve-only"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "/opt/h2o/h2o.jar"

    def test_nothing_to_do(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("H2O_ORIGINAL_JAR", raising=False)

        code = main(["--project-dir", str(tmp_path)])

        assert code == 0
        assert capsys.readouterr().out == ""
        assert not (tmp_path / "build").exists()

    def test_extends_cached_jar(self, tmp_path, monkeypatch, capsys, zip_bytes):
        """With every input already cached the run is fully offline."""
        monkeypatch.delenv("H2O_ORIGINAL_JAR", raising=False)
        build = tmp_path / "out"
        private = build / "private"
        maven = private / "maven"
        for rel, content in [
            ("ai/h2o/h2o-scala_2.11/3.10.4.8/h2o-scala_2.11-3.10.4.8.jar", b"h2o-scala"),
            ("org/scala-lang/scala-library/2.11.8/scala-library-2.11.8.jar", b"scala"),
        ]:
            jar = maven / rel
            jar.parent.mkdir(parents=True)
            jar.write_bytes(zip_bytes([(f"{content.decode()}.class", content)]))
        (private / "h2odriver-3.10.4.8-cdh5.4.jar").write_bytes(
            zip_bytes([("driver.class", b"driver")])
        )

        code = main(
            [
                "--project-dir",
                str(tmp_path),
                "--build-dir",
                str(build),
                "--download-and-extend",
                "cdh5.4",
            ]
        )

        assert code == 0
        output = pathlib.Path(capsys.readouterr().out.strip())
        assert output == (build / "libs" / "h2odriver_extended.jar").absolute()
        assert output.is_file()

    def test_config_error_exit_code(self, tmp_path):
        code = main(["--project-dir", str(tmp_path), "--config", os.path.join(str(tmp_path), "missing.toml")])

        assert code == 1

    def test_malformed_config_exit_code(self, tmp_path):
        (tmp_path / "assembly.toml").write_text("[assembly]\nbuild_dir = 5\n")

        assert main(["--project-dir", str(tmp_path)]) == 1

    def test_relative_build_dir_follows_project_dir(self, tmp_path, monkeypatch, capsys):
        project = tmp_path / "project"
        elsewhere = tmp_path / "elsewhere"
        project.mkdir()
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        monkeypatch.delenv("H2O_ORIGINAL_JAR", raising=False)
        private = project / "out" / "private"
        private.mkdir(parents=True)
        (private / "h2o-3.10.4.8.jar").write_bytes(b"cached")

        code = main(
            [
                "--project-dir",
                str(project),
                "--build-dir",
                "out",
                "--download-and-extend",
                "--resolve-only",
            ]
        )

        assert code == 0
        assert capsys.readouterr().out.strip() == str((private / "h2o-3.10.4.8.jar").absolute())
        assert not (elsewhere / "out").exists()
