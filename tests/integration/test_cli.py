"""
Integration tests for the `logbundle` command line.
"""

import pytest
from click.testing import CliRunner

from logbundle_dsl.cli.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def server_logger(examples_dir):
    return str(examples_dir / "artemis" / "server-logger.yaml")


class TestValidateCommand:

    def test_valid_file(self, runner, server_logger):
        result = runner.invoke(cli, ["validate", server_logger])

        assert result.exit_code == 0
        assert "Model validation success!" in result.output

    def test_invalid_file(self, runner, write_bundle_file):
        path = write_bundle_file("interfaces:\n  - name: 1bad\n")
        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation failed" in result.output


class TestInspectCommand:

    def test_prints_summary(self, runner, server_logger):
        result = runner.invoke(cli, ["inspect", server_logger])

        assert result.exit_code == 0
        assert "=== SUMMARY ===" in result.output
        assert "=== INTERFACE ActiveMQServerLogger (projectCode=AMQ) ===" in result.output
        assert "@LogMessage id=221007 level=INFO" in result.output
        assert "ActiveMQServerSupport (no logBundle, not generated)" in result.output

    def test_flags_combined_annotations(self, runner, examples_dir):
        path = str(examples_dir / "invalid" / "combined-annotations.yaml")
        result = runner.invoke(cli, ["inspect", path])

        assert result.exit_code == 0
        assert "WARNING: more than one generation annotation" in result.output


class TestGenerateCommand:

    def test_generates_sources(self, runner, server_logger, temp_output_dir):
        result = runner.invoke(cli, ["generate", server_logger, "--out", str(temp_output_dir), "-q"])

        assert result.exit_code == 0
        assert "2 log bundle(s) emitted" in result.output
        assert sorted(p.name for p in temp_output_dir.rglob("*.java")) == [
            "ActiveMQMessageBundle_impl.java",
            "ActiveMQServerLogger_impl.java",
        ]

    def test_generation_failure(self, runner, examples_dir, temp_output_dir):
        path = str(examples_dir / "invalid" / "id-collision.yaml")
        result = runner.invoke(cli, ["generate", path, "--out", str(temp_output_dir), "-q"])

        assert result.exit_code == 1
        assert "CollidingLogger" in result.output
        assert "Generate failed for 1 interface(s)" in result.output
        assert list(temp_output_dir.rglob("*.java")) == []

    def test_keep_going(self, runner, write_bundle_file, temp_output_dir):
        path = write_bundle_file("""
package: org.example
interfaces:
  - name: Broken
    logBundle: {projectCode: EX}
    methods:
      - {name: a, logMessage: {id: 1, value: a, level: INFO}}
      - {name: b, logMessage: {id: 1, value: b, level: INFO}}
  - name: Fine
    logBundle: {projectCode: EX}
    methods:
      - {name: a, logMessage: {id: 1, value: a, level: INFO}}
""")
        out_dir = temp_output_dir / "out"
        result = runner.invoke(cli, ["generate", str(path), "--out", str(out_dir), "--keep-going", "-q"])

        assert result.exit_code == 1
        assert [p.name for p in out_dir.rglob("*.java")] == ["Fine_impl.java"]

    def test_invalid_model(self, runner, write_bundle_file, temp_output_dir):
        path = write_bundle_file("interfaces: [")
        result = runner.invoke(cli, ["generate", str(path), "--out", str(temp_output_dir)])

        assert result.exit_code == 1
        assert "Generate failed" in result.output

    def test_verbose_trace(self, runner, server_logger, temp_output_dir):
        result = runner.invoke(cli, ["generate", server_logger, "--out", str(temp_output_dir), "-v"])

        assert result.exit_code == 0
        assert "done processing" in result.output
