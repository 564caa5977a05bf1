import json
from pathlib import Path

import pytest

from wp_versioning.config import Config
from wp_versioning.orchestrator import RunState, Versioning, main, run_versioning

PLUGIN_CONTENT = "<?php\n/**\n* Version: 1.0.0\n* Author: Jane\n*/\n// code"


class RecordingReporter:
    def __init__(self):
        self.outputs = {}
        self.failures = []

    def set_output(self, name, value):
        self.outputs[name] = value

    def set_failed(self, message):
        self.failures.append(message)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Run inside an empty directory, as a CI checkout would."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    monkeypatch.delenv("INPUT_INDEXFILE", raising=False)
    return tmp_path


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def config():
    return Config(Path("nonexistent.yaml"))


@pytest.mark.integration
def test_explicit_plugin_file(workspace, reporter, config):
    (workspace / "my-plugin.php").write_text(PLUGIN_CONTENT, encoding="utf-8")

    result = run_versioning("my-plugin.php", reporter=reporter, config=config)

    assert result.version == "1.0.1"
    assert reporter.outputs == {"version": "1.0.1"}
    assert reporter.failures == []
    assert (workspace / "my-plugin.php").read_text(encoding="utf-8") == (
        "<?php\n/**\n* Version: 1.0.1\n* Author: Jane\n*/\n// code"
    )
    metadata = json.loads((workspace / "metadata.json").read_text(encoding="utf-8"))
    assert metadata == {"version": "1.0.1", "author": "Jane", "is_plugin": True}


@pytest.mark.integration
def test_metadata_is_pretty_printed(workspace, reporter, config):
    (workspace / "my-plugin.php").write_text(PLUGIN_CONTENT, encoding="utf-8")

    run_versioning("my-plugin.php", reporter=reporter, config=config)

    assert (workspace / "metadata.json").read_text(encoding="utf-8") == (
        '{\n  "version": "1.0.1",\n  "author": "Jane",\n  "is_plugin": true\n}'
    )


@pytest.mark.integration
@pytest.mark.parametrize("index_file", [None, "", "style.css"])
def test_default_theme_file(workspace, reporter, config, index_file):
    theme = "/*!\nTheme Name: Twenty\nVersion: 2.9\n\nText Domain: twenty\n*/\nbody { margin: 0; }\n"
    (workspace / "style.css").write_text(theme, encoding="utf-8")

    result = run_versioning(index_file, reporter=reporter, config=config)

    assert result.version == "2.10"
    assert (workspace / "style.css").read_text(encoding="utf-8") == theme.replace("Version: 2.9", "Version: 2.10")
    metadata = json.loads((workspace / "metadata.json").read_text(encoding="utf-8"))
    assert metadata == {"theme_name": "Twenty", "version": "2.10", "text_domain": "twenty", "is_plugin": False}


@pytest.mark.integration
def test_crlf_is_normalized_on_rewrite(workspace, reporter, config):
    (workspace / "style.css").write_bytes(b"/*\r\nVersion: 1.0\r\n*/\r\nbody {}\r\n")

    run_versioning(reporter=reporter, config=config)

    assert (workspace / "style.css").read_bytes() == b"/*\nVersion: 1.1\n*/\nbody {}\n"


@pytest.mark.integration
def test_repeated_header_text_is_replaced_once(workspace, reporter, config):
    header = "<?php\n/**\n* Version: 1.0.0\n*/"
    (workspace / "p.php").write_text(header + "\n/* copy:\n" + header + "\n*/\n", encoding="utf-8")

    run_versioning("p.php", reporter=reporter, config=config)

    content = (workspace / "p.php").read_text(encoding="utf-8")
    assert content.count("Version: 1.0.1") == 1
    assert content.count("Version: 1.0.0") == 1


@pytest.mark.integration
def test_manifest_mode(workspace, reporter, config):
    manifest = json.dumps({"name": "my-theme", "version": "3.2.0", "private": True})
    (workspace / "package.json").write_text(manifest, encoding="utf-8")

    result = run_versioning("./package.json", reporter=reporter, config=config)

    assert result.version == "3.2.1"
    assert reporter.outputs == {"version": "3.2.1"}
    assert (workspace / "package.json").read_text(encoding="utf-8") == manifest
    assert result.written == [Path("metadata.json")]
    metadata = json.loads((workspace / "metadata.json").read_text(encoding="utf-8"))
    assert metadata == {"name": "my-theme", "version": "3.2.1", "is_plugin": True}


@pytest.mark.integration
def test_missing_version_line_fails_without_writes(workspace, reporter, config):
    content = "<?php\n/**\n* Author: Jane\n*/\n"
    (workspace / "p.php").write_text(content, encoding="utf-8")

    result = run_versioning("p.php", reporter=reporter, config=config)

    assert result is None
    assert reporter.failures == ["Version not found in header comment"]
    assert reporter.outputs == {}
    assert not (workspace / "metadata.json").exists()
    assert (workspace / "p.php").read_text(encoding="utf-8") == content


@pytest.mark.integration
@pytest.mark.parametrize(
    "files, index_file, message",
    [
        ({}, "missing.php", "Unable to read file"),
        ({"p.php": "// no header\n"}, "p.php", "Header comment not found"),
        ({"p.php": "<?php\n/**\n* Version: 1.x\n*/\n"}, "p.php", "Non-numeric version segment"),
        ({"package.json": "{}"}, "./package.json", "Unable to read manifest"),
    ],
)
def test_failures_are_reported_once(workspace, reporter, config, files, index_file, message):
    for name, content in files.items():
        (workspace / name).write_text(content, encoding="utf-8")

    assert run_versioning(index_file, reporter=reporter, config=config) is None

    assert len(reporter.failures) == 1
    assert message in reporter.failures[0]
    assert not (workspace / "metadata.json").exists()


def test_run_raises_and_records_state(workspace, reporter, config):
    (workspace / "p.php").write_text("<?php\n/**\n* Author: Jane\n*/\n", encoding="utf-8")
    versioning = Versioning("p.php", reporter=reporter, config=config)

    with pytest.raises(ValueError):
        versioning.run()

    assert versioning.state is RunState.EXTRACT_AND_BUMP_VERSION


@pytest.mark.integration
def test_metadata_write_failure_keeps_rewritten_source(workspace, reporter, config):
    (workspace / "my-plugin.php").write_text(PLUGIN_CONTENT, encoding="utf-8")

    result = run_versioning(
        "my-plugin.php", metadata_path=workspace / "missing-dir" / "metadata.json", reporter=reporter, config=config
    )

    assert result is None
    assert "Unable to write file" in reporter.failures[0]
    assert reporter.outputs == {}
    assert "Version: 1.0.1" in (workspace / "my-plugin.php").read_text(encoding="utf-8")


@pytest.mark.integration
def test_main_reads_action_input(workspace, monkeypatch):
    output_file = workspace / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("INPUT_INDEXFILE", "my-plugin.php")
    (workspace / "my-plugin.php").write_text(PLUGIN_CONTENT, encoding="utf-8")

    assert main([]) == 0

    assert output_file.read_text(encoding="utf-8") == "version=1.0.1\n"
    assert json.loads((workspace / "metadata.json").read_text(encoding="utf-8"))["is_plugin"] is True


@pytest.mark.integration
def test_main_cli_option_and_failure_exit_code(workspace, capsys):
    assert main(["--index-file", "missing.php"]) == 1

    assert "::error::Unable to read file: missing.php" in capsys.readouterr().out
