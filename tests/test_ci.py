import io

from wp_versioning.ci import ActionsReporter, escape_data, escape_property, get_input


def test_get_input():
    env = {"INPUT_INDEXFILE": "  my-plugin.php \n"}

    assert get_input("indexFile", env) == "my-plugin.php"
    assert get_input("missing", env) == ""


def test_get_input_spaces_in_name():
    assert get_input("index file", {"INPUT_INDEX_FILE": "x"}) == "x"


def test_set_output_to_github_output_file(tmp_path):
    output_file = tmp_path / "output"
    reporter = ActionsReporter(env={"GITHUB_OUTPUT": str(output_file)}, stream=io.StringIO())

    reporter.set_output("version", "1.0.1")
    reporter.set_output("notes", "a\nb")

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "version=1.0.1"
    assert lines[1].startswith("notes<<ghadelimiter_")
    assert lines[2:4] == ["a", "b"]
    assert lines[4] == lines[1].split("<<")[1]


def test_set_output_legacy_command():
    stream = io.StringIO()
    reporter = ActionsReporter(env={}, stream=stream)

    reporter.set_output("version", "2.0")

    assert stream.getvalue() == "::set-output name=version::2.0\n"


def test_set_failed():
    stream = io.StringIO()
    reporter = ActionsReporter(env={}, stream=stream)

    reporter.set_failed("Version not found\nin header 100%")

    assert reporter.exit_code == 1
    assert stream.getvalue() == "::error::Version not found%0Ain header 100%25\n"


def test_set_output_legacy_command_escapes_value():
    stream = io.StringIO()
    reporter = ActionsReporter(env={}, stream=stream)

    reporter.set_output("notes", "50%\r\nmore")

    assert stream.getvalue() == "::set-output name=notes::50%25%0D%0Amore\n"


def test_escape_property():
    assert escape_property("a:b,c%") == "a%3Ab%2Cc%25"
    assert escape_data("a:b,c") == "a:b,c"
