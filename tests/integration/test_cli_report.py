"""End-to-end tests for ``minver report`` and ``minver version``.

Events are serialized to JSON lines, piped through the CLI, and the split
between stdout and stderr is checked together with the exit code.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from minver import __version__
from minver.cli.app import EXIT_BAD_INPUT, EXIT_FAILURE_REPORTED, EXIT_OK, app
from minver.models.events import Event
from minver.models.messages import Progress, SetOutput
from minver.models.versions import BareVersion
from minver.reporting.decoding import encode_event


runner = CliRunner()


def _jsonl(*events: Event) -> str:
    return "".join(encode_event(e) + "\n" for e in events)


class TestReportCommand:
    def test_success_goes_to_stdout(self, make_resolved_event):
        progress = Event.from_message(Progress(current=1, search_space_size=4))
        result = runner.invoke(
            app, ["report"], input=_jsonl(progress, make_resolved_event("1.10.100"))
        )

        assert result.exit_code == EXIT_OK
        assert result.stdout == "1.10.100\n"
        assert result.stderr == ""

    def test_failure_goes_to_stderr_and_exits_1(self, make_resolved_event):
        result = runner.invoke(app, ["report"], input=_jsonl(make_resolved_event(None)))

        assert result.exit_code == EXIT_FAILURE_REPORTED
        assert result.stdout == ""
        assert result.stderr == "none\n"

    def test_incompatible_verify_drops_detail(self, make_verify_event):
        result = runner.invoke(
            app,
            ["report"],
            input=_jsonl(make_verify_event(compatible=False, error="error message")),
        )

        assert result.exit_code == EXIT_FAILURE_REPORTED
        assert result.stderr == "false\n"

    def test_reads_input_file(self, tmp_path: Path):
        path = tmp_path / "events.jsonl"
        event = Event.from_message(
            SetOutput(version=BareVersion.parse("1.20"), manifest_path=Path("/my/path"))
        )
        path.write_text(_jsonl(event), encoding="utf-8")

        result = runner.invoke(app, ["report", "--input", str(path)])

        assert result.exit_code == EXIT_OK
        assert result.stdout == "1.20\n"

    def test_list_is_unsupported(self, make_list_event):
        result = runner.invoke(app, ["report"], input=_jsonl(make_list_event()))

        assert result.exit_code == EXIT_FAILURE_REPORTED
        assert result.stderr == "unsupported\n"

    def test_bad_input_exits_2(self):
        result = runner.invoke(app, ["report"], input="{broken\n")

        assert result.exit_code == EXIT_BAD_INPUT
        assert "Invalid event" in result.stderr
        assert result.stdout == ""

    def test_invalid_utf8_file_exits_2(self, tmp_path: Path):
        path = tmp_path / "events.jsonl"
        path.write_bytes(b"\xff\xfe{broken\n")

        result = runner.invoke(app, ["report", "--input", str(path)])

        assert result.exit_code == EXIT_BAD_INPUT
        assert "Invalid UTF-8" in result.stderr
        assert result.stdout == ""

    def test_invalid_utf8_on_stdin_keeps_earlier_output(self, make_resolved_event):
        payload = _jsonl(make_resolved_event("1.56.0")).encode("utf-8")
        payload += b'{"message": {"kind": "meta", "tool_version": "\xff"}}\n'

        result = runner.invoke(app, ["report"], input=payload)

        assert result.exit_code == EXIT_BAD_INPUT
        assert result.stdout == "1.56.0\n"
        assert "Invalid UTF-8" in result.stderr

    def test_empty_input(self):
        result = runner.invoke(app, ["report"], input="")

        assert result.exit_code == EXIT_OK
        assert result.stdout == ""


class TestVersionCommand:
    def test_prints_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert result.stdout.strip() == __version__
