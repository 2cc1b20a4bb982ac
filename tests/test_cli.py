"""Tests for wireparams.cli: CLI entrypoint and subcommands."""

import json
from pathlib import Path

import pytest

from wireparams.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["query", "multipart"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    @pytest.mark.parametrize("command", ["query", "multipart"])
    def test_missing_input(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "wireparams" in capsys.readouterr().out


class TestQueryCommand:
    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["query", "key1=1&key1=2&key2=abc&key3="])
        out = json.loads(capsys.readouterr().out)
        assert out == {"key1": [1, 2], "key2": ["abc"], "key3": []}

    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["query", "--encode", '{"key1": [1, 2, 3], "key2": null}'])
        assert capsys.readouterr().out.strip() == "key1=1&key1=2&key1=3&key2="

    def test_encode_bad_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["query", "--encode", "not json"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_encode_unsupported_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["query", "--encode", '{"a": [1.5]}'])
        assert exc_info.value.code == 1

    def test_bad_encoding(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--encoding", "no-such-codec", "query", "a=1"])
        assert exc_info.value.code == 1
        assert "Unknown encoding" in capsys.readouterr().err


class TestMultipartCommand:
    BODY = (
        b"--xyz\n"
        b'Content-Disposition: form-data; name="key1"\n'
        b"\n"
        b"1\n"
        b"--xyz\n"
        b"Content-Disposition: form-data\n"
        b"\n"
        b"orphan\n"
        b"--xyz--\n"
    )

    def test_decode_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "body.txt"
        path.write_bytes(self.BODY)
        main(["multipart", str(path), "--boundary", "--xyz"])
        assert json.loads(capsys.readouterr().out) == {"key1": [1]}

    def test_decode_strict(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "body.txt"
        path.write_bytes(self.BODY)
        with pytest.raises(SystemExit) as exc_info:
            main(["multipart", str(path), "--boundary", "--xyz", "--strict"])
        assert exc_info.value.code == 1
        assert "part 1" in capsys.readouterr().err

    def test_decode_requires_boundary(self, tmp_path: Path) -> None:
        path = tmp_path / "body.txt"
        path.write_bytes(self.BODY)
        with pytest.raises(SystemExit) as exc_info:
            main(["multipart", str(path)])
        assert exc_info.value.code == 2

    def test_decode_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["multipart", str(tmp_path / "missing"), "--boundary", "--xyz"])
        assert exc_info.value.code == 1

    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["multipart", "--encode", '{"a": [1, "x"]}', "--boundary", "--xyz"])
        out = capsys.readouterr().out
        assert out.count('name="a"') == 2
        assert out.rstrip().endswith("--xyz--")

    def test_encode_reports_generated_boundary(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["multipart", "--encode", '{"a": 1}'])
        captured = capsys.readouterr()
        assert "boundary: --wireparams-" in captured.err
        assert 'name="a"' in captured.out
