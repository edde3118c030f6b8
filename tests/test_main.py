"""Tests for the msgextract command-line interface."""

from __future__ import annotations

from pathlib import Path

import polib
import pytest

from msgextract.main import create_argument_parser, main, parse_arguments


@pytest.fixture
def sources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "src"
    src.mkdir()
    _ = (src / "app.js").write_text(
        'gettext("Hello");\nngettext("One file", "%d files", n);\n', encoding="utf-8"
    )
    _ = (src / "page.jsx").write_text(
        'const p = <GetText comment="title">Hello</GetText>;\n', encoding="utf-8"
    )
    return tmp_path


class TestArguments:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = parse_arguments(["src/**/*.js"])
        assert args.patterns == ["src/**/*.js"]
        assert args.output is None
        assert args.config_file is None
        assert args.language is None
        assert not args.no_references
        assert not args.verbose

    def test_all_options(self) -> None:
        args = parse_arguments(
            ["-o", "out.pot", "-c", "cfg.yml", "--language", "python", "--no-references", "-v", "a", "b"]
        )
        assert args.patterns == ["a", "b"]
        assert args.output == Path("out.pot")
        assert args.config_file == Path("cfg.yml")
        assert args.language == "python"
        assert args.no_references
        assert args.verbose

    def test_patterns_required(self) -> None:
        with pytest.raises(SystemExit):
            _ = create_argument_parser().parse_args([])


class TestMain:
    """Test the command entry point."""

    def test_writes_template_to_stdout(
        self, sources: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["src/*.js*"]) == 0

        po = polib.pofile(capsys.readouterr().out)
        hello = po.find("Hello")
        assert hello is not None
        assert hello.comment == "title"
        assert hello.occurrences == [("src/app.js", "1"), ("src/page.jsx", "1")]
        files = po.find("One file")
        assert files is not None
        assert files.msgid_plural == "%d files"

    def test_writes_output_file(self, sources: Path, capsys: pytest.CaptureFixture[str]) -> None:
        output = sources / "locale" / "messages.pot"
        assert main(["src/*.js", "-o", str(output)]) == 0

        assert capsys.readouterr().out == ""
        po = polib.pofile(str(output))
        assert [entry.msgid for entry in po] == ["Hello", "One file"]

    def test_no_references(self, sources: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["src/*.js*", "--no-references"]) == 0
        assert "#:" not in capsys.readouterr().out

    def test_config_file_mappings(self, sources: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _ = (sources / "src" / "custom.js").write_text('__("Custom");\n', encoding="utf-8")
        config = sources / "msgextract.yml"
        _ = config.write_text("func_arguments_map:\n  __: [msgid]\n", encoding="utf-8")

        assert main(["-c", str(config), "src/custom.js", "src/app.js"]) == 0

        po = polib.pofile(capsys.readouterr().out)
        assert [entry.msgid for entry in po] == ["Custom"]

    def test_no_matches(self, sources: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["nothing/*.js"]) == 0
        assert len(polib.pofile(capsys.readouterr().out)) == 0

    def test_parse_error_exit_code(self, sources: Path) -> None:
        _ = (sources / "src" / "broken.js").write_text("gettext(\n", encoding="utf-8")
        assert main(["src/*.js"]) == 1

    def test_non_utf8_source_exit_code(self, sources: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _ = (sources / "src" / "latin1.js").write_bytes(b'gettext("caf\xe9");\n')
        assert main(["src/*.js"]) == 1
        assert capsys.readouterr().out == ""

    def test_unexpected_error_exit_code(
        self, sources: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(*_args: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr("msgextract.main.extract_messages_from_files", fail)
        assert main(["src/*.js"]) == 1

    def test_invalid_config_exit_code(self, sources: Path) -> None:
        config = sources / "bad.yml"
        _ = config.write_text("func_arguments_map:\n  t: [nonsense]\n", encoding="utf-8")
        assert main(["-c", str(config), "src/*.js"]) == 1

    def test_missing_config_exit_code(self, sources: Path) -> None:
        assert main(["-c", str(sources / "missing.yml"), "src/*.js"]) == 1
