from pathlib import Path

import pytest

from jsxmarkup.cli import main


def _write_tree(path: Path) -> Path:
    path.write_text(
        "tag: div\nattributes:\n  id: app\nchildren:\n  - tag: greetingCard\n    children: [hello]\n",
        encoding="utf-8",
    )
    return path


def test_render_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    tree = _write_tree(tmp_path / "tree.yaml")
    main(["render", "--in", str(tree)])
    assert capsys.readouterr().out == '<div id="app"><greeting-card>hello</greeting-card></div>\n'


def test_render_to_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    tree = _write_tree(tmp_path / "tree.yaml")
    out = tmp_path / "dist" / "index.html"
    main(["render", "--in", str(tree), "--out", str(out)])
    assert out.read_text(encoding="utf-8").startswith('<div id="app">')
    assert "Rendered" in capsys.readouterr().out


def test_render_with_component_option(tmp_path: Path):
    tree = tmp_path / "tree.json"
    tree.write_text('{"component": "Dump", "attributes": {"indent": 2}}', encoding="utf-8")
    with pytest.raises(SystemExit, match="Cannot render"):
        main(["render", "--in", str(tree)])
    with pytest.raises(SystemExit, match="NAME=module:attribute"):
        main(["render", "--in", str(tree), "--component", "json:dumps"])


def test_validate_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    good = _write_tree(tmp_path / "good.yaml")
    bad = tmp_path / "bad.json"
    bad.write_text('{"tag": "div", "component": "X"}', encoding="utf-8")

    main(["validate", str(good)])
    assert "Validated 1 tree file(s)." in capsys.readouterr().out

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(good), str(bad), str(tmp_path / "missing.yaml")])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "bad.json" in err
    assert "missing.yaml: file not found" in err


def test_kebab_command(capsys: pytest.CaptureFixture[str]):
    main(["kebab", "dataFoo", "ID", "XMLHttpRequest"])
    assert capsys.readouterr().out.splitlines() == ["data-foo", "ID", "XML-http-request"]


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]):
    main([])
    assert "usage" in capsys.readouterr().out
