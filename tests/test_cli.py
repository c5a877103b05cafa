from types import SimpleNamespace

import syntree.__main__ as cli
from syntree import pipeline


def _stub_render(measurer):
    def _render(text, options):
        return pipeline.render_tree(text, options, measurer)

    return _render


def test_main_writes_png_and_tikz(tmp_path, monkeypatch, measurer, capsys):
    monkeypatch.setattr(cli, "render_tree", _stub_render(measurer))
    monkeypatch.setattr(cli, "render_image", lambda plan, measurer: SimpleNamespace(plan=plan))
    monkeypatch.setattr(cli, "encode_png", lambda image: b"png bytes")

    png_path = tmp_path / "out" / "tree.png"
    tikz_path = tmp_path / "out" / "tree.tex"

    cli.main(
        [
            "[S [NP_1 he] [VP [V left] <1>]]",
            "-o",
            str(png_path),
            "--tikz-output-path",
            str(tikz_path),
        ]
    )

    assert png_path.read_bytes() == b"png bytes"
    assert tikz_path.read_text(encoding="utf-8").startswith("\\documentclass")
    out = capsys.readouterr().out
    assert "Tree: [S [NP_1 he] [VP [V left] <1>]]" in out
    assert "<1> -> 'NP₁': draw=True direction=left" in out


def test_main_reads_input_file_and_applies_flags(tmp_path, monkeypatch, measurer):
    source = tmp_path / "tree.txt"
    source.write_text("[S [NP he] [VP left <2>]]\n", encoding="utf-8")
    seen = []

    def _render(text, options):
        seen.append((text, options))
        return pipeline.render_tree(text, options, measurer)

    monkeypatch.setattr(cli, "render_tree", _render)

    cli.main(["--input", str(source), "--font-size", "18", "--no-color", "--term-lines"])

    text, options = seen[0]
    assert text.startswith("[S [NP he]")
    assert options.font_size == 18
    assert options.color is False
    assert options.term_lines is True


def test_main_reports_surface_errors(monkeypatch):
    def _fail(text, options):
        raise cli.DrawingSurfaceError("no fonts")

    monkeypatch.setattr(cli, "render_tree", _fail)

    try:
        cli.main(["[S a]"])
    except SystemExit as exc:
        assert exc.code == 1
    else:  # pragma: no cover - the call must exit
        raise AssertionError("expected SystemExit")


def test_main_requires_text(monkeypatch):
    try:
        cli.main([])
    except SystemExit as exc:
        assert exc.code == 2
    else:  # pragma: no cover - the call must exit
        raise AssertionError("expected SystemExit")
