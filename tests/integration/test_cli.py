"""Integration tests for the gridpaper command line."""

import pytest
from typer.testing import CliRunner

from gridpaper.cli import app
from gridpaper.contexts.rendering import Workspace, WorkspaceError
from gridpaper.contexts.templating import RenderParameters, render_document

runner = CliRunner()


@pytest.mark.integration
def test_missing_output_argument(temp_root, list_workspaces):
    result = runner.invoke(app, [])

    assert result.exit_code == 2
    assert "missing argument" in result.output
    assert "Usage" in result.output
    assert list_workspaces() == []


@pytest.mark.integration
def test_missing_output_runs_no_compiler(temp_root, tmp_path, list_workspaces):
    marker = tmp_path / "compiler-ran"
    script = tmp_path / "touching-pdflatex"
    script.write_text(f"#!/bin/sh\ntouch {marker}\n")
    script.chmod(0o755)

    result = runner.invoke(app, ["--compiler", str(script)])

    assert result.exit_code == 2
    assert not marker.exists()
    assert list_workspaces() == []


@pytest.mark.integration
@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag, temp_root, list_workspaces):
    result = runner.invoke(app, [flag])

    assert result.exit_code == 0
    assert "graph paper" in result.output
    assert list_workspaces() == []


@pytest.mark.integration
def test_show_template(temp_root, list_workspaces):
    result = runner.invoke(app, ["--template"])

    assert result.exit_code == 0
    assert "<<< margin >>>" in result.output
    assert "\\begin{tikzpicture}" in result.output
    assert list_workspaces() == []


@pytest.mark.integration
def test_default_grid(tmp_path, fake_compiler, list_workspaces):
    output = tmp_path / "grid.pdf"

    result = runner.invoke(app, ["--compiler", fake_compiler, str(output)])

    assert result.exit_code == 0, result.output
    assert output.read_bytes() == render_document(RenderParameters()).encode("utf-8")
    assert list_workspaces() == []


@pytest.mark.integration
def test_rendering_options(tmp_path, fake_compiler):
    output = tmp_path / "grid.pdf"

    result = runner.invoke(
        app,
        [
            "--compiler", fake_compiler,
            "--margin", "2cm",
            "--hoffset", "-2mm",
            "--voffset", "1mm",
            "--show-frame",
            "--cell-width", "5mm",
            "--cell-height", "6mm",
            "--step", "7mm",
            "--line-width", "ultra thin",
            "--line-color", "red",
            "--line-style", "densely dotted",
            "--grid-columns", "10",
            "--grid-rows", "12",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    latex = output.read_text()
    assert "margin=2cm" in latex
    assert "hoffset=-2mm" in latex
    assert "voffset=1mm" in latex
    assert "showframe=true" in latex
    assert "[x=5mm, y=6mm]" in latex
    assert "\\draw[step=7mm, ultra thin, red, densely dotted]" in latex
    assert "grid (10, 12);" in latex


@pytest.mark.integration
def test_invalid_integer_option(tmp_path, fake_compiler, list_workspaces):
    result = runner.invoke(
        app, ["--compiler", fake_compiler, "--grid-rows", "many", str(tmp_path / "grid.pdf")]
    )

    assert result.exit_code == 2
    assert list_workspaces() == []


@pytest.mark.integration
def test_config_file_with_override(tmp_path, fake_compiler):
    config = tmp_path / "grid.yaml"
    config.write_text("line_color: blue\nline_style: dashed\n")
    output = tmp_path / "grid.pdf"

    result = runner.invoke(
        app, ["--compiler", fake_compiler, "-c", str(config), "--line-style", "solid", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "\\draw[step=4.25mm, very thin, blue, solid]" in output.read_text()


@pytest.mark.integration
def test_invalid_config_file(tmp_path, fake_compiler, list_workspaces):
    config = tmp_path / "grid.yaml"
    config.write_text("colour: blue\n")

    result = runner.invoke(
        app, ["--compiler", fake_compiler, "-c", str(config), str(tmp_path / "grid.pdf")]
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    assert list_workspaces() == []


@pytest.mark.integration
def test_stdout_output(fake_compiler, list_workspaces):
    result = runner.invoke(app, ["--compiler", fake_compiler, "-"])

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == render_document(RenderParameters()).encode("utf-8")
    assert list_workspaces() == []


@pytest.mark.integration
@pytest.mark.parametrize("flag", ["--preserve-workspace", "--work", "-w"])
def test_preserve_workspace(flag, tmp_path, fake_compiler, list_workspaces):
    result = runner.invoke(app, ["--compiler", fake_compiler, flag, str(tmp_path / "grid.pdf")])

    assert result.exit_code == 0, result.output
    [workspace] = list_workspaces()
    assert f"Work directory: {workspace}" in result.output
    for name in ("gridpaper.tex", "gridpaper.log", "gridpaper.pdf"):
        assert (workspace / name).exists()


@pytest.mark.integration
@pytest.mark.parametrize("extra", [[], ["--preserve-workspace"]])
def test_compilation_failure(extra, tmp_path, failing_compiler, list_workspaces):
    output = tmp_path / "grid.pdf"

    result = runner.invoke(app, ["--compiler", failing_compiler, *extra, str(output)])

    assert result.exit_code == 1
    [workspace] = list_workspaces()
    assert str(workspace / "gridpaper.log") in result.output
    assert f"Work directory kept: {workspace}" in result.output
    assert not output.exists()


@pytest.mark.integration
def test_compiler_not_found(tmp_path, list_workspaces):
    result = runner.invoke(
        app, ["--compiler", str(tmp_path / "no-such-pdflatex"), str(tmp_path / "grid.pdf")]
    )

    assert result.exit_code == 1
    assert "Cannot run" in result.output
    assert "failed to start" in result.output
    assert "exit status None" not in result.output
    assert len(list_workspaces()) == 1


@pytest.mark.integration
def test_compiler_from_environment(tmp_path, fake_compiler):
    output = tmp_path / "grid.pdf"

    result = runner.invoke(app, [str(output)], env={"LATEX_COMPILER": fake_compiler})

    assert result.exit_code == 0, result.output
    assert output.exists()


@pytest.mark.integration
def test_unwritable_destination(tmp_path, fake_compiler, list_workspaces):
    result = runner.invoke(
        app, ["--compiler", fake_compiler, str(tmp_path / "missing" / "grid.pdf")]
    )

    assert result.exit_code == 1
    assert "copy pdf file" in result.output
    [workspace] = list_workspaces()
    assert f"Work directory kept: {workspace}" in result.output


@pytest.mark.integration
def test_identical_runs_identical_output(tmp_path, fake_compiler):
    first = tmp_path / "first.pdf"
    second = tmp_path / "second.pdf"

    runner.invoke(app, ["--compiler", fake_compiler, "--line-style", "dotted", str(first)])
    runner.invoke(app, ["--compiler", fake_compiler, "--line-style", "dotted", str(second)])

    assert first.read_bytes() == second.read_bytes()


@pytest.mark.integration
def test_source_write_failure_reports_workspace(tmp_path, fake_compiler, list_workspaces, monkeypatch):
    def fail_write(self, latex):
        raise WorkspaceError(f"Cannot write {self.source_path}: disk full")

    monkeypatch.setattr(Workspace, "write_source", fail_write)

    result = runner.invoke(app, ["--compiler", fake_compiler, str(tmp_path / "grid.pdf")])

    assert result.exit_code == 1
    assert "disk full" in result.output
    [workspace] = list_workspaces()
    assert f"Work directory kept: {workspace}" in result.output


@pytest.mark.integration
def test_interpolation_syntax_reaches_latex_verbatim(tmp_path, fake_compiler, monkeypatch):
    monkeypatch.setenv("GRIDPAPER_TEST_COLOR", "red")
    output = tmp_path / "grid.pdf"

    result = runner.invoke(
        app,
        [
            "--compiler", fake_compiler,
            "--line-width", "line width=${w}",
            "--line-color", "${oc.env:GRIDPAPER_TEST_COLOR}",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    latex = output.read_text()
    assert "\\draw[step=4.25mm, line width=${w}, ${oc.env:GRIDPAPER_TEST_COLOR}, solid]" in latex
