"""Shared fixtures: stand-in LaTeX compilers and an isolated temp directory."""

import stat
import sys
import tempfile
from pathlib import Path

import pytest
from loguru import logger

# Mimics pdflatex's handling of -output-directory: writes <name>.log and
# <name>.pdf (a copy of the source) next to each other in the output directory.
FAKE_COMPILER = """#!/bin/sh
outdir="."
while [ $# -gt 1 ]; do
  case "$1" in
    -output-directory) outdir="$2"; shift 2 ;;
    *) shift ;;
  esac
done
name=$(basename "$1" .tex)
echo "This is fakeTeX, Version 3.14" > "$outdir/$name.log"
echo "LaTeX Warning: fake warning" >> "$outdir/$name.log"
cp "$1" "$outdir/$name.pdf"
"""

FAILING_COMPILER = """#!/bin/sh
outdir="."
while [ $# -gt 1 ]; do
  case "$1" in
    -output-directory) outdir="$2"; shift 2 ;;
    *) shift ;;
  esac
done
name=$(basename "$1" .tex)
echo "This is fakeTeX, Version 3.14" > "$outdir/$name.log"
echo "! Package pgfkeys Error: I do not know the key '/tikz/bogus'." >> "$outdir/$name.log"
echo "fake compiler output"
exit 1
"""


def _write_script(path: Path, content: str) -> str:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture
def fake_compiler(tmp_path) -> str:
    """Path to a compiler that succeeds and 'renders' the source as the PDF."""
    return _write_script(tmp_path / "fake-pdflatex", FAKE_COMPILER)


@pytest.fixture
def failing_compiler(tmp_path) -> str:
    """Path to a compiler that writes an error to its log and exits 1."""
    return _write_script(tmp_path / "failing-pdflatex", FAILING_COMPILER)


@pytest.fixture(autouse=True)
def temp_root(tmp_path, monkeypatch) -> Path:
    """Redirect tempfile so every workspace is created under a known directory."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def list_workspaces(temp_root):
    """Callable returning the gridpaper workspaces currently under temp_root."""

    def _list():
        return sorted(p for p in temp_root.iterdir() if p.name.startswith("gridpaper"))

    return _list


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to streams that CliRunner closes after each invoke."""
    yield
    logger.remove()
    logger.add(sys.stderr)
