"""Tests for the public API."""

from __future__ import annotations

from typer.testing import CliRunner

import arpscout
from arpscout import __version__
from arpscout.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"arpscout version {__version__}" in result.stdout


def test_version_short():
    result = runner.invoke(app, ["-v"])
    assert result.exit_code == 0
    assert f"arpscout version {__version__}" in result.stdout


def test_public_names():
    for name in arpscout.__all__:
        assert hasattr(arpscout, name)
