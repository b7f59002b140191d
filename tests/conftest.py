"""Pytest configuration and shared fixtures."""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from pyshim.cli import cli

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def default_interpreter(monkeypatch):
    """Run children with the test interpreter unless a test overrides it."""
    monkeypatch.delenv("PYSHIM_PYTHON", raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["locate", "src/main.py"])
        result = invoke(["--package-dir", str(root), "run", "--buffer", "x.py"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def echo_script():
    """Path to a script that echoes its arguments and exits with argv[1]."""
    return FIXTURES / "echo_args.py"


@pytest.fixture
def package_tree(tmp_path, echo_script):
    """Provide a package root with a nested script.

    Creates:
        tmp_path/pkg/package.json
        tmp_path/pkg/src/test/test.py   - copy of echo_args.py
    """
    root = tmp_path / "pkg"
    (root / "src" / "test").mkdir(parents=True)
    (root / "package.json").write_text("{}\n")
    shutil.copy(echo_script, root / "src" / "test" / "test.py")
    return root


@pytest.fixture
def in_package(package_tree, monkeypatch):
    """Run the test from inside the package root."""
    monkeypatch.chdir(package_tree)
    return package_tree
