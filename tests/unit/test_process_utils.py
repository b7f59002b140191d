"""Tests for spawning the interpreter."""

import asyncio
import json
import sys
from pathlib import Path

import pytest

from pyshim.errors import InvalidInteropMode, NonZeroExit
from pyshim.models import ProcessResult
from pyshim.process_utils import _normalize_command, run_python, spawn_python


def test_retrieves_status_code(echo_script):
    code = asyncio.run(spawn_python([str(echo_script), "7"], throw_non_zero_status=False))
    assert code == 7


def test_returns_zero_status_code(echo_script):
    assert asyncio.run(spawn_python([str(echo_script), "0"])) == 0


def test_raises_on_non_zero_status_code(echo_script):
    with pytest.raises(NonZeroExit, match="Exited with code 7") as excinfo:
        asyncio.run(spawn_python([str(echo_script), "7"]))
    assert excinfo.value.code == 7
    assert excinfo.value.stderr is None


def test_buffer_retrieves_output_when_status_is_zero(echo_script):
    result = asyncio.run(
        spawn_python([str(echo_script), "0", "a", "b"], interop="buffer")
    )
    assert isinstance(result, ProcessResult)
    assert result.code == 0
    assert "hello from stderr" in result.stderr.splitlines()
    assert json.loads(result.stdout)["args"] == ["a", "b"]


def test_buffer_raises_with_stderr_when_status_is_non_zero(echo_script):
    with pytest.raises(NonZeroExit) as excinfo:
        asyncio.run(spawn_python([str(echo_script), "7", "a", "b"], interop="buffer"))
    message = str(excinfo.value)
    assert "Exited with code 7" in message
    assert "hello from stderr" in message
    assert json.loads(excinfo.value.stdout)["args"] == ["a", "b"]


def test_buffer_returns_result_for_non_zero_status_when_not_throwing(echo_script):
    result = asyncio.run(
        spawn_python([str(echo_script), "3"], interop="buffer", throw_non_zero_status=False)
    )
    assert result.code == 3
    assert "hello from stderr" in result.stderr


def test_rejects_unexpected_interop_mode(echo_script):
    with pytest.raises(InvalidInteropMode, match="bad") as excinfo:
        asyncio.run(spawn_python([str(echo_script), "0", "a", "b"], interop="bad"))
    assert excinfo.value.interop == "bad"


def test_passes_environment(echo_script):
    result = asyncio.run(
        spawn_python(
            [str(echo_script), "0"],
            env={"PYTHONUSERBASE": "/a/b/c/python_modules"},
            interop="buffer",
        )
    )
    assert json.loads(result.stdout)["user_base"] == "/a/b/c/python_modules"


def test_runs_in_cwd(tmp_path):
    result = asyncio.run(
        spawn_python(
            ["-c", "import os; print(os.getcwd())"],
            interop="buffer",
            cwd=str(tmp_path),
        )
    )
    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()


def test_missing_interpreter_propagates_os_error(echo_script, tmp_path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(
            spawn_python([str(echo_script), "0"], python=str(tmp_path / "nope"))
        )


def test_interpreter_from_environment(echo_script, monkeypatch):
    monkeypatch.setenv("PYSHIM_PYTHON", sys.executable)
    assert asyncio.run(spawn_python([str(echo_script), "0"])) == 0


def test_concurrent_spawns_are_independent(echo_script):
    async def spawn_all():
        return await asyncio.gather(
            *(
                spawn_python(
                    [str(echo_script), str(code), str(code)],
                    interop="buffer",
                    throw_non_zero_status=False,
                )
                for code in (0, 1, 2)
            )
        )

    results = asyncio.run(spawn_all())
    assert [result.code for result in results] == [0, 1, 2]
    assert [json.loads(result.stdout)["args"] for result in results] == [
        ["0"],
        ["1"],
        ["2"],
    ]


def test_run_python_blocks_until_exit(echo_script):
    assert run_python([str(echo_script), "5"], throw_non_zero_status=False) == 5


def test_normalize_command_accepts_paths(echo_script):
    assert _normalize_command(["python", echo_script, ""]) == [
        "python",
        str(echo_script),
        "",
    ]


def test_normalize_command_rejects_bad_arguments():
    with pytest.raises(ValueError):
        _normalize_command([])
    with pytest.raises(ValueError):
        _normalize_command([" ", "script.py"])
    with pytest.raises(TypeError):
        _normalize_command(["python", 7])


def test_default_interop_streams_to_parent(echo_script, capfd):
    code = asyncio.run(spawn_python([str(echo_script), "0", "z"]))
    assert code == 0
    out, err = capfd.readouterr()
    assert json.loads(out)["args"] == ["z"]
    assert "hello from stderr" in err


def test_buffer_interop_does_not_forward_output(echo_script, capfd):
    result = asyncio.run(spawn_python([str(echo_script), "0", "z"], interop="buffer"))
    assert json.loads(result.stdout)["args"] == ["z"]
    out, err = capfd.readouterr()
    assert out == ""
    assert err == ""
