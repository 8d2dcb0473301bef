"""Run the example samplers in-process and check their exact output."""

from __future__ import annotations

import runpy
import socket
import sys
from pathlib import Path

import pytest

from fixtures.key_files import DECRYPTED_VAR_1, ENCRYPTED_VAR_1

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"

EXPECTED_OUTPUT = {
    "basic_dataview": (
        "Process,Status,CPU,Memory\n"
        "<!>Example,Basic Dataview\n"
        "process1,Running,2.5%,150MB\n"
        "process2,Stopped,0.0%,0MB\n"
    ),
    "dataview_with_commas_in_cells": (
        "Name,Age,Location\n"
        "<!>Example,Dataview with Commas\n"
        "Alice,30,Los Angeles\\, CA\n"
        "Bob,25,New York\\, NY\n"
        "Charlie,35,San Francisco\\, CA\n"
    ),
    "dataview_with_multiple_headlines": (
        "Process,Status\n"
        "<!>TotalProcesses,50\n"
        "<!>TotalCache,300\n"
        "<!>TotalMemory,1000\n"
        "Process 1,OK\n"
    ),
    "files_iter": (
        "file,kind,size_bytes\n"
        "<!>example,files_iter\n"
        "alpha.txt,file,1\n"
        "beta.log,file,2\n"
        "gamma.bin,file,3\n"
    ),
    "iterative_rows": (
        "pid,name,cpu,memory\n"
        "<!>source,system_monitor\n"
        "101,nginx,1.2%,1024MB\n"
        "102,postgres,4.5%,4096MB\n"
        "103,redis,0.8%,512MB\n"
    ),
    "readme_iterative_rows": (
        "host,status,cpu\n"
        "<!>source,inventory\n"
        "gamma,up,n/a\n"
        "beta,up,n/a\n"
        "alpha,up,n/a\n"
    ),
    "row_builder": (
        "hostname,cpu,memory,status\n"
        "<!>region,us-east-1\n"
        "server-01,45%,2GB,active\n"
        "server-02,12%,8GB,idle\n"
    ),
}


def _run_example(name: str, monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    path = EXAMPLES_DIR / f"{name}.py"
    monkeypatch.setattr(sys, "argv", [str(path), *args])
    try:
        runpy.run_path(str(path), run_name="__main__")
    except SystemExit as exc:
        return 0 if exc.code is None else int(exc.code)
    return 0


@pytest.mark.parametrize("name", sorted(EXPECTED_OUTPUT))
def test_example_output(name: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = _run_example(name, monkeypatch)

    assert exit_code == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT[name]


def test_every_example_is_covered() -> None:
    names = {path.stem for path in EXAMPLES_DIR.glob("*.py")}
    assert names == set(EXPECTED_OUTPUT) | {"env_sampler"}


def test_files_iter_lists_given_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    listing = tmp_path / "listing"
    (listing / "sub").mkdir(parents=True)
    (listing / "a,b.txt").write_bytes(b"1234")

    exit_code = _run_example("files_iter", monkeypatch, str(listing))

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2] == "a\\,b.txt,file,4"
    assert lines[3].startswith("sub,dir,")


def test_env_sampler(
    key_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CLEAR_ENV_VAR", "hello")
    monkeypatch.setenv("SECURE_ENV_VAR", ENCRYPTED_VAR_1)
    monkeypatch.setenv("GENEOS_TOOLKIT_KEY_FILE", str(key_file))
    monkeypatch.setattr(socket, "gethostname", lambda: "sampler-host")

    exit_code = _run_example("env_sampler", monkeypatch)

    assert exit_code == 0
    assert capsys.readouterr().out == (
        "Process,Status,CPU,Memory\n"
        "<!>Hostname,sampler-host\n"
        "<!>Clear Env Var,hello\n"
        f"<!>Secure Env Var,{DECRYPTED_VAR_1}\n"
        "process1,Running,2.5%,150MB\n"
    )


def test_env_sampler_defaults(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("CLEAR_ENV_VAR", raising=False)
    monkeypatch.delenv("SECURE_ENV_VAR", raising=False)

    exit_code = _run_example("env_sampler", monkeypatch)

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "<!>Clear Env Var,Default\n" in output
    assert "<!>Secure Env Var,Default\n" in output
