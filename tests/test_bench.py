import os
from unittest import mock

from compbench.bench import main, output_filename, run
from compbench.container_io import read_containers
from compbench.containers import (
    CompilerInfo,
    PlatformInfo,
    TestCaseContainer,
    VersionInfo,
)
from compbench.enums import ArchitectureType, CompilerType, PlatformType, tests_to_run


def test_output_filename_format():
    compiler = CompilerInfo(CompilerType.Gcc, VersionInfo(11, 4, 0), "-O3")
    platform = PlatformInfo(ArchitectureType.x86_64, PlatformType.Linux)
    assert output_filename(compiler, platform) == "Linux-x86_64-GCC-11.4.0--O3.raw"


def test_output_filename_has_no_separators():
    compiler = CompilerInfo(CompilerType.Clang, VersionInfo(1, 0, 0), "-I/usr/include")
    platform = PlatformInfo(ArchitectureType.ARM, PlatformType.Linux)
    result = output_filename(compiler, platform)
    assert "/" not in result
    assert result.startswith("Linux-ARM-Clang-1.0.0-")
    assert result.endswith(".raw")


def test_run_records_every_case(tmp_path, capsys):
    path = tmp_path / "result.raw"
    with mock.patch.object(os, "sched_setscheduler", create=True):
        run(path, 0)
    records = list(read_containers(path))
    assert [record.testcase.id for record in records] == list(tests_to_run())
    for record in records:
        assert isinstance(record, TestCaseContainer)
        assert record.testcase.count == record.testcase.ips
        assert record.testcase.duration > 0
    assert capsys.readouterr().out.count("done. [") == len(tests_to_run())


def test_main_writes_result_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with mock.patch.object(os, "sched_setscheduler", create=True):
        assert main(["0"]) == 0
    files = list(tmp_path.iterdir())
    assert len(files) == 1
    assert files[0].suffix == ".raw"
    records = list(read_containers(files[0]))
    assert len(records) == len(tests_to_run())
    out = capsys.readouterr().out
    assert out.startswith("Compiler info:\n")
    assert "Platform info:\n" in out