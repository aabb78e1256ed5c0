import io
import os
from unittest import mock

import pytest

from compbench.cases import EmptyCallCase, LambdaCase
from compbench.container_io import read_containers
from compbench.containers import CompilerInfo, PlatformInfo, TestCaseContainer
from compbench.enums import LoggerType, PlatformType, TestType
from compbench.info import populate_compiler, populate_platform
from compbench.runner import (
    ElapsedTime,
    LinuxPlatform,
    Logger,
    Platform,
    RawLogger,
    create_logger,
    create_platform,
)


class RecordingLogger(Logger):
    logger_type = LoggerType.RawLogger

    def __init__(self):
        self.events = []

    def init(self, case):
        self.events.append(("init", case.test_type))

    def done(self, case, duration, ips):
        self.events.append(("done", case.test_type, duration, ips))


class CountingCase(EmptyCallCase):
    def __init__(self):
        self.values = []

    def execute(self, value):
        self.values.append(value)
        return value


def test_elapsed_time_measures_difference():
    timer = ElapsedTime()
    with mock.patch("time.perf_counter", side_effect=[1.0, 3.5]):
        timer.start()
        assert timer.stop() == 2.5


def test_elapsed_time_stop_before_start():
    with pytest.raises(RuntimeError):
        ElapsedTime().stop()


def test_platform_runs_each_case_once_with_zero_count():
    out = io.StringIO()
    platform = Platform(out)
    logger = RecordingLogger()
    first, second = CountingCase(), CountingCase()
    platform.attach_logger(logger)
    platform.attach_case(first)
    platform.attach_case(second)
    platform.run(0)
    assert first.values == [1]
    assert second.values == [1]
    kinds = [event[0] for event in logger.events]
    assert kinds == ["init", "done", "init", "done"]
    assert out.getvalue().count("Running 'EmptyCall' ") == 2
    assert out.getvalue().count(" <<1>> ") == 2


def test_platform_reports_ips_from_duration():
    out = io.StringIO()
    platform = Platform(out)
    logger = RecordingLogger()
    platform.attach_logger(logger)
    platform.attach_case(LambdaCase())
    platform.run(0)
    (_, test_type, duration, ips) = logger.events[1]
    assert test_type == TestType.Lambda
    assert duration > 0
    assert ips == int(1 / duration)
    assert f"[{ips}]\n" in out.getvalue()


def test_platform_counters_increase():
    platform = Platform(io.StringIO())
    case = CountingCase()
    platform.attach_case(case)
    platform.run(0.01)
    assert case.values == list(range(1, len(case.values) + 1))


def test_raw_logger_writes_record(tmp_path):
    path = tmp_path / "out.raw"
    with RawLogger(path) as logger:
        logger.init(LambdaCase())
        logger.done(LambdaCase(), 1.25, 42)
    records = list(read_containers(path))
    assert len(records) == 1
    record = records[0]
    assert isinstance(record, TestCaseContainer)
    assert record.testcase.id == TestType.Lambda
    assert record.testcase.duration == 1.25
    assert record.testcase.count == 42
    assert record.testcase.ips == 42
    compiler, plat = CompilerInfo(), PlatformInfo()
    populate_compiler(compiler)
    populate_platform(plat)
    assert record.compiler == compiler
    assert record.platform == plat


def test_create_logger_makes_empty_file(tmp_path):
    path = tmp_path / "empty.raw"
    logger = create_logger(LoggerType.RawLogger, path)
    assert isinstance(logger, RawLogger)
    logger.close()
    assert path.read_bytes() == b""


def test_create_logger_unknown_type(tmp_path):
    with pytest.raises(ValueError):
        create_logger(99, tmp_path / "x.raw")


def test_create_platform_requests_round_robin():
    with mock.patch.object(os, "sched_setscheduler", create=True) as setter:
        platform = create_platform(PlatformType.Linux)
    assert isinstance(platform, LinuxPlatform)
    assert platform.platform_type == PlatformType.Linux
    setter.assert_called_once_with(os.getpid(), os.SCHED_RR, os.sched_param(99))


def test_linux_platform_ignores_permission_error():
    with mock.patch.object(
        os, "sched_setscheduler", create=True, side_effect=PermissionError
    ) as setter:
        platform = LinuxPlatform(io.StringIO())
    assert setter.call_count == 1
    assert platform.platform_type == PlatformType.Linux


def test_create_platform_unknown_type():
    with pytest.raises(ValueError):
        create_platform(7)