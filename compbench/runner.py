"""Timing, logging and running of benchmark cases."""

from __future__ import annotations

import os
import sys
import time
from abc import ABC, abstractmethod
from typing import ClassVar, TextIO

from compbench.cases import BenchmarkCase
from compbench.container_io import ContainerWriter
from compbench.containers import TestCaseContainer
from compbench.enums import LoggerType, PlatformType, name
from compbench.info import populate_compiler, populate_platform


class ElapsedTime:
    """Measures wall-clock time between start() and stop()."""

    def __init__(self) -> None:
        self._begin: float | None = None

    def start(self) -> None:
        self._begin = time.perf_counter()

    def stop(self) -> float:
        """Return the seconds elapsed since start()."""
        if self._begin is None:
            raise RuntimeError("stop() called before start()")
        return time.perf_counter() - self._begin


class Logger(ABC):
    """Receives notice of every benchmark case that starts and finishes."""

    logger_type: ClassVar[LoggerType]

    @abstractmethod
    def init(self, case: BenchmarkCase) -> None:
        """Called before a case runs."""

    @abstractmethod
    def done(self, case: BenchmarkCase, duration: float, ips: int) -> None:
        """Called after a case has run."""

    def close(self) -> None:
        """Release whatever the logger holds."""


class RawLogger(Logger):
    """Writes one test-case record per finished case to a result file."""

    logger_type = LoggerType.RawLogger

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self._writer = ContainerWriter(file_path)

    def init(self, case: BenchmarkCase) -> None:
        pass

    def done(self, case: BenchmarkCase, duration: float, ips: int) -> None:
        container = TestCaseContainer()
        populate_compiler(container.compiler)
        populate_platform(container.platform)
        container.testcase.count = ips
        container.testcase.duration = duration
        container.testcase.id = case.test_type
        container.testcase.ips = ips
        self._writer.write(container)

    def close(self) -> None:
        self._writer.close()

    def __enter__(self) -> RawLogger:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class Platform:
    """Runs every attached case for a fixed time and reports to the loggers."""

    platform_type: ClassVar[PlatformType | None] = None

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._loggers: list[Logger] = []
        self._cases: list[BenchmarkCase] = []
        self._elapsed = ElapsedTime()
        self._count: float = 0

    def _write(self, text: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(text)
        out.flush()

    def attach_case(self, case: BenchmarkCase) -> None:
        self._cases.append(case)

    def attach_logger(self, logger: Logger) -> None:
        self._loggers.append(logger)

    def _init(self, case: BenchmarkCase) -> None:
        for logger in self._loggers:
            logger.init(case)
        self._write(f"Running '{name(case.test_type)}' ")

    def _exec(self, case: BenchmarkCase) -> int:
        iterations = 0
        begin = time.perf_counter()
        while True:
            iterations += 1
            case.execute(iterations)
            if time.perf_counter() - begin >= self._count:
                return iterations

    def _done(self, case: BenchmarkCase, duration: float, ips: int) -> None:
        for logger in self._loggers:
            logger.done(case, duration, ips)
        self._write(f"done. [{duration:g}sec][{ips}]\n")

    def run(self, count: float) -> None:
        """Run each case for ``count`` seconds, at least one iteration each."""
        self._count = count
        for case in self._cases:
            self._init(case)
            self._elapsed.start()
            iterations = self._exec(case)
            duration = self._elapsed.stop()
            self._write(f" <<{iterations}>> ")
            ips = int(iterations / duration) if duration > 0 else iterations
            self._done(case, duration, ips)


class LinuxPlatform(Platform):
    """A platform that asks for real-time round-robin scheduling."""

    platform_type = PlatformType.Linux

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)
        setter = getattr(os, "sched_setscheduler", None)
        policy = getattr(os, "SCHED_RR", None)
        param = getattr(os, "sched_param", None)
        if setter is None or policy is None or param is None:
            return
        try:
            setter(os.getpid(), policy, param(99))
        except OSError:
            pass


def create_logger(logger_type: LoggerType | int, file_path: str | os.PathLike[str]) -> Logger:
    """Return a logger of the given type writing to ``file_path``."""
    try:
        kind = LoggerType(logger_type)
    except ValueError:
        raise ValueError(f"unknown logger type {logger_type!r}") from None
    if kind is LoggerType.RawLogger:
        return RawLogger(file_path)
    raise ValueError(f"unknown logger type {logger_type!r}")


def create_platform(platform_type: PlatformType | int) -> Platform:
    """Return a platform of the given type."""
    try:
        kind = PlatformType(platform_type)
    except ValueError:
        raise ValueError(f"unknown platform type {platform_type!r}") from None
    if kind is PlatformType.Linux:
        return LinuxPlatform()
    raise ValueError(f"unknown platform type {platform_type!r}")