"""The benchmark command: run every case and record the results."""

from __future__ import annotations

import os
import re
import sys

from compbench.cases import create_case
from compbench.containers import CompilerInfo, PlatformInfo
from compbench.enums import LoggerType, PlatformType, name, tests_to_run
from compbench.info import (
    describe_compiler,
    describe_platform,
    populate_compiler,
    populate_platform,
)
from compbench.runner import create_logger, create_platform

_DEFAULT_COUNT = 5
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def output_filename(compiler: CompilerInfo, platform: PlatformInfo) -> str:
    """Return the result file name for this build and machine."""
    filename = (
        f"{name(platform.platform)}-{name(platform.arch)}-{name(compiler.id)}-"
        f"{compiler.version}-{compiler.flags}.raw"
    )
    # Flags may hold paths; keep the result a single file name.
    for separator in {"/", os.sep}:
        filename = filename.replace(separator, "_")
    return filename


def run(file_name: str | os.PathLike[str], count: float) -> None:
    """Run every benchmark case for ``count`` seconds, logging to ``file_name``."""
    platform = create_platform(PlatformType.Linux)
    logger = create_logger(LoggerType.RawLogger, file_name)
    platform.attach_logger(logger)
    for test_type in tests_to_run():
        platform.attach_case(create_case(test_type))
    try:
        platform.run(count)
    finally:
        logger.close()


def main(argv: list[str] | None = None) -> int:
    """Print the build information and run the benchmark."""
    args = sys.argv[1:] if argv is None else argv
    compiler = CompilerInfo()
    platform = PlatformInfo()
    populate_compiler(compiler)
    populate_platform(platform)
    print(describe_compiler(compiler), end="")
    print(describe_platform(platform), end="")
    count = _atoi(args[0]) if args else _DEFAULT_COUNT
    run(output_filename(compiler, platform), count)
    return 0


if __name__ == "__main__":
    sys.exit(main())