"""Summarise recorded benchmark results by compiler."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path

from compbench.container_io import read_containers
from compbench.containers import TestCaseContainer
from compbench.enums import CompilerType, Folder, name


def load_tests(paths: Iterable[str | os.PathLike[str]]) -> list[TestCaseContainer]:
    """Return every test-case record stored in the given result files."""
    return [
        container
        for path in paths
        for container in read_containers(path)
        if isinstance(container, TestCaseContainer)
    ]


def compiler_durations(tests: Iterable[TestCaseContainer]) -> dict[CompilerType, float]:
    """Return the total measured duration per compiler, summed shortest first."""
    totals = {compiler: 0.0 for compiler in CompilerType}
    for test in sorted(tests, key=lambda t: t.testcase.duration):
        totals[test.compiler.id] += test.testcase.duration
    return totals


def _data_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.iterdir() if path.is_file())


def main(argv: list[str] | None = None) -> int:
    """Print the total duration per compiler over all result files."""
    args = sys.argv[1:] if argv is None else argv
    directory = Path(args[0]) if args else Path.home() / name(Folder.Data)
    totals = compiler_durations(load_tests(_data_files(directory)))
    print(f"gcc   : {totals[CompilerType.Gcc]:g}s")
    print(f"clang : {totals[CompilerType.Clang]:g}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())