"""Enumerations shared by the benchmark runner, the result files and the plots."""

from __future__ import annotations

from enum import IntEnum


class ArchitectureType(IntEnum):
    """CPU architecture a benchmark was built for."""

    ARM = 0
    x86 = 1
    x86_64 = 2


class CompilerType(IntEnum):
    """Compiler that produced the benchmark binary."""

    Gcc = 0
    Clang = 1


class ContainerType(IntEnum):
    """Tag written in front of every record in a result file."""

    CompilerInfo = 0
    PlatformInfo = 1
    TestCaseInfo = 2
    TestCase = 3
    VersionInfo = 4


class Folder(IntEnum):
    """Well-known folders below the user's home directory."""

    Data = 0
    Plot = 1


class LoggerType(IntEnum):
    """Kinds of result loggers."""

    RawLogger = 0


class PlatformType(IntEnum):
    """Operating system a benchmark ran on."""

    Linux = 0


class TestType(IntEnum):
    """Benchmark cases."""

    Base64 = 0
    EmptyCall = 1
    MergeSort = 2
    NaiveFactorial = 3
    NaiveFibonacci = 4
    NaiveNWD = 5
    TailCallFibonacci = 6
    TailCallFactorial = 7
    Lambda = 8
    StringConcate = 9
    SieveOfEratosthenes = 10
    ColorBrightnessCorrection = 11
    ColorRGBCorrection = 12


_NAMES: dict[type, dict[IntEnum, str]] = {
    ArchitectureType: {
        ArchitectureType.ARM: "ARM",
        ArchitectureType.x86: "x86",
        ArchitectureType.x86_64: "x86_64",
    },
    CompilerType: {
        CompilerType.Clang: "Clang",
        CompilerType.Gcc: "GCC",
    },
    Folder: {
        Folder.Data: "data",
        Folder.Plot: "plot",
    },
    PlatformType: {
        PlatformType.Linux: "Linux",
    },
    TestType: {
        TestType.Base64: "Base64",
        TestType.EmptyCall: "EmptyCall",
        TestType.NaiveFactorial: "NaiveFactorial",
        TestType.TailCallFactorial: "TailCallFactorial",
        TestType.MergeSort: "MergeSort",
        TestType.NaiveFibonacci: "NaiveFibonacci",
        TestType.NaiveNWD: "NaiveNWD",
        TestType.TailCallFibonacci: "TailCallFibonacci",
        TestType.Lambda: "Lambda",
        TestType.StringConcate: "StringConcate",
        TestType.SieveOfEratosthenes: "SieveOfEratosthenes",
        TestType.ColorBrightnessCorrection: "ColorBrightnessCorrection",
        TestType.ColorRGBCorrection: "ColorRGBCorrection",
    },
}

_FILENAMES: dict[type, dict[IntEnum, str]] = {
    CompilerType: {
        CompilerType.Clang: "clang",
        CompilerType.Gcc: "gcc",
    },
    PlatformType: _NAMES[PlatformType],
}

_TITLES: dict[TestType, str] = {
    TestType.Base64: "Kodowanie i dekodowanie Base64",
    TestType.EmptyCall: "Wykonywanie pustych funkcji, O(n)",
    TestType.NaiveFactorial: "Silnia, rekurencja, O(n)",
    TestType.TailCallFactorial: "Silnia, rekurencja ogonowa, O(n)",
    TestType.MergeSort: "Sortowanie przez scalanie, O(nlog(n))",
    TestType.NaiveFibonacci: "Ciąg fibonacciego, rekurencja, O(n^2)",
    TestType.NaiveNWD: "Naiwne NWD, O(n)",
    TestType.TailCallFibonacci: "Ciąg fibonacciego, rekurencja ogonowa, O(n)",
    TestType.Lambda: "Lambda",
    TestType.StringConcate: "Konkatenacja ciągu znaków",
    TestType.SieveOfEratosthenes: "Sito Eratostenesa",
    TestType.ColorBrightnessCorrection: "Korekcja koloru (jasność)",
    TestType.ColorRGBCorrection: "Korekcja koloru (rgb)",
}


def _lookup(table: dict[type, dict[IntEnum, str]], value: IntEnum, what: str) -> str:
    try:
        return table[type(value)][value]
    except KeyError:
        raise TypeError(f"no {what} for {value!r}") from None


def name(value: IntEnum) -> str:
    """Return the display name of an architecture, compiler, folder, platform or test."""
    return _lookup(_NAMES, value, "name")


def filename(value: IntEnum) -> str:
    """Return the file-name form of a compiler or platform."""
    return _lookup(_FILENAMES, value, "file name")


def title(test_type: TestType) -> str:
    """Return the human-readable plot title of a test."""
    if not isinstance(test_type, TestType):
        raise TypeError(f"no title for {test_type!r}")
    return _TITLES[test_type]


def tests_to_run() -> tuple[TestType, ...]:
    """Return the tests the benchmark runs, in order."""
    return (
        TestType.Base64,
        TestType.EmptyCall,
        TestType.MergeSort,
        TestType.NaiveFactorial,
        TestType.NaiveFibonacci,
        TestType.NaiveNWD,
        TestType.TailCallFibonacci,
        TestType.TailCallFactorial,
        TestType.Lambda,
        TestType.StringConcate,
        TestType.SieveOfEratosthenes,
        TestType.ColorBrightnessCorrection,
        TestType.ColorRGBCorrection,
    )