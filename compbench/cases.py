"""The benchmark cases and the helpers they exercise."""

from __future__ import annotations

import base64
import string
from abc import ABC, abstractmethod
from functools import cache
from itertools import takewhile
from typing import ClassVar

from compbench.enums import TestType

_U64 = (1 << 64) - 1
_B64_CHARS = frozenset(string.ascii_letters + string.digits + "+/")
_SIEVE_SIZE = 65536


def base64_encode(data: bytes) -> str:
    """Encode bytes as padded Base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(encoded: str) -> bytes:
    """Decode Base64 text, stopping at padding or the first foreign character."""
    valid = "".join(takewhile(lambda ch: ch in _B64_CHARS, encoded))
    remainder = len(valid) % 4
    if remainder == 1:
        valid = valid[:-1]
        remainder = 0
    if remainder:
        valid += "=" * (4 - remainder)
    return base64.b64decode(valid)


def merge_sort(values: list[int]) -> list[int]:
    """Return the values sorted by recursive merging."""
    if len(values) <= 1:
        return list(values)
    middle = len(values) // 2
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    result: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            result.append(left[li])
            li += 1
        else:
            result.append(right[ri])
            ri += 1
    result.extend(left[li:])
    result.extend(right[ri:])
    return result


def factorial(n: int) -> int:
    """Recursive factorial, wrapped to 64 bits."""
    if n < 2:
        return 1
    return (n * factorial(n - 1)) & _U64


def fibonacci(n: int) -> int:
    """Naive doubly recursive Fibonacci number."""
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def tail_fibonacci(n: int, f: int = 0, f_prev: int = 1) -> int:
    """Accumulator-style Fibonacci, wrapped to 64 bits."""
    while n >= 3:
        n, f, f_prev = n - 1, (f + f_prev) & _U64, f
    return f


@cache
def _sieve() -> bytes:
    # 0 and 1 are never cleared, so they count as prime here.
    is_prime = bytearray([1]) * _SIEVE_SIZE
    i = 2
    while i * i < _SIEVE_SIZE:
        if is_prime[i]:
            is_prime[2 * i::i] = bytes(len(range(2 * i, _SIEVE_SIZE, i)))
        i += 1
    return bytes(is_prime)


def _channels(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _pack_color(r: int, g: int, b: int) -> int:
    return (min(0xFF, r) << 16) | (min(0xFF, g) << 8) | min(0xFF, b)


class BenchmarkCase(ABC):
    """A unit of work run repeatedly by the benchmark."""

    test_type: ClassVar[TestType]

    @abstractmethod
    def execute(self, value: int) -> int:
        """Do one iteration of work for the given counter value."""


class Base64Case(BenchmarkCase):
    test_type = TestType.Base64

    def execute(self, value: int) -> int:
        encoded = base64_encode(str(value).encode("ascii"))
        return len(base64_decode(encoded))


class EmptyCallCase(BenchmarkCase):
    test_type = TestType.EmptyCall

    def execute(self, value: int) -> int:
        return value


class MergeSortCase(BenchmarkCase):
    test_type = TestType.MergeSort

    _DATA = (11, 34, 1, 23, 24, 22, 22, 44, 85, 12, 334, 5, 2, 32, 64, 7)

    def execute(self, value: int) -> int:
        return len(merge_sort([*self._DATA, value]))


class NaiveFactorialCase(BenchmarkCase):
    test_type = TestType.NaiveFactorial

    def execute(self, value: int) -> int:
        return factorial(value % 64)


class NaiveFibonacciCase(BenchmarkCase):
    test_type = TestType.NaiveFibonacci

    def execute(self, value: int) -> int:
        return fibonacci(value % 40)


class NaiveNWDCase(BenchmarkCase):
    test_type = TestType.NaiveNWD

    def execute(self, value: int) -> int:
        a, b = 5324, 31
        while b != 0:
            a, b = b, a % b
        return (a + value) & _U64


class TailCallFibonacciCase(BenchmarkCase):
    test_type = TestType.TailCallFibonacci

    def execute(self, value: int) -> int:
        return tail_fibonacci(value % 100, 0, 1)


class TailCallFactorialCase(BenchmarkCase):
    test_type = TestType.TailCallFactorial

    def execute(self, value: int) -> int:
        return factorial(value % 256)


class LambdaCase(BenchmarkCase):
    test_type = TestType.Lambda

    def execute(self, value: int) -> int:
        add = lambda x: (x + 1) & _U64  # noqa: E731
        dec = lambda x: (x - 1) & _U64  # noqa: E731
        mul = lambda x, y: (x * y) & _U64  # noqa: E731
        return mul(add(value), dec(value))


class StringConcateCase(BenchmarkCase):
    test_type = TestType.StringConcate

    def __init__(self) -> None:
        self._text = ""

    def execute(self, value: int) -> int:
        if len(self._text) > 32768:
            self._text = ""
        self._text += str(value) * 4
        return len(self._text)


class SieveOfEratosthenesCase(BenchmarkCase):
    test_type = TestType.SieveOfEratosthenes

    def execute(self, value: int) -> int:
        return _sieve()[value % _SIEVE_SIZE]


class ColorBrightnessCorrectionCase(BenchmarkCase):
    test_type = TestType.ColorBrightnessCorrection

    def execute(self, value: int) -> int:
        brightness = float(value % 10 + 1)
        r, g, b = (int(channel * brightness) for channel in _channels(value))
        return _pack_color(r, g, b)


class ColorRGBCorrectionCase(BenchmarkCase):
    test_type = TestType.ColorRGBCorrection

    def execute(self, value: int) -> int:
        r, g, b = _channels(value)
        return _pack_color(
            r * (value % 10 + 1),
            g * (value % 20 + 1),
            b * (value % 30 + 1),
        )


_CASES: dict[TestType, type[BenchmarkCase]] = {
    cls.test_type: cls
    for cls in (
        Base64Case,
        EmptyCallCase,
        MergeSortCase,
        NaiveFactorialCase,
        NaiveFibonacciCase,
        NaiveNWDCase,
        TailCallFibonacciCase,
        TailCallFactorialCase,
        LambdaCase,
        StringConcateCase,
        SieveOfEratosthenesCase,
        ColorBrightnessCorrectionCase,
        ColorRGBCorrectionCase,
    )
}


def create_case(test_type: TestType | int) -> BenchmarkCase:
    """Return a fresh benchmark case of the given type."""
    try:
        kind = TestType(test_type)
    except ValueError:
        raise ValueError(f"unknown test type {test_type!r}") from None
    return _CASES[kind]()