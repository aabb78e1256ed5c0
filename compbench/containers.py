"""Records stored in benchmark result files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, TypeVar

from compbench.datastream import DataStream, StreamError
from compbench.enums import (
    ArchitectureType,
    CompilerType,
    ContainerType,
    PlatformType,
    TestType,
)

_E = TypeVar("_E", bound=IntEnum)


def _read_enum(stream: DataStream, enum_type: type[_E]) -> _E:
    raw = stream.read_u8()
    try:
        return enum_type(raw)
    except ValueError:
        raise StreamError(f"invalid {enum_type.__name__} value {raw}") from None


class Container(ABC):
    """A record that can be serialised to and from a data stream."""

    container_type: ClassVar[ContainerType]

    @abstractmethod
    def read_from(self, stream: DataStream) -> None:
        """Fill this record from the stream."""

    @abstractmethod
    def write_to(self, stream: DataStream) -> None:
        """Append this record to the stream."""


@dataclass
class VersionInfo(Container):
    """A major.minor.patch version with byte-sized parts."""

    # The version record carries the compiler-info tag on the wire.
    container_type: ClassVar[ContainerType] = ContainerType.CompilerInfo

    major: int = 0
    minor: int = 0
    patch: int = 0

    def read_from(self, stream: DataStream) -> None:
        self.major = stream.read_u8()
        self.minor = stream.read_u8()
        self.patch = stream.read_u8()

    def write_to(self, stream: DataStream) -> None:
        stream.write_u8(self.major)
        stream.write_u8(self.minor)
        stream.write_u8(self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass
class CompilerInfo(Container):
    """The compiler, its version and the flags a benchmark was built with."""

    container_type: ClassVar[ContainerType] = ContainerType.CompilerInfo

    id: CompilerType = CompilerType.Gcc
    version: VersionInfo = field(default_factory=VersionInfo)
    flags: str = ""

    def read_from(self, stream: DataStream) -> None:
        self.id = _read_enum(stream, CompilerType)
        self.flags = stream.read_string()
        self.version.read_from(stream)

    def write_to(self, stream: DataStream) -> None:
        stream.write_u8(self.id)
        stream.write_string(self.flags)
        self.version.write_to(stream)

    def checksum(self) -> str:
        """Return the value identifying this build configuration."""
        return self.flags


@dataclass
class PlatformInfo(Container):
    """The architecture and operating system a benchmark ran on."""

    container_type: ClassVar[ContainerType] = ContainerType.PlatformInfo

    arch: ArchitectureType = ArchitectureType.ARM
    platform: PlatformType = PlatformType.Linux

    def read_from(self, stream: DataStream) -> None:
        self.arch = _read_enum(stream, ArchitectureType)
        self.platform = _read_enum(stream, PlatformType)

    def write_to(self, stream: DataStream) -> None:
        stream.write_u8(self.arch)
        stream.write_u8(self.platform)


@dataclass
class TestCaseInfo(Container):
    """The measured result of one benchmark case."""

    __test__ = False
    container_type: ClassVar[ContainerType] = ContainerType.TestCaseInfo

    id: TestType = TestType.Base64
    duration: float = 0.0
    count: int = 0
    ips: int = 0

    def read_from(self, stream: DataStream) -> None:
        self.duration = stream.read_double()
        self.count = stream.read_u64()
        self.id = _read_enum(stream, TestType)
        self.ips = stream.read_u64()

    def write_to(self, stream: DataStream) -> None:
        stream.write_double(self.duration)
        stream.write_u64(self.count)
        stream.write_u8(self.id)
        stream.write_u64(self.ips)


@dataclass
class TestCaseContainer(Container):
    """A full benchmark record: compiler, platform and result."""

    __test__ = False
    container_type: ClassVar[ContainerType] = ContainerType.TestCase

    compiler: CompilerInfo = field(default_factory=CompilerInfo)
    platform: PlatformInfo = field(default_factory=PlatformInfo)
    testcase: TestCaseInfo = field(default_factory=TestCaseInfo)

    def read_from(self, stream: DataStream) -> None:
        self.compiler.read_from(stream)
        self.platform.read_from(stream)
        self.testcase.read_from(stream)

    def write_to(self, stream: DataStream) -> None:
        self.compiler.write_to(stream)
        self.platform.write_to(stream)
        self.testcase.write_to(stream)


_FACTORY: dict[ContainerType, type[Container]] = {
    ContainerType.CompilerInfo: CompilerInfo,
    ContainerType.PlatformInfo: PlatformInfo,
    ContainerType.TestCaseInfo: TestCaseInfo,
    ContainerType.TestCase: TestCaseContainer,
    ContainerType.VersionInfo: VersionInfo,
}


def create_container(container_type: ContainerType | int) -> Container:
    """Return an empty record of the given type."""
    try:
        kind = ContainerType(container_type)
    except ValueError:
        raise ValueError(f"unknown container type {container_type!r}") from None
    return _FACTORY[kind]()