"""Detection and description of the build and the machine running a benchmark."""

from __future__ import annotations

import os
import platform
import re
import sysconfig

from compbench.containers import CompilerInfo, PlatformInfo
from compbench.enums import ArchitectureType, CompilerType, PlatformType, name

_VERSION = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?")

_ARCHITECTURES: dict[str, ArchitectureType] = {
    "x86_64": ArchitectureType.x86_64,
    "amd64": ArchitectureType.x86_64,
    "i386": ArchitectureType.x86,
    "i486": ArchitectureType.x86,
    "i586": ArchitectureType.x86,
    "i686": ArchitectureType.x86,
    "x86": ArchitectureType.x86,
}


def _architecture(machine: str) -> ArchitectureType | None:
    machine = machine.lower()
    if machine in _ARCHITECTURES:
        return _ARCHITECTURES[machine]
    if machine.startswith(("arm", "aarch")):
        return ArchitectureType.ARM
    return None


def _build_flags() -> str:
    flags = sysconfig.get_config_var("OPT") or ""
    return " ".join(str(flags).split())


def populate_compiler(container: CompilerInfo) -> None:
    """Fill a compiler record with the compiler and flags of the running interpreter."""
    text = platform.python_compiler()
    container.id = CompilerType.Clang if "clang" in text.lower() else CompilerType.Gcc
    match = _VERSION.search(text)
    groups = match.groups() if match else (None, None, None)
    major, minor, patch = (int(part) & 0xFF if part else 0 for part in groups)
    container.version.major = major
    container.version.minor = minor
    container.version.patch = patch
    container.flags = _build_flags()


def populate_platform(container: PlatformInfo) -> None:
    """Fill a platform record with the architecture and system of this machine."""
    arch = _architecture(platform.machine())
    if arch is not None:
        container.arch = arch
    if os.name == "posix":
        container.platform = PlatformType.Linux


def describe_compiler(container: CompilerInfo) -> str:
    """Return the printable summary of a compiler record."""
    return (
        "Compiler info:\n"
        f"\tcompiler: {name(container.id)}\n"
        f"\tversion: {container.version}\n"
        f"\tflags: {container.flags}\n"
        "\n"
    )


def describe_platform(container: PlatformInfo) -> str:
    """Return the printable summary of a platform record."""
    return (
        "Platform info:\n"
        f"\tplatform: {name(container.platform)}\n"
        f"\tarchitecture: {name(container.arch)}\n"
        "\n"
    )