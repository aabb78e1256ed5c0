"""Reading and writing sequences of tagged records in result files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from compbench.containers import Container, create_container
from compbench.datastream import DataStream, StreamError


class ContainerReader:
    """Reads tagged records from a result file, one at a time."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.file_path = Path(file_path)
        self._stream = DataStream(self.file_path.read_bytes())

    def read(self) -> Container | None:
        """Return the next record, or None once the file is exhausted."""
        if self._stream.at_end():
            return None
        tag = self._stream.read_u8()
        try:
            container = create_container(tag)
        except ValueError:
            raise StreamError(f"unknown container tag {tag}") from None
        container.read_from(self._stream)
        return container

    def __iter__(self) -> Iterator[Container]:
        while (container := self.read()) is not None:
            yield container


class ContainerWriter:
    """Collects tagged records and writes them to a file when closed.

    The file is created (or truncated) as soon as the writer is made.
    """

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.file_path = Path(file_path)
        self._file: BinaryIO | None = open(self.file_path, "wb")
        self._stream = DataStream()

    def write(self, container: Container) -> None:
        """Append a record, preceded by its type tag."""
        if self._file is None:
            raise ValueError("writer is closed")
        self._stream.write_u8(container.container_type)
        container.write_to(self._stream)

    def close(self) -> None:
        """Flush every collected record to the file and close it."""
        if self._file is None:
            return
        try:
            self._file.write(self._stream.to_bytes())
        finally:
            self._file.close()
            self._file = None

    def __enter__(self) -> ContainerWriter:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def read_containers(file_path: str | os.PathLike[str]) -> Iterator[Container]:
    """Yield every record stored in a result file."""
    yield from ContainerReader(file_path)