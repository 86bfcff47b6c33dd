"""I/O utilities for streaming part bodies."""

import io
import logging
import os
from os import PathLike
from pathlib import Path

log = logging.getLogger(__name__)


class FilePartReader(io.RawIOBase):
    """
    Read-only stream over one byte range of a file.

    ``len()`` returns the size of the range and ``tell()`` the bytes read so far;
    requests derives the Content-Length of a streamed body from both.

    Example:
        with FilePartReader("large.bin", offset=100 * MEGABYTE, length=100 * MEGABYTE) as part:
            upload_part(url_params, part_params, part)
    """

    _fd = None

    def __init__(self, file_path: str | PathLike, offset: int = 0, length: int | None = None):
        """
        :param file_path: the file to read from
        :param offset: start of the range in bytes
        :param length: size of the range in bytes; defaults to the rest of the file
        :raises ValueError: if the range does not lie within the file
        """
        self.file_path = Path(file_path)
        file_size = self.file_path.stat().st_size
        if offset < 0 or offset > file_size:
            raise ValueError(f"Offset {offset} is outside of {self.file_path} ({file_size} bytes)")
        if length is None:
            length = file_size - offset
        if length < 0 or offset + length > file_size:
            raise ValueError(
                f"Range of {length} bytes at offset {offset} exceeds {self.file_path} ({file_size} bytes)"
            )

        self.offset = offset
        self.length = length
        self._position = 0
        self._fd = open(self.file_path, "rb")  # noqa: SIM115
        self._fd.seek(offset, os.SEEK_SET)

    def __len__(self) -> int:
        return self.length

    def readable(self) -> bool:
        return True

    def readinto(self, buffer, /):
        """Read up to len(buffer) bytes of the range into buffer"""
        remaining = self.length - self._position
        if remaining <= 0:
            return 0
        view = memoryview(buffer)[:remaining]
        nbytes_read = self._fd.readinto(view)
        if nbytes_read:
            self._position += nbytes_read
        return nbytes_read

    def tell(self) -> int:
        """Number of bytes read from the range so far"""
        return self._position

    def close(self):
        """Close the underlying file"""
        if self._fd is not None and not self.closed:
            self._fd.close()
        super().close()


class TqdmIOWrapper(io.RawIOBase):
    """
    Wrapper to record reads in a tqdm progress bar.

    Example:
        with FilePartReader(path, offset, length) as part:
            with tqdm(total=len(part), unit="B", unit_scale=True) as pbar:
                upload_part(url_params, part_params, TqdmIOWrapper(part, pbar))
    """

    def __init__(self, io_buf: io.RawIOBase, progress_bar):
        """

        :param io_buf: the buffer to wrap
        :param progress_bar: tqdm progress bar
        """
        self.io_buf = io_buf
        self.callback = progress_bar.update

    def __len__(self) -> int:
        return len(self.io_buf)

    def readable(self) -> bool:
        return True

    def read(self, size=-1) -> bytes | None:
        """Read data from the buffer and update the progress bar"""
        data = self.io_buf.read(size)
        if data:
            self.callback(len(data))

        return data

    def readinto(self, buffer, /):
        """Read data into a buffer and update the progress bar"""
        nbytes_read = self.io_buf.readinto(buffer)
        if nbytes_read:
            self.callback(nbytes_read)

        return nbytes_read

    def tell(self) -> int:
        return self.io_buf.tell()

    def close(self):
        """Close the buffer"""
        # Close the underlying binary IO object
        self.io_buf.close()
        super().close()
