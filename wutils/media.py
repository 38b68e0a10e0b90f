"""Reading the duration of an MP4 file from its movie header."""

import struct
from datetime import timedelta
from typing import BinaryIO, Union

_HEADER = struct.Struct(">I4sQ")
_MOOV_PREFIX = 0x100
_TIMESCALE_OFFSET = 0x1C
_DURATION_OFFSET = 0x20

Source = Union[bytes, bytearray, memoryview, BinaryIO]


def _read_at(reader: Source, offset: int, size: int) -> bytes:
    if isinstance(reader, (bytes, bytearray, memoryview)):
        chunk = bytes(reader[offset:offset + size])
    else:
        reader.seek(offset)
        chunk = reader.read(size)
    if len(chunk) < size:
        raise EOFError(f"unexpected end of data at offset {offset}")
    return chunk


def get_mp4_duration(reader: Source) -> timedelta:
    """Return the whole-second duration of an MP4 given as bytes or a binary file.

    Raises EOFError when the data ends before the movie header is read, and
    ValueError for malformed boxes.
    """
    offset = 0
    while True:
        size, fourcc, size64 = _HEADER.unpack(_read_at(reader, offset, _HEADER.size))
        if fourcc == b"moov":
            break
        if fourcc == b"mdat" and size == 1:
            if size64 == 0:
                raise ValueError(f"box with zero size at offset {offset}")
            offset += size64
            continue
        if size == 0:
            raise ValueError(f"box with zero size at offset {offset}")
        offset += size

    moov = _read_at(reader, offset, _MOOV_PREFIX)
    (timescale,) = struct.unpack_from(">I", moov, _TIMESCALE_OFFSET)
    (duration,) = struct.unpack_from(">I", moov, _DURATION_OFFSET)
    if timescale == 0:
        raise ValueError("movie header has a zero time scale")
    return timedelta(seconds=duration // timescale)