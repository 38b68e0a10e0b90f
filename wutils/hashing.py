"""Hex digests of strings and files."""

import enum
import hashlib
import os
from typing import Union


class HashAlgorithm(enum.IntEnum):
    """Supported digest algorithms."""

    SHA256 = 0
    MD5 = 1


def _new_hash(choice: Union[HashAlgorithm, int]):
    if choice == HashAlgorithm.MD5:
        return hashlib.md5()
    return hashlib.sha256()


def sum_string(data: Union[str, bytes], choice: Union[HashAlgorithm, int] = HashAlgorithm.SHA256) -> str:
    """Return the hex digest of the data; unknown choices fall back to SHA-256."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    digest = _new_hash(choice)
    digest.update(raw)
    return digest.hexdigest()


def sum_file(path: Union[str, os.PathLike], choice: Union[HashAlgorithm, int] = HashAlgorithm.SHA256) -> str:
    """Return the hex digest of the file's contents."""
    digest = _new_hash(choice)
    with open(path, "rb") as handle:
        for block in iter(lambda: handle.read(65536), b""):
            digest.update(block)
    return digest.hexdigest()


def compare_file(path1: Union[str, os.PathLike], path2: Union[str, os.PathLike]) -> bool:
    """Report whether two files have the same size and MD5 digest."""
    if os.path.getsize(path1) != os.path.getsize(path2):
        return False
    return sum_file(path1, HashAlgorithm.MD5) == sum_file(path2, HashAlgorithm.MD5)