from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from fnv1a.core.errors import InsufficientCapacity
from fnv1a.core.params import FnvParams, params_for

DEFAULT_CHUNK_SIZE = 65536


class Fnv1aHash:
    """Incremental FNV-1a hash over a fixed-width accumulator.

    Each input byte is XORed into the accumulator, which is then multiplied by
    the prime modulo ``2**width``. The digest is the accumulator encoded
    little-endian in ``width // 8`` bytes.

    An instance is not safe to update from several threads at once; use one
    instance per thread.
    """

    block_size = 1

    def __init__(
        self,
        data: bytes = b"",
        *,
        width: int = 32,
        prime: int | None = None,
        offset_basis: int | None = None,
        params: FnvParams | None = None,
    ) -> None:
        if params is None:
            params = params_for(width, prime, offset_basis)
        self._params = params
        self._prime = params.prime
        self._mask = params.mask
        self._hash = params.offset_basis
        if data:
            self.update(data)

    @property
    def params(self) -> FnvParams:
        return self._params

    @property
    def width(self) -> int:
        return self._params.width

    @property
    def prime(self) -> int:
        return self._params.prime

    @property
    def offset_basis(self) -> int:
        return self._params.offset_basis

    @property
    def digest_size(self) -> int:
        return self._params.digest_size

    @property
    def name(self) -> str:
        return f"fnv1a_{self._params.width}"

    def reset(self) -> None:
        self._hash = self._params.offset_basis

    def update(self, data) -> Fnv1aHash:
        """Fold ``data`` into the accumulator, byte by byte in order."""
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing (see hash_text).")
        if not isinstance(data, (bytes, bytearray)):
            data = memoryview(data).cast("B")
        h = self._hash
        prime = self._prime
        mask = self._mask
        for b in data:
            h ^= b
            h = (h * prime) & mask
        self._hash = h
        return self

    def update_byte(self, value: int) -> Fnv1aHash:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range: {value!r}")
        self._hash = ((self._hash ^ value) * self._prime) & self._mask
        return self

    def finalize(self) -> bytes:
        return self._hash.to_bytes(self._params.digest_size, "little")

    digest = finalize

    def finalize_into(self, buffer) -> int:
        """Write the digest into ``buffer`` and return the number of bytes written.

        Raises InsufficientCapacity, leaving the buffer untouched, when it is
        shorter than ``digest_size``.
        """
        view = memoryview(buffer).cast("B")
        size = self._params.digest_size
        if len(view) < size:
            raise InsufficientCapacity(size, len(view))
        view[:size] = self.finalize()
        return size

    def try_finalize_into(self, buffer) -> tuple[bool, int]:
        try:
            return True, self.finalize_into(buffer)
        except InsufficientCapacity:
            return False, 0

    def intdigest(self) -> int:
        return self._hash

    def hexdigest(self) -> str:
        return self.finalize().hex()

    def hexvalue(self) -> str:
        return f"{self._hash:0{self._params.digest_size * 2}x}"

    def copy(self) -> Fnv1aHash:
        clone = Fnv1aHash(params=self._params)
        clone._hash = self._hash
        return clone

    def __repr__(self) -> str:
        return f"<{self.name} 0x{self.hexvalue()}>"


def Fnv1a32(data: bytes = b"", *, prime: int | None = None, offset_basis: int | None = None) -> Fnv1aHash:
    return Fnv1aHash(data, width=32, prime=prime, offset_basis=offset_basis)


def Fnv1a64(data: bytes = b"", *, prime: int | None = None, offset_basis: int | None = None) -> Fnv1aHash:
    return Fnv1aHash(data, width=64, prime=prime, offset_basis=offset_basis)


def fnv1a(
    data: bytes,
    width: int = 32,
    *,
    prime: int | None = None,
    offset_basis: int | None = None,
) -> int:
    """One-shot FNV-1a; returns the hash as an unsigned integer."""
    return Fnv1aHash(data, width=width, prime=prime, offset_basis=offset_basis).intdigest()


def fnv1a_32(data: bytes) -> int:
    return fnv1a(data, 32)


def fnv1a_64(data: bytes) -> int:
    return fnv1a(data, 64)


def fnv1a_digest(data: bytes, width: int = 32) -> bytes:
    return Fnv1aHash(data, width=width).finalize()


def hash_text(
    text: str,
    width: int = 32,
    *,
    encoding: str = "utf-8",
    lower: bool = False,
) -> int:
    # Wwise event and media IDs hash the lowercased name.
    if lower:
        text = text.lower()
    return fnv1a(text.encode(encoding), width)


def hash_stream(
    fp: BinaryIO,
    width: int = 32,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    params: FnvParams | None = None,
) -> Fnv1aHash:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    h = Fnv1aHash(width=width, params=params)
    while True:
        chunk = fp.read(chunk_size)
        if not chunk:
            break
        h.update(chunk)
    return h


def hash_file(
    path: Path | str,
    width: int = 32,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    params: FnvParams | None = None,
) -> Fnv1aHash:
    with Path(path).open("rb") as fp:
        return hash_stream(fp, width, chunk_size=chunk_size, params=params)
