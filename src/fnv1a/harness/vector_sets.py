from __future__ import annotations

from typing import Callable

from fnv1a.core.fnv_hash import Fnv1aHash
from fnv1a.core.params import FnvParams, params_for
from fnv1a.infrastructure.cancellation import CancellationToken
from fnv1a.infrastructure.sink import LineSink

# Published FNV-1a values, as big-endian hex of the integer result.
PUBLISHED_VECTORS: dict[int, dict[str, str]] = {
    32: {
        "": "811c9dc5",
        "a": "e40c292c",
        "foobar": "bf9cf968",
        "hi": "683af69a",
        "hello": "4f9f2cab",
        "Binary Refinery": "b5772bec",
    },
    64: {
        "": "cbf29ce484222325",
        "a": "af63dc4c8601ec8c",
        "foobar": "85944171f73967e8",
        "hello": "a430d84680aabd0b",
        "Binary Refinery": "33fb62ed8c29c76c",
    },
    128: {
        "": "6c62272e07bb014262b821756295c58d",
        "Binary Refinery": "c1554aaccb9c92213e001d3679bfd5cc",
    },
    256: {
        "Binary Refinery": (
            "4ca8a711a068a687e653c31a183667b80df784171f30687f45f1f633b0afef0c"
        ),
    },
    512: {
        "Binary Refinery": (
            "160fefb00021a45b740be7ab388cbc9dc95c1171e46cd7d31331e53ea6a997b4"
            "1c445e31a66ecafe4caa37573d453fd35d899df4e8cd5d56df3473a1d29124f4"
        ),
    },
    1024: {
        "Binary Refinery": (
            "2cba95fe08e491cf206f2d539d1e2b194db80538c7abb218524325ac9587c061"
            "91ed8b4be0a1954d557a84000000000000000000000000000000000000000000"
            "000000000000000000000000000d7695ccc37057a39892f0ad3620e438ff7624"
            "2e382f46f8626b37c044da017740d9ebde0d16a510213039f50401c0b3b8d258"
        ),
    },
}


class VectorSet:
    """Base class for a batch of test-vector lines written to a sink."""

    def __init__(
        self,
        sink: LineSink | None = None,
        params: FnvParams | None = None,
        fmt: str = "dec",
        logger: Callable[[str], None] | None = None,
    ) -> None:
        if fmt not in ("dec", "hex"):
            raise ValueError(f"Unknown output format: {fmt!r}")
        self.sink = sink or LineSink(logger=logger)
        self.params = params or params_for(32)
        self.fmt = fmt
        self._logger = logger

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger(message)

    def lines(self) -> list[str]:
        raise NotImplementedError

    def perform(self) -> None:
        for line in self.lines():
            self.sink.write_line(line)

    async def perform_async(self, token: CancellationToken | None = None) -> None:
        for line in self.lines():
            await self.sink.write_line_async(line, token)

    def format_value(self, value: int) -> str:
        if self.fmt == "hex":
            return f"0x{value:0{self.params.digest_size * 2}x}"
        return str(value)

    def hash_once(self, text: str) -> int:
        return Fnv1aHash(text.encode("utf-8"), params=self.params).intdigest()

    def hash_bytewise(self, text: str) -> int:
        h = Fnv1aHash(params=self.params)
        for b in text.encode("utf-8"):
            h.update_byte(b)
        return h.intdigest()


class GreetingVectorSet(VectorSet):
    """Hashes "hi" and "hello" through the one-shot and byte-wise paths."""

    inputs = ("hi", "hello")

    def lines(self) -> list[str]:
        out: list[str] = []
        for text in self.inputs:
            once = self.hash_once(text)
            bytewise = self.hash_bytewise(text)
            if once != bytewise:
                self._log(f"[VECTORS] path mismatch for {text!r}: {once} != {bytewise}")
            out.append(self.format_value(once))
            out.append(self.format_value(bytewise))
        return out


class CheckVectorSet(VectorSet):
    """Verifies the published vectors for one width or for all of them."""

    def __init__(
        self,
        sink: LineSink | None = None,
        widths: tuple[int, ...] | None = None,
        logger: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__(sink=sink, fmt="hex", logger=logger)
        self.widths = widths or tuple(sorted(PUBLISHED_VECTORS))
        self.failures = 0

    def lines(self) -> list[str]:
        self.failures = 0
        out: list[str] = []
        for width in self.widths:
            params = params_for(width)
            for text, expected in PUBLISHED_VECTORS.get(width, {}).items():
                h = Fnv1aHash(text.encode("utf-8"), params=params)
                actual = h.hexvalue()
                ok = actual == expected
                if not ok:
                    self.failures += 1
                    self._log(f"[CHECK] {h.name} {text!r}: expected {expected}, got {actual}")
                status = "OK" if ok else "FAIL"
                out.append(f"{status} {h.name} {text!r} {actual}")
        return out

    def perform(self) -> int:
        super().perform()
        return self.failures

    async def perform_async(self, token: CancellationToken | None = None) -> int:
        await super().perform_async(token)
        return self.failures
