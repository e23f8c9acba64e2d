from __future__ import annotations

from dataclasses import dataclass

from fnv1a.core.errors import InvalidConfiguration


@dataclass(frozen=True)
class FnvParams:
    """Width, prime and offset basis of one FNV-1a configuration."""

    width: int
    prime: int
    offset_basis: int

    def __post_init__(self) -> None:
        if self.width not in CANONICAL:
            supported = ", ".join(str(w) for w in sorted(CANONICAL))
            raise InvalidConfiguration(
                f"Unsupported FNV width {self.width!r} (expected one of {supported})."
            )
        for field_name in ("prime", "offset_basis"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(
                    f"{field_name} must be an integer, got {type(value).__name__}."
                )
            if not 0 <= value <= self.mask:
                raise InvalidConfiguration(
                    f"{field_name} {value:#x} does not fit in {self.width} bits."
                )
        if self.offset_basis == 0:
            raise InvalidConfiguration("The offset basis must be non-zero.")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def digest_size(self) -> int:
        return self.width // 8


# (prime, offset basis) per width, from the FNV reference tables.
CANONICAL: dict[int, tuple[int, int]] = {
    32: (2**24 + 2**8 + 0x93, 0x811C9DC5),
    64: (2**40 + 2**8 + 0xB3, 0xCBF29CE484222325),
    128: (2**88 + 2**8 + 0x3B, 0x6C62272E07BB014262B821756295C58D),
    256: (
        2**168 + 2**8 + 0x63,
        0xDD268DBCAAC550362D98C384C4E576CCC8B1536847B6BBB31023B4C8CAEE0535,
    ),
    512: (
        2**344 + 2**8 + 0x57,
        int(
            "b86db0b1171f4416dca1e50f309990acac87d059c90000000000000000000d21"
            "e948f68a34c192f62ea79bc942dbe7ce182036415f56e34bac982aac4afe9fd9",
            16,
        ),
    ),
    1024: (
        2**680 + 2**8 + 0x8D,
        int(
            "5f7a76758ecc4d32e56d5a591028b74b29fc4223fdada16c3bf34eda3674da9a"
            "21d9000000000000000000000000000000000000000000000000000000000000"
            "000000000000000000000000000000000000000004c6d7eb6e73802734510a55"
            "5f256cc005ae556bde8cc9c6a93b21aff4b16c71ee90b3",
            16,
        ),
    ),
}

SUPPORTED_WIDTHS = tuple(sorted(CANONICAL))


def params_for(
    width: int = 32,
    prime: int | None = None,
    offset_basis: int | None = None,
) -> FnvParams:
    """Canonical parameters for ``width``, with optional overrides."""
    try:
        default_prime, default_offset = CANONICAL[width]
    except (KeyError, TypeError):
        raise InvalidConfiguration(f"Unsupported FNV width {width!r}.") from None
    return FnvParams(
        width=width,
        prime=default_prime if prime is None else prime,
        offset_basis=default_offset if offset_basis is None else offset_basis,
    )
