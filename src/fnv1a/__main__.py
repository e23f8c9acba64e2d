from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from fnv1a.core.config import AppConfig, load_config, parse_int
from fnv1a.core.errors import HarnessCancelled, InvalidConfiguration
from fnv1a.core.fnv_hash import Fnv1aHash, hash_file
from fnv1a.core.params import SUPPORTED_WIDTHS, params_for
from fnv1a.harness.vector_sets import CheckVectorSet, GreetingVectorSet
from fnv1a.infrastructure.sink import LineSink

DEFAULT_CONFIG = "config/settings.json"

log = logging.getLogger("fnv1a")


def _load_app_config(args: argparse.Namespace) -> AppConfig:
    path = Path(args.config)
    if not path.exists() and args.config == DEFAULT_CONFIG:
        log.debug("no config at %s, using defaults", path)
        return AppConfig()
    return load_config(path)


def _format(value: int, digest_size: int, as_hex: bool) -> str:
    if as_hex:
        return f"0x{value:0{digest_size * 2}x}"
    return str(value)


def cmd_hash(args: argparse.Namespace) -> int:
    config = _load_app_config(args)
    params = params_for(
        args.width or config.width,
        parse_int(args.prime, "prime") if args.prime is not None else config.prime,
        parse_int(args.offset_basis, "offset_basis") if args.offset_basis is not None else config.offset_basis,
    )
    if args.file:
        h = hash_file(args.file, chunk_size=config.chunk_size, params=params)
        log.debug("hashed %s with %s", args.file, h.name)
    else:
        text = args.text.lower() if args.lower else args.text
        h = Fnv1aHash(text.encode("utf-8"), params=params)
    as_hex = args.hex or config.output_format == "hex"
    print(_format(h.intdigest(), h.digest_size, as_hex))
    return 0


def cmd_vectors(args: argparse.Namespace) -> int:
    config = _load_app_config(args)
    fmt = "hex" if args.hex else config.output_format
    vset = GreetingVectorSet(
        sink=LineSink(sys.stdout, logger=log.debug),
        params=config.hash_params(),
        fmt=fmt,
        logger=log.debug,
    )
    if args.use_async:
        asyncio.run(vset.perform_async())
    else:
        vset.perform()
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    widths = (args.width,) if args.width else None
    vset = CheckVectorSet(
        sink=LineSink(sys.stdout, logger=log.debug),
        widths=widths,
        logger=log.warning,
    )
    failures = vset.perform()
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fnv1a", description="FNV-1a hashing tools")
    parser.add_argument("--config", default=DEFAULT_CONFIG)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="cmd")

    hash_cmd = sub.add_parser("hash", help="hash text or a file")
    source = hash_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="UTF-8 text to hash")
    source.add_argument("--file", help="hash the bytes of this file")
    hash_cmd.add_argument("--width", type=int, choices=SUPPORTED_WIDTHS)
    hash_cmd.add_argument("--hex", action="store_true", help="print as hex")
    hash_cmd.add_argument("--lower", action="store_true", help="lowercase text first (Wwise IDs)")
    hash_cmd.add_argument("--prime", help="override prime (decimal or 0x hex)")
    hash_cmd.add_argument("--offset-basis", help="override offset basis (decimal or 0x hex)")
    hash_cmd.set_defaults(func=cmd_hash)

    vectors = sub.add_parser("vectors", help='print hashes of "hi" and "hello"')
    vectors.add_argument("--async", dest="use_async", action="store_true", help="write through the async path")
    vectors.add_argument("--hex", action="store_true", help="print as hex")
    vectors.set_defaults(func=cmd_vectors)

    check = sub.add_parser("check", help="verify published FNV-1a vectors")
    check.add_argument("--width", type=int, choices=SUPPORTED_WIDTHS)
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.cmd is None:
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except InvalidConfiguration as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except HarnessCancelled as exc:
        print(f"cancelled: {exc}", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
