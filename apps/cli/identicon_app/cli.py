"""CLI entrypoints for rendering identicons and managing settings."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from identicon_core import AppConfig, config_path, configure_logging, get_logger, load_config, save_config
from identicon_renderer import (
    Identicon,
    IdenticonError,
    cell_grid,
    create_hash_from_string,
    hash_value,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _channels(value: str) -> list[float]:
    try:
        channels = [float(part) for part in value.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated numbers, got {value!r}") from None
    if len(channels) not in (3, 4):
        raise argparse.ArgumentTypeError("expected 3 or 4 channels")
    return [int(c) if c.is_integer() else c for c in channels]


def _config_file(args: argparse.Namespace) -> Path:
    return Path(args.config).expanduser() if args.config else config_path()


def _input_hash(args: argparse.Namespace) -> str:
    if args.text:
        return hash_value(args.value, args.algorithm)
    return args.value


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    options = cfg.render.to_options(
        size=args.size,
        margin=args.margin,
        format=args.format,
        background=args.background,
        foreground=args.foreground,
    )
    icon = Identicon(_input_hash(args), options)

    if args.encoding == "base64":
        payload: bytes | str = icon.to_base64()
    elif args.encoding == "data-url":
        payload = icon.data_url()
    else:
        payload = icon.encode()

    if args.out:
        out = Path(args.out).expanduser()
        if isinstance(payload, bytes):
            out.write_bytes(payload)
        else:
            out.write_text(payload, encoding="utf-8")
        get_logger().info(f"wrote {out}", extra={"event": "identicon_written"})
        _print_json({"hash": icon.hash, "mime_type": icon.mime_type, "out": str(out), "size": options.size})
        return 0

    if isinstance(payload, bytes):
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
    else:
        print(payload)
    return 0


def cmd_hash(args: argparse.Namespace) -> int:
    if args.legacy:
        print(create_hash_from_string(args.value))
    else:
        print(hash_value(args.value, args.algorithm))
    return 0


def cmd_grid(args: argparse.Namespace) -> int:
    for row in cell_grid(_input_hash(args)):
        print("".join("#" if filled else "." for filled in row))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = _config_file(args)
    if args.config_cmd == "init":
        if path.exists() and not args.force:
            print(f"config already exists: {path}", file=sys.stderr)
            return 1
        save_config(AppConfig(), path)
    _print_json({"path": str(path), "config": asdict(load_config(path))})
    return 0


def _add_input_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("value", help="Hex hash, or any text with --text")
    cmd.add_argument("--text", action="store_true", help="Hash the value before rendering")
    cmd.add_argument("--algorithm", default="md5", help="hashlib algorithm used with --text")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="identicon", description="Deterministic identicon renderer")
    parser.add_argument("--config", default=None, help="Optional settings file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to the console")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render an identicon")
    _add_input_args(render_cmd)
    render_cmd.add_argument("--size", type=int, default=None)
    render_cmd.add_argument("--margin", type=float, default=None)
    render_cmd.add_argument("--format", default=None, help="png (default) or svg")
    render_cmd.add_argument("--background", type=_channels, default=None, help="r,g,b[,a]")
    render_cmd.add_argument("--foreground", type=_channels, default=None, help="r,g,b[,a]")
    render_cmd.add_argument("--encoding", choices=["raw", "base64", "data-url"], default="raw")
    render_cmd.add_argument("--out", default=None, help="Write output to a file")
    render_cmd.set_defaults(func=cmd_render)

    hash_cmd = sub.add_parser("hash", help="Print the hash of a value")
    hash_cmd.add_argument("value")
    hash_cmd.add_argument("--algorithm", default="md5")
    hash_cmd.add_argument("--legacy", action="store_true", help="Use the 32-bit legacy string hash")
    hash_cmd.set_defaults(func=cmd_hash)

    grid_cmd = sub.add_parser("grid", help="Print the 5x5 pattern as text")
    _add_input_args(grid_cmd)
    grid_cmd.set_defaults(func=cmd_grid)

    config_cmd = sub.add_parser("config", help="Show or create the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("show", help="Print effective settings")
    init_cmd = config_sub.add_parser("init", help="Write default settings")
    init_cmd.add_argument("--force", action="store_true", help="Overwrite an existing file")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_config(_config_file(args))
    configure_logging(
        keep_files=cfg.logging.keep_files,
        console=args.verbose or cfg.logging.console,
        level="DEBUG" if args.verbose else cfg.logging.level,
        file=cfg.logging.file,
    )
    try:
        return int(args.func(args))
    except IdenticonError as exc:
        get_logger().error(str(exc), extra={"event": "render_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
