from __future__ import annotations
import argparse, json, logging, sys
from .binary.errors import FlacError
from .models.stream import FlacStream

def format_text(stream: FlacStream) -> str:
    lines = []
    for block in stream.blocks:
        h = block.header
        lines.append("MetadataBlkHdr:")
        lines.append(f"is_last: {str(h.is_last).lower()}")
        lines.append(f"blk_type: {h.block_type.value}")
        lines.append(f"length: {h.length}")
        si = block.streaminfo
        if si is not None:
            lines.append("Streaminfo:")
            for name in ("min_blk_size", "max_blk_size", "min_frame_size", "max_frame_size",
                         "sample_rate", "num_channels", "bits_per_sample", "total_sample_count"):
                lines.append(f"{name}: {getattr(si, name)}")
            lines.append(f"md5_checksum: 0x{si.md5_hex}")
            # adjusted values (the raw fields above are stored minus one)
            lines.append(f"channels: {si.channel_count}")
            lines.append(f"bit_depth: {si.sample_bit_depth}")
            if si.duration_s is not None:
                lines.append(f"duration_s: {si.duration_s:.3f}")
        lines.append("")
    return "\n".join(lines)

def cmd_info(args):
    strict = not args.permissive
    if args.summary:
        from .binary.reader import summarize_stream
        blocks, nbytes = summarize_stream(args.input, strict_order=strict)
        print(f"blocks={blocks}, metadata_bytes={nbytes}")
        return 0

    f = FlacStream.from_binary(args.input, strict_order=strict)
    if args.json:
        print(json.dumps(f.model_dump(mode="json"), indent=2))
    else:
        print(format_text(f), end="")
    return 0

def cmd_to_json(args):
    f = FlacStream.from_binary(args.input, strict_order=not args.permissive)
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(f.model_dump(mode="json"), out, indent=2)
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="flacmeta", description="FLAC metadata block reader")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print metadata block headers and STREAMINFO")
    sp.add_argument("input", help="Path to .flac file")
    sp.add_argument("--json", action="store_true", help="Print the parsed blocks as JSON")
    sp.add_argument("--summary", action="store_true", help="Print block count and metadata size only")
    sp.add_argument("--permissive", action="store_true", help="Do not require STREAMINFO to be the first block")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="write the parsed blocks to a JSON file")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.add_argument("--permissive", action="store_true")
    sp.set_defaults(func=cmd_to_json)

    return p

def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    _configure_logging(ns.verbose)
    try:
        return ns.func(ns)
    except (FlacError, OSError) as e:
        print(f"flacmeta: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
