from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from decoder import Decoder
from prt7.protocol.codec.encoder import FrameEncoder
from prt7.protocol.frame import LoadFrame, MapFrame
from settings import DecoderSettings, load_settings
from source import SourceError, open_source
from utils.console import ConsoleSink
from utils.eventbus import EventBus


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

EXAMPLE_FRAMES = [
    LoadFrame("H"), LoadFrame("O"), LoadFrame("L"), MapFrame(2), LoadFrame("A"),
    LoadFrame(" "), LoadFrame("W"), MapFrame(-2), LoadFrame("O"), LoadFrame("R"),
    LoadFrame("L"), LoadFrame("D"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prt7",
        description="Decode a PRT-7 frame stream from a simulation file or serial device.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--sim", metavar="FILE", help="replay frames from a simulation file")
    group.add_argument("--serial", metavar="DEVICE", help="read frames from a serial device")
    group.add_argument("path", nargs="?", help="file or device, detected automatically")
    parser.add_argument("--baudrate", type=int, help="serial baud rate (default 9600)")
    parser.add_argument("--config", metavar="FILE", help="JSON settings file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", metavar="FILE", help="also write logs to FILE")
    parser.add_argument("--hide-rotor", action="store_true", help="omit the rotor state from map frame output")
    return parser


def resolve_settings(args: argparse.Namespace) -> DecoderSettings:
    settings = load_settings(args.config)
    update = {}
    if args.sim:
        update.update(source=args.sim, mode="sim")
    elif args.serial:
        update.update(source=args.serial, mode="serial")
    elif args.path:
        update.update(source=args.path, mode="auto")
    if args.baudrate is not None:
        update["baudrate"] = args.baudrate
    if args.log_level:
        update["log_level"] = args.log_level
    if args.log_file:
        update["log_file"] = args.log_file
    if args.hide_rotor:
        update["show_rotor"] = False
    # re-validate so CLI values get the same checks as the file
    return DecoderSettings.model_validate({**settings.model_dump(), **update})


def setup_logging(settings: DecoderSettings) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, mode="w", encoding="utf-8"))
    logging.basicConfig(level=settings.level, format=LOG_FORMAT, handlers=handlers, force=True)


def print_usage(parser: argparse.ArgumentParser) -> None:
    print(parser.format_usage().rstrip())
    print("Example simulation file (one frame per line): " + "  ".join(FrameEncoder.encode_all(EXAMPLE_FRAMES)))
    print("Exiting (no file or serial device given).")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot read settings: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(settings)
    except OSError as e:
        print(f"Cannot open log file: {e}", file=sys.stderr)
        return 2

    print("Starting PRT-7 decoder. Preparing structures...")
    if not settings.source:
        print_usage(parser)
        return 1

    try:
        source = open_source(settings.source, settings.mode, settings.baudrate)
    except SourceError as e:
        logger.error("%s", e)
        print(f"Could not open source: {settings.source}")
        return 1

    bus = EventBus()
    sink = ConsoleSink(bus)
    decoder = Decoder(bus, show_rotor=settings.show_rotor)

    print("Connection established. Waiting for frames...\n")
    with source:
        decoder.run(source)
    sink.close()
    print("Releasing resources... System shut down.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
