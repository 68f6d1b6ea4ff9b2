"""Periodically send local system stats to an OSC endpoint.

Usage:
    osc-sysinfo                      # everything, every 3s, to 127.0.0.1:9000
    osc-sysinfo --no-gpu -i 5
    osc-sysinfo --host 192.168.1.20 --port 9000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys

from pydantic import ValidationError

from osc_sysinfo import __version__
from osc_sysinfo.config import VRCHAT_CHATBOX_ADDRESS, Settings
from osc_sysinfo.formatting import MessageFormatter
from osc_sysinfo.osc.sender import OscSender
from osc_sysinfo.reporter import StatusReporter
from osc_sysinfo.sampler import create_sampler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("osc_sysinfo")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"{number} is not in 1..")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osc-sysinfo",
        description="Send CPU, RAM and GPU usage to an OSC chat box.",
    )
    parser.add_argument("-t", "--no-time", action="store_true", help="Do not show time")
    parser.add_argument("-c", "--no-cpu", action="store_true", help="Do not show cpu usage")
    parser.add_argument("-r", "--no-ram", action="store_true", help="Do not show ram usage")
    parser.add_argument("-g", "--no-gpu", action="store_true", help="Do not show gpu usage")
    parser.add_argument(
        "-i", "--interval", type=_positive_int, default=None,
        help="Time interval in seconds (default: 3)",
    )
    parser.add_argument("--host", default=None, help="Destination host (default: 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, default=None, help="Destination port (default: 9000)")
    parser.add_argument(
        "--address", default=None,
        help=f"OSC address to send to (default: {VRCHAT_CHATBOX_ADDRESS})",
    )
    parser.add_argument("--gpu-index", type=int, default=None, help="GPU to sample (default: 0)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Command-line values win over environment and ``.env``."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "address": args.address,
        "interval": args.interval,
        "gpu_index": args.gpu_index,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    for flag, field in (
        ("no_time", "show_time"),
        ("no_cpu", "show_cpu"),
        ("no_ram", "show_ram"),
        ("no_gpu", "show_gpu"),
    ):
        if getattr(args, flag):
            overrides[field] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings(**overrides)


def build_reporter(settings: Settings) -> StatusReporter:
    return StatusReporter(
        sampler=create_sampler(settings),
        formatter=MessageFormatter(settings.sections()),
        sender=OscSender(
            settings.host,
            settings.port,
            address=settings.address,
            immediate=settings.immediate,
        ),
        interval=settings.interval,
    )


async def _serve(reporter: StatusReporter) -> None:
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()
    try:
        loop.add_signal_handler(signal.SIGTERM, task.cancel)
    except NotImplementedError:
        # Windows event loops have no signal handler support
        pass
    try:
        await reporter.run()
    except asyncio.CancelledError:
        logger.debug("Reporter cancelled")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    sections = settings.sections()
    if not sections:
        logger.warning("All sections disabled, nothing will be sent")
    logger.info(
        "Sending %s to %s:%d%s every %ds",
        ", ".join(sections) or "nothing",
        settings.host,
        settings.port,
        settings.address,
        settings.interval,
    )

    reporter = build_reporter(settings)
    try:
        asyncio.run(_serve(reporter))
    except KeyboardInterrupt:
        pass
    logger.info("bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
