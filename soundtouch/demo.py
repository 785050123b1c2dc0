"""SoundTouch demo – print what a speaker reports about itself.

Usage:
    soundtouch-demo 192.168.1.100
    soundtouch-demo 192.168.1.100 --timeout 5 --debug
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .api import SoundTouchClient
from .const import DEFAULT_PORT, DEFAULT_TIMEOUT
from .exceptions import SoundTouchError


class Colors:
    GREEN = "\033[92m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def print_header(text: str) -> None:
    print(f"\n{Colors.CYAN}{Colors.BOLD}=== {text} ==={Colors.RESET}")


async def run_demo(client: SoundTouchClient) -> None:
    """Query every read endpoint once and print the results."""
    print_header("Device Information")
    info = await client.get_info()
    print(f"Name: {info.name}")
    print(f"Type: {info.type}")
    print(f"Device ID: {info.device_id}")
    print("Network Info:")
    for net in info.network_info:
        print(f"  {net.type}: {net.ip_address} ({net.mac_address})")

    print_header("Capabilities")
    capabilities = await client.get_capabilities()
    for cap in capabilities.capabilities:
        print(f"  {cap.name}: {cap.value if cap.value is not None else cap.url or ''}")

    print_header("Available Sources")
    sources = await client.get_sources()
    for source in sources.sources:
        account = f" ({source.source_account})" if source.source_account else ""
        print(f"  {source.source}{account}: {source.status}")

    print_header("Presets")
    presets = await client.get_presets()
    for preset in presets.presets:
        if preset.content_item is None:
            print(f"  Preset {preset.id}: (empty)")
        else:
            print(f"  Preset {preset.id}: {preset.content_item.item_name or preset.content_item.source}")

    print_header("Volume")
    volume = await client.get_volume()
    print(f"  Current: {volume.actualvolume}")
    print(f"  Target: {volume.targetvolume}")
    print(f"  Muted: {volume.muteenabled}")

    print_header("Now Playing")
    now_playing = await client.get_now_playing()
    print(f"  Source: {now_playing.source}")
    for label, value in (
        ("Track", now_playing.track),
        ("Artist", now_playing.artist),
        ("Album", now_playing.album),
        ("Status", now_playing.play_status.value if now_playing.play_status else None),
    ):
        if value:
            print(f"  {label}: {value}")

    print_header("Bass")
    try:
        bass = await client.get_bass()
    except SoundTouchError:
        print("  Bass control not available on this device")
    else:
        print(f"  Current: {bass.actualbass}")
        print(f"  Target: {bass.targetbass}")
        print(f"  Available: {bass.available if bass.available is not None else 'unknown'}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query a Bose SoundTouch speaker")
    parser.add_argument("host", help="Speaker IP address or hostname")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"HTTP port (default: {DEFAULT_PORT})")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})"
    )
    parser.add_argument("--debug", action="store_true", help="Log every request")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    client = SoundTouchClient(args.host, port=args.port, timeout=args.timeout)
    print(f"Connecting to SoundTouch speaker at {client.base_url}...")
    try:
        asyncio.run(run_demo(client))
    except SoundTouchError as err:
        print(f"{Colors.RED}Error: {err}{Colors.RESET}", file=sys.stderr)
        return 1

    print(f"\n{Colors.GREEN}Demo completed successfully!{Colors.RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
