#!/usr/bin/env python3
"""
Identifier Walkthrough - Minting, Rendering and Recovering IDs

Key Concepts:
1. Time-ordered ids pack epoch milliseconds (48 bits) over a 16-bit offset
2. Every id renders losslessly as base-36, base-64 (custom alphabet) and hex
3. Auto-detection picks a format by character class, in a fixed order
4. Uppercase base-64 renderings do not survive auto-detection

Run:
    python examples/id_walkthrough.py
"""

from datetime import datetime, timezone

from idkit import IdService, InvalidFormat, parse_auto_detect
from idkit.kernel.time import TestClockProvider


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


def main() -> None:
    clock = TestClockProvider()
    clock.set_time(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc))
    service = IdService(clock=clock)

    print_section("1. Time-ordered ids")
    for _ in range(3):
        issued = service.issue_time_ordered()
        inspection = service.inspect(issued.value)
        print(
            f"  {issued.value:>20}  ts={inspection.timestamp.isoformat()}  "
            f"offset={inspection.offset}"
        )
    clock.advance_ms(1)
    issued = service.issue_time_ordered()
    print(f"  {issued.value:>20}  (one millisecond later, still larger)")

    print_section("2. Renderings")
    view = service.convert(issued.value)
    print(f"  value:  {view.value}")
    print(f"  base36: {view.base36}")
    print(f"  base64: {view.base64}")
    print(f"  hex:    {view.hex}")

    print_section("3. Auto-detection")
    for text in ["0x1a", "123", "1a", "Az", "a_b"]:
        print(f"  {text!r:>8} -> {parse_auto_detect(text)}")

    print_section("4. Rejected input")
    for text in ["", "a b@c", "0xzz"]:
        try:
            parse_auto_detect(text)
        except InvalidFormat as e:
            print(f"  {text!r:>8} -> {e}")

    print_section("5. Random ids")
    for _ in range(3):
        print(f"  {service.issue_random().view.base64}")


if __name__ == "__main__":
    main()
