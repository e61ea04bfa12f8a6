"""CLI for the farm weather advisory engine."""
import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_LAT, DEFAULT_LON
from .crops import CROPS_BY_ID
from .report import build_report
from .weather import WeatherServiceError, generate_synthetic_snapshot, load_snapshot


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Farm Weather Advisory")
    p.add_argument("--lat", type=float, default=DEFAULT_LAT)
    p.add_argument("--lon", type=float, default=DEFAULT_LON)
    p.add_argument("--crop", choices=sorted(CROPS_BY_ID), help="Crop for specific precautions")
    p.add_argument("--offline", action="store_true", help="Use a synthetic forecast")
    p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    p.add_argument("--output", help="Also save the JSON report to this path")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.offline:
        snapshot = generate_synthetic_snapshot(args.lat, args.lon)
    else:
        try:
            snapshot = load_snapshot(args.lat, args.lon)
        except WeatherServiceError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    report = build_report(snapshot, args.crop)
    print(report.to_json() if args.json else report.to_text())

    if args.output:
        out = Path(args.output).expanduser().resolve()
        out.write_text(report.to_json(), encoding="utf-8")
        print(f"Saved: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
