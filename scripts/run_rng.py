"""Command line harness for the SimpleRNG deterministic draw runner."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "rng_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from simple_rng import DEFAULT_SEED, DrawConfig, run_draws
from simple_rng.draws import DRAW_KINDS


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed hex integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a decimal or 0x-prefixed integer, received '{value}'."
        ) from exc


def _parse_items(value: str) -> tuple[str, ...]:
    """Parse a comma-separated item list for shuffling."""

    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw deterministic samples from the SimpleRNG generator")
    parser.add_argument(
        "--kind",
        choices=DRAW_KINDS,
        default="uint",
        help="Sampler to draw from",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of draws to take")
    parser.add_argument("--min", dest="minimum", type=int, default=0, help="Inclusive lower bound for --kind int")
    parser.add_argument("--max", dest="maximum", type=int, default=100, help="Exclusive upper bound for --kind int")
    parser.add_argument(
        "--items",
        type=_parse_items,
        default=(),
        help="Comma-separated items for --kind shuffle (e.g. a,b,c)",
    )
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=None,
        help="Combined seed split into (seed >> 16, seed & 0xFFFFFFFF); overrides --seed-w/--seed-z",
    )
    parser.add_argument("--seed-w", dest="seed_w", type=_parse_int, default=DEFAULT_SEED.w, help="Seed w half")
    parser.add_argument("--seed-z", dest="seed_z", type=_parse_int, default=DEFAULT_SEED.z, help="Seed z half")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "rng_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Emit progress logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = DrawConfig(
            seed_w=args.seed_w,
            seed_z=args.seed_z,
            combined_seed=args.seed,
            kind=args.kind,
            count=args.count,
            minimum=args.minimum,
            maximum=args.maximum,
            items=args.items,
        )
    except ValueError as exc:
        parser.error(str(exc))

    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
