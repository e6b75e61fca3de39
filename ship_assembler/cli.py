from __future__ import annotations
import argparse, random, sys
from typing import Any, Dict, List, Optional

from .config import ConfigError, apply_cli_overrides, load_configs
from .loader import PartsFileNotFoundError, PartsFileUnreadableError, load_lines
from .report import MissingCategoryError, render_report
from .ship import assemble_ship


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ship-assembler",
        description="Load part lines, shuffle them and print the assembled ship",
    )
    p.add_argument("input_file", nargs="?", default=None,
                   help="Parts file, one part per line (default: vehicle_parts.txt)")
    p.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible ship")
    p.add_argument("--split-wings", dest="split_wings", action="store_true", default=None,
                   help="Report the first two wing parts as small and large wings")
    p.add_argument("--no-split-wings", dest="split_wings", action="store_false", default=None,
                   help="Report the single wings part even if a config enables split wings")
    p.add_argument("--config", type=str, action="append", default=[], help="YAML/JSON config files (merged)")
    return p.parse_args(argv)


def _settings(args: argparse.Namespace) -> Dict[str, Any]:
    cfg = load_configs(args.config)
    cfg = apply_cli_overrides(cfg, {
        "parts_file": args.input_file,
        "seed": args.seed,
        "split_wings": args.split_wings,
    })
    seed = cfg.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"seed must be an integer, got {seed!r}")
    if not isinstance(cfg.get("split_wings"), bool):
        raise ConfigError(f"split_wings must be true or false, got {cfg.get('split_wings')!r}")
    return cfg


def run(args: argparse.Namespace) -> str:
    """Load, assemble and render; returns the report text."""
    cfg = _settings(args)
    seed: Optional[int] = cfg.get("seed")
    rng = random.Random(seed) if seed is not None else None

    parts: List[str] = load_lines(str(cfg["parts_file"]))
    ship = assemble_ship(parts, rng=rng)
    return render_report(ship, split_wings=cfg["split_wings"])


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        report = run(args)
    except (PartsFileNotFoundError, PartsFileUnreadableError, MissingCategoryError, ConfigError) as ex:
        print(f'Exception: "{ex}"', file=sys.stderr)
        return 1
    print(report, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
