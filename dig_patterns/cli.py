"""CLI entrypoint: evaluate the pattern catalog and print a summary.

Resolution order for every option is CLI > ``--config`` JSON file > built-in
default.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
from pathlib import Path
from typing import Sequence

from dig_patterns.config.constants import METRIC_PRECISION, PADDING, SIMULATION_SIZE
from dig_patterns.config.types import SimulationConfig
from dig_patterns.domain.catalog import PATTERN_CATALOG, find_pattern
from dig_patterns.domain.pattern import Pattern
from dig_patterns.io.schemas import RANKABLE_COLUMNS, rank_indices, results_to_table
from dig_patterns.simulation.engine import evaluate_catalog
from dig_patterns.viz.render import render_state_grid
from dig_patterns.viz.text import format_state_grid
from dig_patterns.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

_UNSAFE_NAME_RE = re.compile(r"[^A-Za-z0-9_\-]+")


# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str_list(raw: object, key: str) -> list[str]:
    """Coerce a string or list of strings to a list of strings."""
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return list(raw)
    raise ValueError(f"{key} must be a string or a list of strings")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _parse_sort_by(raw: object) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str) or raw not in RANKABLE_COLUMNS:
        valid = ", ".join(RANKABLE_COLUMNS)
        raise ValueError(f"sort-by must be one of {valid}")
    return raw


def _select_patterns(styles: Sequence[str]) -> tuple[Pattern, ...]:
    """Return catalog patterns for *styles*, or the whole catalog when empty."""
    if not styles:
        return PATTERN_CATALOG
    return tuple(find_pattern(style) for style in styles)


def _slugify(style: str) -> str:
    slug = _UNSAFE_NAME_RE.sub("_", style).strip("_").lower()
    return slug or "pattern"


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Evaluate tile-digging patterns by simulated reveal coverage"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--simulation-size", type=int, default=None)
    parser.add_argument("--padding", type=int, default=None)
    parser.add_argument("--precision", type=int, default=None)
    parser.add_argument(
        "--style",
        action="append",
        default=None,
        help="Evaluate only the named catalog pattern (repeatable)",
    )
    parser.add_argument(
        "--sort-by",
        type=str,
        default=None,
        help=f"Rank patterns by one of: {', '.join(RANKABLE_COLUMNS)}",
    )
    parser.add_argument("--show-grid", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--theme", type=str, default=None, choices=sorted(REGISTERED_THEMES), help="Grid theme"
    )
    parser.add_argument(
        "--render-dir",
        type=Path,
        default=None,
        help="Write one PNG per pattern into this directory",
    )
    parser.add_argument("--skip-invalid", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for catalog evaluation."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = SimulationConfig(
            simulation_size=_get_int(
                args.simulation_size, "simulation_size", file_cfg, SIMULATION_SIZE
            ),
            padding=_get_int(args.padding, "padding", file_cfg, PADDING),
            precision=_get_int(args.precision, "precision", file_cfg, METRIC_PRECISION),
        )
        styles = _coerce_str_list(_get_val(args.style, "styles", file_cfg, []), "styles")
        patterns = _select_patterns(styles)
        sort_by = _parse_sort_by(_get_val(args.sort_by, "sort_by", file_cfg, None))
        show_grid = _get_bool(args.show_grid, "show_grid", file_cfg, True)
        skip_invalid = _get_bool(args.skip_invalid, "skip_invalid", file_cfg, False)
        theme = get_theme(str(_get_val(args.theme, "theme", file_cfg, "default")))
    except ValueError as exc:
        parser.error(str(exc))

    render_dir_raw = _get_val(args.render_dir, "render_dir", file_cfg, None)
    render_dir = Path(str(render_dir_raw)) if render_dir_raw is not None else None

    results = evaluate_catalog(patterns, config, skip_invalid=skip_invalid)
    logger.info("Evaluated %d of %d patterns", len(results), len(patterns))

    if show_grid:
        for result in results:
            print(result.style)
            print(format_state_grid(result.state, theme))
            print()

    if render_dir is not None:
        for index, result in enumerate(results):
            path = render_dir / f"{index:02d}_{_slugify(result.style)}.png"
            render_state_grid(result, path, theme)
            logger.info("Rendered %r to %s", result.style, path)

    if sort_by is not None:
        order = rank_indices(results_to_table(results), sort_by)
        results = [results[index] for index in order]

    summary = {
        "simulation_size": config.simulation_size,
        "padding": config.padding,
        "sort_by": sort_by,
        "patterns": [result.to_summary(config.precision) for result in results],
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
