"""Print sample outputs of the activation functions, driven by config.ini."""
from __future__ import annotations

import configparser
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from neural_nets.activations import hyperbolic_tangent, leaky_relu, relu, sigmoid

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.ini"
DEFAULT_VALUES: Tuple[float, ...] = (0.0, 1.0, -1.0, 2.0, -2.0)
DEFAULT_SLOPE = 0.01

ACTIVATIONS: Dict[str, Callable[..., float]] = {
    "relu": relu,
    "sigmoid": sigmoid,
    "tanh": hyperbolic_tangent,
    "leaky_relu": leaky_relu,
}


def _normalize_config_entry(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    if stripped.lower() in {"", "none"}:
        return None
    return stripped


def _parse_list(value: Optional[str]) -> List[str]:
    normalized = _normalize_config_entry(value)
    if not normalized:
        return []
    return [item.strip() for item in normalized.split(",") if item.strip()]


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"[DEMO] {name} must be a number, got '{value}'") from exc


def load_demo_settings(config_file: str = CONFIG_FILE) -> Tuple[List[float], List[str], float]:
    """
    Read sample values, activation names and the leaky slope from ``config_file``.

    Anything missing (including the file itself) falls back to the defaults.
    """
    config = configparser.ConfigParser()
    if not config.read(config_file):
        logger.info("No config found at %s, using defaults", config_file)
    section = config["DEMO"] if config.has_section("DEMO") else {}

    raw_values = _parse_list(section.get("values"))
    values = [_parse_float("values", v) for v in raw_values] or list(DEFAULT_VALUES)

    names = [name.lower() for name in _parse_list(section.get("activations"))]
    names = names or list(ACTIVATIONS)

    raw_slope = _normalize_config_entry(section.get("leaky_slope"))
    slope = _parse_float("leaky_slope", raw_slope) if raw_slope else DEFAULT_SLOPE

    return values, names, slope


def evaluate(
    name: str, values: Sequence[float], slope: float = DEFAULT_SLOPE
) -> List[Tuple[float, float]]:
    """Apply the activation called ``name`` to each value, returning (value, result) pairs."""
    try:
        func = ACTIVATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown activation '{name}', expected one of {sorted(ACTIVATIONS)}"
        ) from None

    if name == "leaky_relu":
        return [(v, func(v, slope)) for v in values]
    return [(v, func(v)) for v in values]


def build_table(name: str, rows: Sequence[Tuple[float, float]]) -> Table:
    title = f"Testing {name} function"
    table = Table(title=title, min_width=len(title) + 4)
    table.add_column("x", justify="right")
    table.add_column(f"{name}(x)", justify="right")
    for value, result in rows:
        table.add_row(f"{value:g}", f"{result:.8f}")
    return table


def run_demo(
    config_file: str = CONFIG_FILE, console: Optional[Console] = None
) -> Dict[str, List[Tuple[float, float]]]:
    values, names, slope = load_demo_settings(config_file)
    console = console or Console()

    results: Dict[str, List[Tuple[float, float]]] = {}
    for name in names:
        logger.info("Evaluating %s over %d values", name, len(values))
        rows = evaluate(name, values, slope)
        console.print(build_table(name, rows))
        results[name] = rows
    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo(sys.argv[1] if len(sys.argv) > 1 else CONFIG_FILE)
