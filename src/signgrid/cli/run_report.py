"""Grid report execution logic.

Generates one grid, analyzes it and renders the table. ``main`` parses
arguments; ``run_grid_report`` is the real implementation and can be
called directly.
"""

import sys
import json
import logging
import argparse
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any

from pydantic import ValidationError

from signgrid.contracts import assert_global_min
from signgrid.grid.generator import GridGenerator, InvalidDimension
from signgrid.grid.minimum import find_global_min
from signgrid.report.table import RenderOptions, default_use_colors, render
from signgrid.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to a Python file defining a CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("signgrid_user_config", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with the report."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", level)


def run_grid_report(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    stream=None,
    verbose: bool = False,
) -> list:
    """Generate, analyze and render one grid.

    1. Resolves configuration (Param < User < CLI)
    2. Generates the grid
    3. Checks the minimum locator contract
    4. Renders the table to ``stream``

    Parameters
    ----------
    user_config_path : str, optional
        Python file with a CONFIG dict. Defaults only when omitted.
    cli_args : dict, optional
        Overrides. Keys: rows, cols, min_value, max_value, seed,
        use_colors, log_level. None values are ignored.
    stream : file-like, optional
        Report destination, stdout by default. Also decides the color
        default when ``use_colors`` is not configured.
    verbose : bool, optional
        DEBUG logging and the resolved config dumped to stderr.

    Returns
    -------
    list of list of int
        The generated grid.

    Raises
    ------
    FileNotFoundError, ValueError
        Bad config file.
    ValidationError
        Invalid configuration values.
    InvalidDimension
        Non-positive grid dimensions.
    """
    stream = sys.stdout if stream is None else stream

    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    configure_logging(config.logging.level)

    if verbose:
        print(json.dumps(config.model_dump(), indent=2), file=sys.stderr)

    grid = GridGenerator(config).generate()
    assert_global_min(grid, find_global_min(grid))

    use_colors = config.renderer.use_colors
    if use_colors is None:
        use_colors = default_use_colors(stream)
    render(grid, RenderOptions(use_colors=use_colors), stream=stream)

    return grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signgrid",
        description="Generate a random integer grid and report sign runs and the global minimum",
    )
    parser.add_argument("--config", help="Path to user config file (Python file with CONFIG dict)")
    parser.add_argument("--rows", type=int, help="Number of rows (default 10)")
    parser.add_argument("--cols", type=int, help="Number of columns (default 10)")
    parser.add_argument("--min-value", type=int, help="Inclusive lower bound (default -100)")
    parser.add_argument("--max-value", type=int, help="Inclusive upper bound (default 100)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible grid")
    parser.add_argument("--color", dest="use_colors", action="store_true", default=None,
                        help="Force ANSI highlighting")
    parser.add_argument("--no-color", dest="use_colors", action="store_false", default=None,
                        help="Disable ANSI highlighting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    cli_args = {
        "rows": args.rows,
        "cols": args.cols,
        "min_value": args.min_value,
        "max_value": args.max_value,
        "seed": args.seed,
        "use_colors": args.use_colors,
    }

    try:
        run_grid_report(args.config, cli_args, verbose=args.verbose)
    except (ValidationError, InvalidDimension, FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
