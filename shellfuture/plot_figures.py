"""Figures Orchestrator

Entry point for the SHELLFUTURE figures. Usage examples:

- Show the study area map:            python -m shellfuture.plot_figures fig1
- Also save it under outputs/:        python -m shellfuture.plot_figures fig1 --save
- Save only, to a chosen path:        python -m shellfuture.plot_figures fig1 --save maps/areas.png --no-show
"""

import argparse
import logging
from typing import Callable, Dict

from .config import setup_paths
from .dependencies import check_dependencies
from .errors import MissingDependencyError


def _registry() -> Dict[str, Callable[..., object]]:
    # Imported here so the dependency check runs before geopandas/cartopy load
    from .plot_figs import plot_fig1_study_areas

    return {
        "fig1": plot_fig1_study_areas,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate figures")
    parser.add_argument("which", help="Figure key (fig1) or all")
    parser.add_argument(
        "--save",
        nargs="?",
        const=setup_paths()["study_areas_png"],
        default=None,
        metavar="PATH",
        help="Also write the figure as PNG (default path: outputs/study_areas_v3_final.png)",
    )
    parser.add_argument("--no-show", action="store_true", help="Do not open an interactive window")
    parser.add_argument("--north-arrow", action="store_true", help="Draw a north arrow")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        check_dependencies()
    except MissingDependencyError as e:
        raise SystemExit(str(e)) from e

    reg = _registry()
    kwargs = dict(show=not args.no_show, save_path=args.save, north_arrow=args.north_arrow)

    if args.which == "all":
        for fn in reg.values():
            fn(**kwargs)
        return

    if args.which not in reg:
        raise SystemExit(f"Unknown figure key: {args.which}. Valid: {', '.join(sorted(reg))}, all")
    reg[args.which](**kwargs)


if __name__ == "__main__":
    main()
