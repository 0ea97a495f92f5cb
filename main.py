from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

import numpy as np

from termchart import Axis, Block, Borders, Chart, Color, Dataset, Rect, load_chart
from termchart.display import resolve_default_area
from termchart.targets import AnsiTarget, PlainTextTarget, RenderTarget


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="termchart")
    parser.add_argument("--verbose", action="store_true", help="Log layout decisions to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a chart described by a JSON file.")
    render.add_argument("config", type=Path)
    _add_output_args(render)

    demo = sub.add_parser("demo", help="Render a built-in sine/cosine chart.")
    _add_output_args(demo)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "render":
        chart = load_chart(args.config)
    elif args.command == "demo":
        chart = _demo_chart()
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    area = _resolve_area(args.width, args.height)
    target: RenderTarget = PlainTextTarget() if args.plain else AnsiTarget()
    target.start()
    try:
        target.present(chart.render(area))
    finally:
        target.stop()


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=None, help="Chart width in cells. Default: terminal width.")
    parser.add_argument("--height", type=int, default=None, help="Chart height in cells. Default: terminal height - 1.")
    parser.add_argument("--plain", action="store_true", help="Write glyphs only, without color escapes.")


def _resolve_area(width: int | None, height: int | None) -> Rect:
    if width is not None and width <= 0:
        raise ValueError("width must be > 0")
    if height is not None and height <= 0:
        raise ValueError("height must be > 0")
    if width is not None and height is not None:
        return Rect(x=0, y=0, width=width, height=height)
    detected = resolve_default_area()
    return Rect(
        x=0,
        y=0,
        width=detected.width if width is None else width,
        height=detected.height if height is None else height,
    )


def _demo_chart() -> Chart:
    x = np.linspace(0.0, 20.0, 400)
    return Chart(
        block=Block(borders=Borders.ALL, title=" sin / cos ", border_color=Color.DARK_GRAY),
        x_axis=Axis(
            title="t",
            title_color=Color.LIGHT_YELLOW,
            bounds=(0.0, 20.0),
            labels=("0", "10", "20"),
            labels_color=Color.GRAY,
            color=Color.DARK_GRAY,
        ),
        y_axis=Axis(
            title="amplitude",
            title_color=Color.LIGHT_YELLOW,
            bounds=(-1.0, 1.0),
            labels=("-1", "0", "1"),
            labels_color=Color.GRAY,
            color=Color.DARK_GRAY,
        ),
        datasets=(
            Dataset.from_xy(np.sin(x), x=x, color=Color.CYAN),
            Dataset.from_xy(np.cos(x), x=x, color=Color.LIGHT_MAGENTA),
        ),
    )


if __name__ == "__main__":
    main()
