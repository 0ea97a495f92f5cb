from termchart.api import chart, to_text
from termchart.block import Block, Borders
from termchart.chart import Axis, Chart, ChartBuilder
from termchart.config import chart_from_config, load_chart
from termchart.errors import ChartConfigError
from termchart.geometry import Rect
from termchart.layout import ChartLayout, compute_layout
from termchart.raster import Buffer, Cell
from termchart.render import render
from termchart.series import Dataset
from termchart.style import Color, Rgb

__all__ = [
    "Axis",
    "Block",
    "Borders",
    "Buffer",
    "Cell",
    "Chart",
    "ChartBuilder",
    "ChartConfigError",
    "ChartLayout",
    "Color",
    "Dataset",
    "Rect",
    "Rgb",
    "chart",
    "chart_from_config",
    "compute_layout",
    "load_chart",
    "render",
    "to_text",
]
