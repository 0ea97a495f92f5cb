from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from termchart.block import Block, Borders
from termchart.chart import Axis, Chart
from termchart.errors import ChartConfigError
from termchart.scales import generate_labels
from termchart.series import Dataset
from termchart.style import parse_color

CHART_KEYS = frozenset({"bg", "block", "x_axis", "y_axis", "datasets"})
AXIS_KEYS = frozenset({"title", "title_color", "bounds", "labels", "label_count", "labels_color", "color"})
BLOCK_KEYS = frozenset({"borders", "border_color", "title", "title_color", "bg"})
DATASET_KEYS = frozenset({"data", "x", "y", "color"})


def chart_from_config(raw: Mapping[str, Any]) -> Chart:
    """Validate a plain mapping (for example parsed JSON) and build a `Chart`.

    Axis entries may give `label_count` instead of `labels` to get evenly
    spaced labels derived from `bounds`.
    """

    if not isinstance(raw, Mapping):
        raise ChartConfigError("chart config must be a mapping")
    _reject_unknown(raw, CHART_KEYS, "chart")

    block = _block_from_config(raw["block"]) if raw.get("block") is not None else None
    datasets = raw.get("datasets", ())
    if not isinstance(datasets, (list, tuple)):
        raise ChartConfigError("`datasets` must be a list")
    return Chart(
        block=block,
        x_axis=_axis_from_config(raw.get("x_axis", {}), "x_axis"),
        y_axis=_axis_from_config(raw.get("y_axis", {}), "y_axis"),
        datasets=tuple(_dataset_from_config(entry, i) for i, entry in enumerate(datasets)),
        bg=parse_color(raw.get("bg", "reset")),
    )


def load_chart(path: str | Path) -> Chart:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ChartConfigError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return chart_from_config(raw)


def _axis_from_config(raw: Any, name: str) -> Axis:
    if not isinstance(raw, Mapping):
        raise ChartConfigError(f"`{name}` must be a mapping")
    _reject_unknown(raw, AXIS_KEYS, name)
    if "labels" in raw and "label_count" in raw:
        raise ChartConfigError(f"`{name}` accepts `labels` or `label_count`, not both")

    fields = {key: value for key, value in raw.items() if key != "label_count"}
    axis = Axis(**fields)
    if "label_count" in raw:
        count = raw["label_count"]
        if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
            raise ChartConfigError(f"`{name}.label_count` must be a positive integer")
        axis = axis.with_labels(generate_labels(axis.bounds, count))
    return axis


def _block_from_config(raw: Any) -> Block:
    if not isinstance(raw, Mapping):
        raise ChartConfigError("`block` must be a mapping")
    _reject_unknown(raw, BLOCK_KEYS, "block")
    fields = dict(raw)
    if "borders" in fields:
        fields["borders"] = _parse_borders(fields["borders"])
    return Block(**fields)


def _dataset_from_config(raw: Any, index: int) -> Dataset:
    name = f"datasets[{index}]"
    if not isinstance(raw, Mapping):
        raise ChartConfigError(f"`{name}` must be a mapping")
    _reject_unknown(raw, DATASET_KEYS, name)
    color = raw.get("color", "reset")
    if "data" in raw:
        if "x" in raw or "y" in raw:
            raise ChartConfigError(f"`{name}` accepts `data` or `x`/`y`, not both")
        return Dataset(data=raw["data"], color=color)
    if "y" in raw:
        return Dataset.from_xy(raw["y"], x=raw.get("x"), color=color)
    return Dataset(color=color)


def _parse_borders(value: Any) -> Borders:
    if isinstance(value, Borders):
        return value
    names = [value] if isinstance(value, str) else value
    if not isinstance(names, (list, tuple)):
        raise ChartConfigError("`block.borders` must be a name or a list of names")
    out = Borders.NONE
    for name in names:
        try:
            out |= Borders[str(name).strip().upper()]
        except KeyError:
            raise ChartConfigError(f"unknown border: {name!r}") from None
    return out


def _reject_unknown(raw: Mapping[str, Any], allowed: frozenset[str], where: str) -> None:
    for key in raw:
        if key not in allowed:
            raise ChartConfigError(f"Unknown {where} key: {key}")
