"""Chart configuration model and builder for benchmark bar charts.

Separates the three pieces of a chart:
- MetricSample: one (environment label, value) pair, one bar
- ChartSpec: orientation, titles and series metadata, independent of data
- ChartConfig: the render-ready combination, with per-bar colors resolved

Building a config is a pure function so color cycling and orientation
handling can be checked without drawing anything.
"""

from dataclasses import dataclass
from typing import FrozenSet, Literal, Sequence, Tuple, List

from lib.chart_registry import BAR_CHART_CAPABILITIES, Capability

Orientation = Literal["vertical", "horizontal"]

ORIENTATIONS = ("vertical", "horizontal")


@dataclass(frozen=True)
class MetricSample:
    """A single bar: environment label and measured value."""
    label: str
    value: float


@dataclass(frozen=True)
class ChartSpec:
    """Declarative description of a chart, independent of its data."""
    orientation: Orientation
    value_axis_title: str
    category_axis_title: str
    title: str
    series_label: str
    higher_is_better: bool = True


@dataclass(frozen=True)
class PaletteEntry:
    """Fill and border color for one bar."""
    fill: str
    border: str


DEFAULT_PALETTE: Tuple[PaletteEntry, ...] = (
    PaletteEntry(fill='rgba(255, 99, 132, 0.6)', border='rgba(255, 99, 132, 1)'),
    PaletteEntry(fill='rgba(54, 162, 235, 0.6)', border='rgba(54, 162, 235, 1)'),
    PaletteEntry(fill='rgba(255, 206, 86, 0.6)', border='rgba(255, 206, 86, 1)'),
    PaletteEntry(fill='rgba(75, 192, 192, 0.6)', border='rgba(75, 192, 192, 1)'),
    PaletteEntry(fill='rgba(153, 102, 255, 0.6)', border='rgba(153, 102, 255, 1)'),
)


@dataclass(frozen=True)
class ChartConfig:
    """Fully resolved bar chart configuration.

    The parallel tuples (labels, values, fill_colors, border_colors) must have
    equal lengths and labels must be unique. Violations raise ValueError on
    construction; they indicate a programming error, not bad user input.
    """
    orientation: Orientation
    title: str
    series_label: str
    x_axis_title: str
    y_axis_title: str
    labels: Tuple[str, ...] = ()
    values: Tuple[float, ...] = ()
    fill_colors: Tuple[str, ...] = ()
    border_colors: Tuple[str, ...] = ()
    border_width: int = 1
    higher_is_better: bool = True
    required_capabilities: FrozenSet[Capability] = BAR_CHART_CAPABILITIES

    def __post_init__(self):
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"Unknown orientation: {self.orientation!r}")

        lengths = {
            'labels': len(self.labels),
            'values': len(self.values),
            'fill_colors': len(self.fill_colors),
            'border_colors': len(self.border_colors),
        }
        if len(set(lengths.values())) > 1:
            raise ValueError(f"Mismatched chart column lengths: {lengths}")

        if len(set(self.labels)) != len(self.labels):
            raise ValueError(f"Duplicate category labels: {list(self.labels)}")

    @property
    def category_axis(self) -> str:
        """Plotly axis ('x' or 'y') that carries the environment labels."""
        return 'y' if self.orientation == 'horizontal' else 'x'

    @property
    def value_axis(self) -> str:
        """Plotly axis ('x' or 'y') that carries the measured values."""
        return 'x' if self.orientation == 'horizontal' else 'y'

    @property
    def category_axis_title(self) -> str:
        return self.y_axis_title if self.orientation == 'horizontal' else self.x_axis_title

    @property
    def value_axis_title(self) -> str:
        return self.x_axis_title if self.orientation == 'horizontal' else self.y_axis_title

    @property
    def category_count(self) -> int:
        return len(self.labels)


def samples_from_columns(labels: Sequence[str], values: Sequence[float]) -> List[MetricSample]:
    """Pair parallel label and value columns into MetricSamples.

    Args:
        labels: Environment labels in display order
        values: Measured values, one per label

    Returns:
        List of MetricSample in the same order

    Raises:
        ValueError: If the columns have different lengths
    """
    if len(labels) != len(values):
        raise ValueError(
            f"Got {len(labels)} labels but {len(values)} values"
        )
    return [MetricSample(label=label, value=float(value)) for label, value in zip(labels, values)]


def build_config(
    samples: Sequence[MetricSample],
    spec: ChartSpec,
    palette: Sequence[PaletteEntry] = DEFAULT_PALETTE
) -> ChartConfig:
    """Build a render-ready ChartConfig from samples and a chart spec.

    Sample i is colored with palette[i % len(palette)], so palettes shorter
    than the dataset wrap around. An empty sample list yields a config with
    an empty category axis.

    For horizontal charts the category axis is y and the value axis is x,
    and the axis titles follow the axes they describe.

    Args:
        samples: Ordered samples, one bar each
        spec: Orientation, titles and series metadata
        palette: Fill/border color pairs, applied positionally

    Returns:
        Immutable ChartConfig

    Raises:
        ValueError: On an empty palette or an unknown orientation
    """
    if not palette:
        raise ValueError("Palette must contain at least one color entry")

    colors = [palette[i % len(palette)] for i in range(len(samples))]

    if spec.orientation == 'horizontal':
        x_axis_title, y_axis_title = spec.value_axis_title, spec.category_axis_title
    else:
        x_axis_title, y_axis_title = spec.category_axis_title, spec.value_axis_title

    return ChartConfig(
        orientation=spec.orientation,
        title=spec.title,
        series_label=spec.series_label,
        x_axis_title=x_axis_title,
        y_axis_title=y_axis_title,
        labels=tuple(s.label for s in samples),
        values=tuple(s.value for s in samples),
        fill_colors=tuple(c.fill for c in colors),
        border_colors=tuple(c.border for c in colors),
        higher_is_better=spec.higher_is_better,
    )
