"""Latency Chart Component.

Horizontal bar chart of request duration (ms) for each benchmarked PHP
environment. Environments run down the vertical axis; lower is better.
"""

import plotly.graph_objects as go

from lib.benchmark_data import LATENCY_SAMPLES, LATENCY_SPEC
from lib.chart_config import build_config
from lib.chart_renderer import render_chart


def render() -> go.Figure:
    """Render the request duration comparison chart."""
    config = build_config(LATENCY_SAMPLES, LATENCY_SPEC)
    return render_chart(config)
