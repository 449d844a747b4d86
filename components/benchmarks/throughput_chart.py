"""Throughput Chart Component.

Vertical bar chart of requests per second for each benchmarked PHP
environment. Higher is better.
"""

import plotly.graph_objects as go

from lib.benchmark_data import THROUGHPUT_SAMPLES, THROUGHPUT_SPEC
from lib.chart_config import build_config
from lib.chart_renderer import render_chart


def render() -> go.Figure:
    """Render the requests-per-second comparison chart."""
    config = build_config(THROUGHPUT_SAMPLES, THROUGHPUT_SPEC)
    return render_chart(config)
