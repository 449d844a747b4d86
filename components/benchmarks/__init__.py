"""Benchmark chart components.

Comparative bar charts embedded in the docs:
- throughput_chart: requests per second by environment
- latency_chart: request duration by environment

CHART_COMPONENTS exposes both to markdown documents by tag name, also
under their older ChartRPS and ChartMS names.
"""

from .throughput_chart import render as throughput_chart
from .latency_chart import render as latency_chart

CHART_COMPONENTS = {
    'ThroughputChart': throughput_chart,
    'LatencyChart': latency_chart,
    # Tag names used by docs written for the previous site
    'ChartRPS': throughput_chart,
    'ChartMS': latency_chart,
}

__all__ = [
    'throughput_chart',
    'latency_chart',
    'CHART_COMPONENTS',
]
