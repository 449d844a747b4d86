"""Plotly renderer for ChartConfig bar charts.

Turns a ChartConfig into a new Plotly figure on every call and draws it
full width in a fixed 400px box. The value axis always starts at zero so
bar lengths compare honestly.
"""

import logging

import plotly.graph_objects as go
import streamlit as st

from lib.chart_config import ChartConfig
from lib.chart_registry import (
    CapabilityRegistry,
    chart_registry,
    register_bar_chart_capabilities,
)

logger = logging.getLogger(__name__)

CHART_HEIGHT = 400


class ChartCapabilityError(RuntimeError):
    """Raised when a chart needs a capability the registry does not have."""


def ensure_capabilities(config: ChartConfig, registry: CapabilityRegistry) -> None:
    """Fail loudly if the registry cannot draw every part of the chart.

    Raises:
        ChartCapabilityError: If any required capability is unregistered
    """
    missing = registry.missing(config.required_capabilities)
    if missing:
        names = sorted(c.value for c in missing)
        logger.error(f"Chart '{config.title}' needs unregistered capabilities: {names}")
        raise ChartCapabilityError(
            f"Cannot draw chart '{config.title}': missing capabilities {names}"
        )


def build_figure(config: ChartConfig, registry: CapabilityRegistry = chart_registry) -> go.Figure:
    """Build a fresh Plotly figure from a ChartConfig.

    Args:
        config: Resolved chart configuration
        registry: Capability registry consulted before drawing

    Returns:
        New go.Figure with a single bar trace

    Raises:
        ChartCapabilityError: If a required capability is not registered
    """
    ensure_capabilities(config, registry)

    horizontal = config.orientation == 'horizontal'
    categories = list(config.labels)
    values = list(config.values)

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=values if horizontal else categories,
        y=categories if horizontal else values,
        orientation='h' if horizontal else 'v',
        name=config.series_label,
        marker=dict(
            color=list(config.fill_colors),
            line=dict(color=list(config.border_colors), width=config.border_width)
        ),
        hovertemplate=(
            f"<b>%{{{config.category_axis}}}</b><br>"
            f"{config.value_axis_title}: %{{{config.value_axis}}}"
            "<extra></extra>"
        ),
        showlegend=True,
    ))

    category_axis = dict(
        title=dict(text=config.category_axis_title),
        type='category',
        showgrid=False,
    )
    value_axis = dict(
        title=dict(text=config.value_axis_title),
        type='linear',
        rangemode='tozero',
        showgrid=True,
        zeroline=True,
    )
    if horizontal:
        # First sample on top, matching the vertical chart's left-to-right order
        category_axis['autorange'] = 'reversed'

    fig.update_layout(
        title={'text': config.title, 'x': 0.5, 'xanchor': 'center'},
        xaxis=value_axis if horizontal else category_axis,
        yaxis=category_axis if horizontal else value_axis,
        height=CHART_HEIGHT,
        autosize=True,
        showlegend=True,
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='center', x=0.5),
        hovermode='closest',
        margin=dict(l=60, r=30, t=90, b=60),
    )

    return fig


def render_chart(config: ChartConfig, registry: CapabilityRegistry = chart_registry) -> go.Figure:
    """Register bar chart capabilities, build the figure and draw it.

    Errors are not caught: a chart that cannot be drawn completely is not
    drawn at all.

    Args:
        config: Resolved chart configuration
        registry: Capability registry shared across charts

    Returns:
        The figure that was drawn
    """
    register_bar_chart_capabilities(registry)
    fig = build_figure(config, registry)
    st.plotly_chart(fig, use_container_width=True)
    return fig

