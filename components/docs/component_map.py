"""Components exposed to docs content by tag name."""

from typing import Dict, Mapping, Optional

from components import guides
from components.benchmarks import CHART_COMPONENTS
from lib.component_registry import Component, merge_components

DOC_COMPONENTS: Dict[str, Component] = {
    'Guides': guides.render,
}


def doc_components(overrides: Optional[Mapping[str, Component]] = None) -> Dict[str, Component]:
    """Merge page overrides, docs components and chart components.

    Later registries win on name collisions, so chart components take
    precedence over both.
    """
    return merge_components(overrides, DOC_COMPONENTS, CHART_COMPONENTS)
