"""Chart capability registry.

Plotly has no plugin registry of its own, so the capabilities a bar chart
needs (scales, bar element, title, tooltip, legend) are tracked here. The
registry only grows: registering is a set union under a lock, so registering
the same capabilities again, in a different order, or from concurrent
sessions, leaves it the same.
"""

import logging
import threading
from enum import Enum
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Drawing capabilities a chart may depend on."""
    CATEGORY_SCALE = "category_scale"
    LINEAR_SCALE = "linear_scale"
    BAR_ELEMENT = "bar_element"
    TITLE = "title"
    TOOLTIP = "tooltip"
    LEGEND = "legend"


BAR_CHART_CAPABILITIES: FrozenSet[Capability] = frozenset({
    Capability.CATEGORY_SCALE,
    Capability.LINEAR_SCALE,
    Capability.BAR_ELEMENT,
    Capability.TITLE,
    Capability.TOOLTIP,
    Capability.LEGEND,
})


class CapabilityRegistry:
    """Append-only set of enabled chart capabilities."""

    def __init__(self, capabilities: Iterable[Capability] = ()):
        self._capabilities: FrozenSet[Capability] = frozenset(capabilities)
        self._lock = threading.Lock()

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return self._capabilities

    def register(self, *capabilities: Capability) -> FrozenSet[Capability]:
        """Merge capabilities into the registry.

        Args:
            *capabilities: Capabilities to enable

        Returns:
            The capabilities that were not registered before this call
        """
        with self._lock:
            added = frozenset(capabilities) - self._capabilities
            self._capabilities = self._capabilities | added
        if added:
            logger.debug(f"Registered chart capabilities: {sorted(c.value for c in added)}")
        return added

    def missing(self, required: Iterable[Capability]) -> FrozenSet[Capability]:
        """Return the required capabilities that are not registered."""
        return frozenset(required) - self._capabilities

    def __contains__(self, capability: Capability) -> bool:
        return capability in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)


def register_bar_chart_capabilities(registry: CapabilityRegistry) -> None:
    """Enable everything a bar chart draws with. Safe to call on every render."""
    registry.register(*BAR_CHART_CAPABILITIES)


# Process-wide registry shared by every chart on the page
chart_registry = CapabilityRegistry()
