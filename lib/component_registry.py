"""Registries of named components available to document content.

A registry maps a tag name (e.g. "ThroughputChart") to a render callable.
Documents look a name up in the union of all registries; when two
registries define the same name, the one merged last wins.
"""

from typing import Any, Callable, Dict, Mapping, Optional

# Chart components return the drawn figure, others return None
Component = Callable[[], Any]


def merge_components(*registries: Optional[Mapping[str, Component]]) -> Dict[str, Component]:
    """Merge component registries left to right.

    Args:
        *registries: Mappings of name to component; None entries are skipped

    Returns:
        New dict; later registries override earlier ones on name collisions
    """
    merged: Dict[str, Component] = {}
    for registry in registries:
        if registry:
            merged.update(registry)
    return merged


def lookup_component(registry: Mapping[str, Component], name: str) -> Component:
    """Find a component by name.

    Raises:
        KeyError: If the name is not registered
    """
    try:
        return registry[name]
    except KeyError:
        raise KeyError(f"Unknown doc component: <{name} />") from None
