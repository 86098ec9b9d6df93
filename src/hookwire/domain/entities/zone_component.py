"""Zone component entity."""

from dataclasses import dataclass, field
from typing import Any

from hookwire.core.enums import Priority


@dataclass
class ZoneComponent:
    """A component placed into a named zone.

    Attributes:
        id: Unique id across all zones.
        zone: Zone name, e.g. "my-test-zone".
        component: The component object (or component registry id).
        order: Position inside the zone (lower first).
        props: Extra values handed to the component when it is rendered.
    """

    id: str
    zone: str
    component: Any = None
    order: float = Priority.NEUTRAL
    props: dict[str, Any] = field(default_factory=dict)
