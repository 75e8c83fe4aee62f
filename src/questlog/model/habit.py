# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from questlog.model.entity_id import EntityId

Metric = Literal["BOOLEAN", "TIME", "MONEY", "COUNT"]

METRICS: list[Metric] = ["BOOLEAN", "TIME", "MONEY", "COUNT"]

DEFAULT_UNITS: dict[Metric, Optional[str]] = {
    "BOOLEAN": None,
    "TIME": "mins",
    "MONEY": "$",
    "COUNT": None,
}


class Habit(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "habit"
    name: str  # e.g., "Read"
    category: Optional[str]  # Free label, e.g., "Mind"
    metric: Metric  # Input semantics of a log value
    xp_multiplier: float  # XP earned per unit of value
    unit: Optional[str]  # Presentational only, e.g., "mins", "$"
    color: Optional[str]
    active: bool  # Inactive habits keep their history but are hidden
    created: pendulum.DateTime
    updated: pendulum.DateTime
