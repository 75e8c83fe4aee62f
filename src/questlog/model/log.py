# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict, Union

import pendulum

from questlog.model.entity_id import EntityId
from questlog.model.habit import Metric


class LogPayload(TypedDict):
    id: EntityId  # Client generated, also the durable primary key
    entity_type: str  # "log"
    habit_id: EntityId
    metric: Metric  # Copied from the habit at submission time
    timestamp: pendulum.DateTime  # Wall clock instant the log is recorded against
    logical_date: str  # Authoritative day the log counts toward
    value: Union[int, float, str, None]
    intensity: float  # Effort scaling, e.g., 0.5, 1, 2
    note: Optional[str]
