# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class TaskSummary(TypedDict):
    completed_count: int
    pending_count: int
    completed_percent: float
    pending_percent: float
    completed_angle: float
    completed_arc_path: Optional[str]
    pending_arc_path: Optional[str]
    placeholder_ring: bool
