# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from chronogrid.model.task import TaskFormData


def get_task_form_template(
    title: str, deadline: pendulum.Date, start_date: Optional[pendulum.Date] = None
) -> TaskFormData:
    return {
        "title": title,
        "priority": 3,
        "deadline": deadline,
        "estimated_hours": 0,
        "estimated_minutes": 30,
        "start_date": start_date,
        "category": None,
    }
