# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict

import pendulum


class Detail(str, Enum):
    TOTAL = "total"
    DAILY = "daily"
    ENTRIES = "entries"


class ReportRow(TypedDict):
    history_index: int  # Pass to edit/show to address this entry
    timestamp: pendulum.DateTime
    duration: Optional[pendulum.Duration]  # None for the first entry in the window
    category_id: Optional[int]
    category_label: str
    message: Optional[str]
    is_marker: bool
    out_of_order: bool  # Timestamp precedes the previous entry in the window


class CategoryTotal(TypedDict):
    category_id: Optional[int]
    label: str
    duration: pendulum.Duration


class DayTotal(TypedDict):
    date: pendulum.Date
    duration: pendulum.Duration


class Report(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    category_filter: Optional[str]
    rows: list[ReportRow]
    categories: list[CategoryTotal]  # First appearance order
    days: list[DayTotal]  # First appearance order
    total: pendulum.Duration
    idle: pendulum.Duration  # Part of total attributed to marker entries
