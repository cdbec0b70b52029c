# SPDX-License-Identifier: MIT

from typing import TypedDict


class Category(TypedDict):
    id: int  # Assigned once, never reused
    long_name: str  # Display only
    short_name: str  # Used to reference the category from the command line
