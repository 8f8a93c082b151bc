# SPDX-License-Identifier: MIT

# Color constant for completed tasks in tables
COMPLETED_TASK_COLOR = "bright_black"

# Day-number highlights in calendar grids
TODAY_STYLE_LIGHT = "bold black on bright_cyan"
TODAY_STYLE_DARK = "bold white on dark_cyan"
SELECTED_STYLE = "bold black on plum1"
OUTSIDE_PERIOD_STYLE = "dim"

# Pie chart fills
COMPLETED_SLICE_COLOR = "#10b981"
PENDING_SLICE_COLOR = "#3b82f6"
EMPTY_RING_COLOR_LIGHT = "#e5e7eb"
EMPTY_RING_COLOR_DARK = "#374151"
SURFACE_COLOR_LIGHT = "white"
SURFACE_COLOR_DARK = "#1f2937"

# Report header
HEADER_APP_STYLE = "bold dark_orange"
HEADER_TITLE_STYLE_LIGHT = "sandy_brown"
HEADER_TITLE_STYLE_DARK = "bold sandy_brown"
HEADER_CONTEXT_STYLE = "plum1"
