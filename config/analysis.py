"""
config/analysis.py
──────────────────
Analysis tabs, chart kinds, channels and time-range options for the
equipment detail page.
"""

from enum import Enum


class ChartKind(str, Enum):
    PRPD = "prpd"
    PRPS = "prps"
    PULSE = "pulse"
    SIGNAL = "signal"


class TimeRange(str, Enum):
    H24 = "24h"
    H48 = "48h"
    D7 = "7d"
    D30 = "30d"
    CUSTOM = "custom"


TIME_RANGE_LABELS: dict[str, str] = {
    TimeRange.H24: "24h",
    TimeRange.H48: "48h",
    TimeRange.D7: "7天",
    TimeRange.D30: "30天",
    TimeRange.CUSTOM: "自定义",
}

CHANNELS = ["UHF", "TEV", "AE"]

# Tab id -> (label, chart kind). Kind None renders the placeholder panel.
ANALYSIS_TABS: dict[str, tuple[str, ChartKind | None]] = {
    "tab-pulse": ("放电脉冲分析", None),
    "tab-phase": ("相位相关性分析", ChartKind.SIGNAL),
    "tab-pf": ("PF相频图谱分析", None),
    "tab-prpd": ("PRPD图谱分析", ChartKind.PRPD),
    "tab-prps": ("PRPS图谱分析", ChartKind.PRPS),
}

DEFAULT_ANALYSIS_TAB = "tab-prpd"

# Fixed query parameters for chart requests
CHART_THRESHOLD_DBMV = 0.0
CHART_INITIAL_PHASE_DEG = 0.0
