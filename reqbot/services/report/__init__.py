"""Report rendering for canonical summaries."""

from .renderer import (
    BaseReportRenderer,
    ReportRenderError,
    SRSReportRenderer,
    calculate_cost,
    calculate_timeline,
    estimate_cost_and_timeline,
    get_report_renderer,
)

__all__ = [
    "BaseReportRenderer",
    "ReportRenderError",
    "SRSReportRenderer",
    "calculate_cost",
    "calculate_timeline",
    "estimate_cost_and_timeline",
    "get_report_renderer",
]
