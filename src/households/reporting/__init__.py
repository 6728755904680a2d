from households.reporting.console_report import (
    adult_occupants,
    household_summary,
    is_adult,
    print_report,
    render_report,
)

__all__ = [
    "adult_occupants",
    "household_summary",
    "is_adult",
    "print_report",
    "render_report",
]
