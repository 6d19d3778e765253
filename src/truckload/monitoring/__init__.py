"""Monitoring module for truckload.

Provides plan metrics, console formatting, file export and Telegram
notifications.
"""

from .metrics import (
    PlanMetrics,
    export_to_csv,
    export_to_json,
    format_instruction,
    format_instructions,
    print_summary,
)
from .telegram_notifier import (
    format_plan_complete,
    format_plan_failure,
    send_telegram,
)

__all__ = [
    # Metrics
    "PlanMetrics",
    "export_to_csv",
    "export_to_json",
    "format_instruction",
    "format_instructions",
    "print_summary",
    # Telegram
    "send_telegram",
    "format_plan_complete",
    "format_plan_failure",
]
