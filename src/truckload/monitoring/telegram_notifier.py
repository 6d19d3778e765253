"""Telegram notification for finished loading plans.

Sends plain-text messages to a dispatcher chat via the Bot API when a plan
completes or fails.  Credentials come from the ``TELEGRAM_BOT_TOKEN`` and
``TELEGRAM_CHAT_ID`` environment variables.

No retry logic; notifications are non-critical.
"""

from __future__ import annotations

import logging
import os

import httpx

from truckload.monitoring.metrics import PlanMetrics

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org/bot{token}/sendMessage"


async def send_telegram(
    message: str,
    chat_id: str | None = None,
    token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Send a plain-text message to a Telegram chat.

    Args:
        message: Text to send.
        chat_id: Telegram chat ID. Defaults to TELEGRAM_CHAT_ID env var.
        token: Bot token. Defaults to TELEGRAM_BOT_TOKEN env var.
        transport: Optional httpx transport (used by tests).

    Returns:
        True if the API accepted the message, False otherwise.
    """
    token = token or os.environ.get("TELEGRAM_BOT_TOKEN", "")
    chat_id = chat_id or os.environ.get("TELEGRAM_CHAT_ID", "")
    if not token or not chat_id:
        logger.debug("Telegram not configured, skipping notification")
        return False

    url = TELEGRAM_API.format(token=token)
    payload = {"chat_id": chat_id, "text": message}

    try:
        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(url, json=payload)
            data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Telegram notification failed: %s", e)
        return False
    return bool(data.get("ok", False))


def format_plan_complete(metrics: PlanMetrics, truck_dims: tuple[int, int, int]) -> str:
    """Format the notification for a finished plan.

    Example:
        >>> m = PlanMetrics(status="complete", crates_total=3, crates_placed=3,
        ...                 utilization_pct=62.5)
        >>> print(format_plan_complete(m, (4, 4, 4)))
        Loading plan ready
        Truck: 4 x 4 x 4
        Crates: 3/3
        Utilization: 62.5%
    """
    return (
        f"Loading plan ready\n"
        f"Truck: {truck_dims[0]} x {truck_dims[1]} x {truck_dims[2]}\n"
        f"Crates: {metrics.crates_placed}/{metrics.crates_total}\n"
        f"Utilization: {metrics.utilization_pct:.1f}%"
    )


def format_plan_failure(metrics: PlanMetrics) -> str:
    """Format the notification for a failed plan.

    Example:
        >>> m = PlanMetrics(status="placement_failed", failure_message="Failed to place crate 2",
        ...                 failed_crate_id=2)
        >>> print(format_plan_failure(m))
        Loading plan failed: placement_failed
        Failed to place crate 2
        Crate: 2
    """
    lines = [
        f"Loading plan failed: {metrics.status}",
        metrics.failure_message,
    ]
    if metrics.failed_crate_id is not None:
        lines.append(f"Crate: {metrics.failed_crate_id}")
    return "\n".join(lines)
