"""
Alert side-channel for hazard notifications and soft-reject warnings.

Alerts never travel through return values: containers publish them on an
AlertFeed, which keeps an in-memory record, writes them to the log and
forwards them to any subscribers (for example a Telegram chat).

Setup for Telegram forwarding:
  export TELEGRAM_BOT_TOKEN="your-token"
  export TELEGRAM_CHAT_ID="your-chat-id"
"""

from __future__ import annotations

import json
import logging
import os
import threading
import urllib.request
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)

HAZARD = "HAZARD"
WARNING = "WARNING"
ERROR = "ERROR"

ALERT_LEVELS = (HAZARD, WARNING, ERROR)

# Oldest alerts are dropped once a feed holds this many
MAX_ALERTS = 1000

_LOG_LEVELS = {
    HAZARD: logging.ERROR,
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
}


@dataclass
class Alert:
    """One operator-facing alert."""
    level: str
    source: str      # serial number of the container that raised it
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "source": self.source,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


class AlertFeed:
    """
    Thread-safe in-memory alert feed with optional subscribers.

    Only the newest max_alerts alerts are kept.
    """

    def __init__(self, max_alerts: int = MAX_ALERTS):
        if max_alerts < 1:
            raise ValueError(f"max_alerts must be positive, got {max_alerts}")
        self._lock = threading.Lock()
        self._alerts: deque[Alert] = deque(maxlen=max_alerts)
        self._subscribers: list[Callable[[Alert], object]] = []

    def publish(self, level: str, source: str, message: str) -> Alert:
        """Record an alert, log it and hand it to every subscriber."""
        if level not in ALERT_LEVELS:
            raise ValueError(f"Unknown alert level: {level}")

        alert = Alert(level=level, source=source, message=message)
        with self._lock:
            self._alerts.append(alert)
            subscribers = list(self._subscribers)

        logger.log(_LOG_LEVELS[level], "%s! [%s] %s", level, source, message)

        for callback in subscribers:
            try:
                callback(alert)
            except Exception as e:
                logger.error("Alert subscriber %r failed: %s", callback, e)
        return alert

    def subscribe(self, callback: Callable[[Alert], object]):
        """Register a callable invoked with every new Alert."""
        with self._lock:
            self._subscribers.append(callback)

    def alerts(self, level: str | None = None, source: str | None = None) -> list[Alert]:
        """Return recorded alerts, optionally filtered by level and/or source."""
        with self._lock:
            snapshot = list(self._alerts)
        return [
            a for a in snapshot
            if (level is None or a.level == level)
            and (source is None or a.source == source)
        ]

    def clear(self):
        """Forget all recorded alerts (subscribers stay registered)."""
        with self._lock:
            self._alerts.clear()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._alerts)


class TelegramAlertForwarder:
    """Forwards HAZARD alerts to a Telegram chat. Use as an AlertFeed subscriber."""

    def __init__(
        self,
        bot_token: str | None = None,
        chat_id: str | None = None,
        levels: tuple[str, ...] = (HAZARD,),
    ):
        self.bot_token = bot_token or os.environ.get("TELEGRAM_BOT_TOKEN", "")
        self.chat_id = chat_id or os.environ.get("TELEGRAM_CHAT_ID", "")
        self.levels = levels
        self._base_url = f"https://api.telegram.org/bot{self.bot_token}"

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    def __call__(self, alert: Alert) -> bool:
        if alert.level not in self.levels:
            return False
        return self.send_alert(alert)

    def format_alert(self, alert: Alert) -> str:
        """Format an alert as a Telegram HTML message."""
        icons = {HAZARD: "🔴", WARNING: "🟡", ERROR: "⚠️"}
        icon = icons.get(alert.level, "⚪")
        return (
            f"{icon} <b>{alert.level}</b> container <b>{alert.source}</b>\n"
            f"{alert.message}\n"
            f"<i>{alert.timestamp.strftime('%Y-%m-%d %H:%M')}</i>"
        )

    def send_alert(self, alert: Alert) -> bool:
        """
        Post one alert to the configured chat.

        Returns:
            True if Telegram accepted the message
        """
        if not self.is_configured:
            logger.warning("Telegram not configured, %s alert from %s not forwarded",
                           alert.level, alert.source)
            return False

        payload = {
            "chat_id": self.chat_id,
            "text": self.format_alert(alert),
            "parse_mode": "HTML",
        }
        try:
            result = self._post("sendMessage", payload)
        except (OSError, ValueError) as e:
            logger.error("Forwarding %s alert from %s to Telegram failed: %s",
                         alert.level, alert.source, e)
            return False

        if not result.get("ok"):
            logger.error("Telegram rejected %s alert from %s: %s",
                         alert.level, alert.source, result.get("description", result))
            return False
        logger.info("Forwarded %s alert from %s to Telegram chat %s",
                    alert.level, alert.source, self.chat_id)
        return True

    def _post(self, method: str, payload: dict) -> dict:
        req = urllib.request.Request(
            f"{self._base_url}/{method}",
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        with urllib.request.urlopen(req, timeout=10) as resp:
            return json.loads(resp.read().decode("utf-8"))


# Global feed shared by containers created without an explicit feed
alert_feed = AlertFeed()
