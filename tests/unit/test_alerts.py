"""Tests for the alert feed and the Telegram forwarder (no actual Telegram calls)."""

import pytest

from cargo_fleet.services.alerts import (
    ERROR,
    HAZARD,
    MAX_ALERTS,
    WARNING,
    Alert,
    AlertFeed,
    TelegramAlertForwarder,
)


class TestAlertFeed:
    def test_publish_records_alert(self):
        feed = AlertFeed()
        alert = feed.publish(HAZARD, "KON-G-1", "too full")
        assert isinstance(alert, Alert)
        assert feed.size == 1
        assert feed.alerts() == [alert]

    def test_unknown_level_rejected(self):
        feed = AlertFeed()
        with pytest.raises(ValueError, match="Unknown alert level"):
            feed.publish("PANIC", "X", "msg")
        assert feed.size == 0

    def test_filter_by_level_and_source(self):
        feed = AlertFeed()
        feed.publish(HAZARD, "A", "a1")
        feed.publish(WARNING, "A", "a2")
        feed.publish(HAZARD, "B", "b1")
        assert [a.message for a in feed.alerts(level=HAZARD)] == ["a1", "b1"]
        assert [a.message for a in feed.alerts(source="A")] == ["a1", "a2"]
        assert [a.message for a in feed.alerts(level=HAZARD, source="B")] == ["b1"]

    def test_clear(self):
        feed = AlertFeed()
        feed.publish(ERROR, "A", "x")
        feed.clear()
        assert feed.size == 0

    def test_subscribers_receive_alerts(self):
        feed = AlertFeed()
        received = []
        feed.subscribe(received.append)
        feed.publish(WARNING, "R", "cold")
        assert len(received) == 1
        assert received[0].source == "R"

    def test_failing_subscriber_does_not_propagate(self):
        feed = AlertFeed()

        def broken(alert):
            raise RuntimeError("boom")

        feed.subscribe(broken)
        feed.publish(HAZARD, "A", "still recorded")
        assert feed.size == 1

    def test_alert_logged(self, caplog):
        feed = AlertFeed()
        with caplog.at_level("WARNING", logger="cargo_fleet.services.alerts"):
            feed.publish(HAZARD, "KON-L-2", "breach")
        assert "HAZARD! [KON-L-2] breach" in caplog.text

    def test_to_dict(self):
        d = AlertFeed().publish(HAZARD, "A", "m").to_dict()
        assert d["level"] == HAZARD
        assert d["source"] == "A"
        assert "timestamp" in d

    def test_oldest_alerts_dropped_when_full(self):
        feed = AlertFeed(max_alerts=3)
        for i in range(5):
            feed.publish(WARNING, f"R{i}", "cold")
        assert feed.size == 3
        assert [a.source for a in feed.alerts()] == ["R2", "R3", "R4"]

    def test_default_capacity(self):
        feed = AlertFeed()
        for i in range(MAX_ALERTS + 10):
            feed.publish(ERROR, "A", str(i))
        assert feed.size == MAX_ALERTS
        assert feed.alerts()[0].message == "10"

    def test_max_alerts_must_be_positive(self):
        with pytest.raises(ValueError):
            AlertFeed(max_alerts=0)


class TestTelegramAlertForwarder:
    def test_not_configured_by_default(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)
        assert not TelegramAlertForwarder().is_configured

    def test_configured_with_params(self):
        assert TelegramAlertForwarder(bot_token="t", chat_id="1").is_configured

    def test_send_returns_false_when_not_configured(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)
        forwarder = TelegramAlertForwarder()
        alert = Alert(level=HAZARD, source="KON-G-1", message="overfill")
        assert forwarder.send_alert(alert) is False

    def test_ignores_levels_not_forwarded(self):
        forwarder = TelegramAlertForwarder(bot_token="t", chat_id="1")
        alert = Alert(level=WARNING, source="R", message="cold")
        assert forwarder(alert) is False

    def test_format_alert(self):
        forwarder = TelegramAlertForwarder()
        msg = forwarder.format_alert(Alert(level=HAZARD, source="KON-G-1", message="overfill"))
        assert "HAZARD" in msg
        assert "KON-G-1" in msg
        assert "overfill" in msg

    def test_forwards_hazard(self, monkeypatch):
        forwarder = TelegramAlertForwarder(bot_token="t", chat_id="1")
        sent = []
        monkeypatch.setattr(forwarder, "_post", lambda method, payload: sent.append(payload) or {"ok": True})
        feed = AlertFeed()
        feed.subscribe(forwarder)
        feed.publish(HAZARD, "KON-G-1", "overfill")
        assert len(sent) == 1
        assert sent[0]["chat_id"] == "1"
        assert "KON-G-1" in sent[0]["text"]

    def test_sent_alert_logged_with_level_and_source(self, monkeypatch, caplog):
        forwarder = TelegramAlertForwarder(bot_token="t", chat_id="42")
        monkeypatch.setattr(forwarder, "_post", lambda method, payload: {"ok": True})
        with caplog.at_level("INFO", logger="cargo_fleet.services.alerts"):
            assert forwarder(Alert(level=HAZARD, source="KON-L-2", message="breach")) is True
        assert "Forwarded HAZARD alert from KON-L-2 to Telegram chat 42" in caplog.text

    def test_rejected_alert_logged(self, monkeypatch, caplog):
        forwarder = TelegramAlertForwarder(bot_token="t", chat_id="42")
        monkeypatch.setattr(forwarder, "_post",
                            lambda method, payload: {"ok": False, "description": "chat not found"})
        with caplog.at_level("ERROR", logger="cargo_fleet.services.alerts"):
            assert forwarder.send_alert(Alert(level=HAZARD, source="KON-G-1", message="m")) is False
        assert "Telegram rejected HAZARD alert from KON-G-1: chat not found" in caplog.text

    def test_network_failure_returns_false(self, monkeypatch, caplog):
        forwarder = TelegramAlertForwarder(bot_token="t", chat_id="42")

        def unreachable(method, payload):
            raise OSError("network unreachable")

        monkeypatch.setattr(forwarder, "_post", unreachable)
        with caplog.at_level("ERROR", logger="cargo_fleet.services.alerts"):
            assert forwarder.send_alert(Alert(level=ERROR, source="KON-G-3", message="m")) is False
        assert "Forwarding ERROR alert from KON-G-3 to Telegram failed" in caplog.text
