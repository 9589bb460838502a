"""Tests for the demo driver and entry point."""

import ast
import inspect
import io

import pytest

from multinotify import main as main_module
from multinotify.main import main, notify, run_demo
from multinotify.notifications import (
    DeliveryError,
    EmailChannel,
    FanOutError,
    MultiNotifier,
    SMSChannel,
)

EXPECTED_DEMO = (
    "Email Notification: Account created!\n"
    "SMS Notification: Account created!\n"
    "Email Notification: New offer\n"
    "Push Notification: Order placed\n"
    "Whatsapp Notification: Welcome to our app\n"
)


def test_run_demo_writes_to_sink(sink) -> None:
    run_demo(sink)
    assert sink.getvalue() == EXPECTED_DEMO


def test_main_prints_demo_to_stdout(capsys) -> None:
    main()
    assert capsys.readouterr().out == EXPECTED_DEMO


def test_notify_accepts_leaf_or_composite(sink) -> None:
    notify(EmailChannel(sink), "a")
    notify(MultiNotifier([SMSChannel(sink)]), "b")
    assert sink.getvalue() == "Email Notification: a\nSMS Notification: b\n"


def test_notify_works_with_any_send_object() -> None:
    received: list[str] = []

    class Mock:
        def send(self, message: str) -> None:
            received.append(message)

    notify(Mock(), "mocked")
    assert received == ["mocked"]


def test_notify_never_inspects_concrete_type() -> None:
    tree = ast.parse(inspect.getsource(main_module.notify))
    names = {node.id for node in ast.walk(tree) if isinstance(node, ast.Name)}
    assert "isinstance" not in names
    assert "type" not in names


def _closed_sink() -> io.StringIO:
    out = io.StringIO()
    out.close()
    return out


def test_run_demo_fail_fast_setting_stops_at_email(monkeypatch) -> None:
    monkeypatch.setattr(main_module.settings, "fanout_fail_fast", True)
    with pytest.raises(DeliveryError) as exc_info:
        run_demo(_closed_sink())
    assert not isinstance(exc_info.value, FanOutError)
    assert exc_info.value.channel == "Email"


def test_run_demo_collects_failures_by_default(monkeypatch) -> None:
    monkeypatch.setattr(main_module.settings, "fanout_fail_fast", False)
    with pytest.raises(FanOutError) as exc_info:
        run_demo(_closed_sink())
    channels = [notifier.label for notifier, _ in exc_info.value.failures]
    assert channels == ["Email", "SMS"]


def test_main_logs_at_configured_level(monkeypatch, capsys) -> None:
    monkeypatch.setattr(main_module.settings, "log_level", "info")
    main()
    assert capsys.readouterr().out == EXPECTED_DEMO
