from __future__ import annotations

import json
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from scripts import auto_checkout
from src.lab_attendance.lab_attendance.checkout.model import CheckoutReport
from src.lab_attendance.lab_attendance.core.exceptions import UpstreamStoreError, ValidationError


class FailingCheckout:
    def __init__(self, error: Exception):
        self.error = error

    def close_open_sessions(self):
        raise self.error


class QuietCheckout:
    def close_open_sessions(self):
        return CheckoutReport(checked_out_at=datetime(2026, 3, 10, 12, 30, tzinfo=timezone.utc))


@pytest.fixture
def run_with(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(auto_checkout, "load_dotenv", lambda **kwargs: None)

    def _run(checkout_service):
        monkeypatch.setattr(
            auto_checkout,
            "build_container_from_settings",
            lambda settings: SimpleNamespace(checkout_service=checkout_service),
        )
        return auto_checkout.main()

    return _run


@pytest.mark.parametrize(
    "error",
    [
        UpstreamStoreError("fetch attendance: store answered 503"),
        ValidationError("attendance row has unknown Check value 'MAYBE'"),
    ],
)
def test_domain_errors_exit_nonzero_with_message(run_with, capsys, error):
    assert run_with(FailingCheckout(error)) == 1
    assert f"Auto-checkout failed: {error}" in capsys.readouterr().err


def test_report_is_printed_as_json(run_with, capsys):
    assert run_with(QuietCheckout()) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["attempted"] == 0
