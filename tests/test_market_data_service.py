import pytest
import requests

import market_data_service
from market_data_service import MarketDataClient, SalaryRange, fallback_salary_range


class _FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=False):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")

    def json(self):
        if self._json_error:
            raise ValueError("not json")
        return self._payload


def _live_client():
    return MarketDataClient(app_id="app", api_key="key", country="in", enabled=True, timeout=5)


def test_fallback_uses_role_and_city_tables():
    salary_range = fallback_salary_range("Data Scientist", "Pune")
    assert salary_range == SalaryRange(min=952000, max=1428000, median=1190000)


def test_fallback_defaults_for_unknown_role_and_city():
    salary_range = fallback_salary_range("astronaut", "reykjavik")
    assert salary_range == SalaryRange(min=800000, max=1200000, median=1000000)


def test_disabled_client_never_calls_the_api(monkeypatch):
    def fail_get(*args, **kwargs):  # pragma: no cover - should not run
        raise AssertionError("requests.get should not be called")

    monkeypatch.setattr(market_data_service.requests, "get", fail_get)
    client = MarketDataClient(app_id="app", api_key="key", enabled=False)

    assert client.live is False
    assert client.fetch_salary_range("qa engineer", "mumbai") == fallback_salary_range("qa engineer", "mumbai")


def test_missing_credentials_disable_live_lookups():
    client = MarketDataClient(app_id="", api_key="", enabled=True)
    assert client.live is False


def test_live_lookup_averages_monthly_history(monkeypatch):
    captured = {}

    def fake_get(url, params=None, timeout=None):
        captured.update({"url": url, "params": params, "timeout": timeout})
        return _FakeResponse({"month": {"2024-01": 1000000, "2024-02": 1200000}})

    monkeypatch.setattr(market_data_service.requests, "get", fake_get)

    salary_range = _live_client().fetch_salary_range("Backend Developer", "Delhi NCR")

    assert salary_range == SalaryRange(min=880000, max=1320000, median=1100000)
    assert captured["url"] == "https://api.adzuna.com/v1/api/jobs/in/history"
    assert captured["params"]["where"] == "delhi-ncr"
    assert captured["params"]["what"] == "Backend Developer"
    assert captured["params"]["months"] == 1
    assert captured["timeout"] == 5


def test_live_lookup_accepts_list_shaped_history(monkeypatch):
    monkeypatch.setattr(
        market_data_service.requests,
        "get",
        lambda *args, **kwargs: _FakeResponse({"month": [{"average": 500000}, {"average": 700000}]}),
    )
    assert _live_client().fetch_salary_range("ui developer", "pune").median == 600000


@pytest.mark.parametrize(
    "response",
    [
        _FakeResponse({}, status_code=503),
        _FakeResponse(json_error=True),
        _FakeResponse({"month": {}}),
        _FakeResponse(["unexpected"]),
    ],
)
def test_bad_responses_fall_back(monkeypatch, response):
    monkeypatch.setattr(market_data_service.requests, "get", lambda *args, **kwargs: response)
    assert _live_client().fetch_salary_range("qa engineer", "pune") == fallback_salary_range("qa engineer", "pune")


def test_transport_errors_fall_back(monkeypatch):
    def raise_timeout(*args, **kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(market_data_service.requests, "get", raise_timeout)
    assert _live_client().fetch_salary_range("devops engineer", "chennai") == fallback_salary_range(
        "devops engineer", "chennai"
    )
