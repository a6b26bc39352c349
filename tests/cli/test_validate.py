"""Tests for cloudstore validate."""

import json

import pytest

from tests.cli.conftest import invoke


def test_validate_ok(runner, clean_env):
    result = invoke(runner, ["validate"], env={"CLOUDSTORE_APP_NAME": "app"})
    assert result.exit_code == 0
    assert "OK" in result.output


def test_validate_missing_app_name(runner, clean_env):
    result = invoke(runner, ["validate"])
    assert result.exit_code == 2
    assert "app_name" in result.output


def test_validate_json_reports_field(runner, clean_env):
    result = invoke(runner, ["--json", "validate"])
    assert result.exit_code == 2
    data = json.loads(result.output)
    assert data["valid"] is False
    assert data["field"] == "app_name"


def test_validate_bad_proxy(runner, clean_env):
    result = invoke(
        runner,
        ["validate"],
        env={"CLOUDSTORE_APP_NAME": "app", "CLOUDSTORE_PROXY_ADDRESS": "no-port"},
    )
    assert result.exit_code == 2
    assert "proxy_address" in result.output


def test_validate_accepts_out_of_range_numbers(runner, clean_env):
    result = invoke(
        runner,
        ["--json", "validate"],
        env={"CLOUDSTORE_APP_NAME": "app", "CLOUDSTORE_MAX_REQUESTS_PER_BATCH": "5000"},
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {"valid": True}


@pytest.mark.parametrize(
    "name, value",
    [
        ("CLOUDSTORE_MAX_HTTP_REQUEST_RETRIES", "-1"),
        ("CLOUDSTORE_MAX_HTTP_REQUEST_RETRIES", "0"),
        ("CLOUDSTORE_HTTP_CONNECT_TIMEOUT_MS", "-1"),
        ("CLOUDSTORE_HTTP_CONNECT_TIMEOUT_MS", "0"),
        ("CLOUDSTORE_HTTP_READ_TIMEOUT_MS", "-1"),
        ("CLOUDSTORE_HTTP_READ_TIMEOUT_MS", "0"),
        ("CLOUDSTORE_BATCH_THREADS", "-1"),
        ("CLOUDSTORE_BATCH_THREADS", "0"),
    ],
)
def test_validate_accepts_non_positive_numbers(runner, clean_env, name, value):
    result = invoke(runner, ["validate"], env={"CLOUDSTORE_APP_NAME": "app", name: value})
    assert result.exit_code == 0
    assert "OK" in result.output


def test_validate_json_reports_unparseable_env(runner, clean_env):
    result = invoke(
        runner,
        ["--json", "validate"],
        env={"CLOUDSTORE_APP_NAME": "app", "CLOUDSTORE_BATCH_THREADS": "lots"},
    )
    assert result.exit_code == 2
    data = json.loads(result.output)
    assert data["valid"] is False
    assert data["field"] == "CLOUDSTORE_BATCH_THREADS"


def test_validate_botocore_rejection_exits_error(runner, clean_env, monkeypatch):
    from botocore.exceptions import InvalidMaxRetryAttemptsError

    def refuse(_options):
        raise InvalidMaxRetryAttemptsError(provided_max_attempts=-1, min_value=0)

    monkeypatch.setattr("cloudstore.cli.validate.botocore_config", refuse)
    result = invoke(runner, ["validate"], env={"CLOUDSTORE_APP_NAME": "app"})
    assert result.exit_code == 1
    assert "Cannot build client config" in result.output
