"""Tests for building storage options from the environment."""

from __future__ import annotations

import pytest

from cloudstore import (
    HttpTransportType,
    InvalidConfigurationError,
    RequesterPaysMode,
    StorageOptions,
    options_from_env,
)


def test_empty_environment_yields_defaults() -> None:
    assert options_from_env({}).build() == StorageOptions.new_builder().build()


def test_reads_process_environment(clean_env) -> None:
    clean_env.setenv("CLOUDSTORE_APP_NAME", "from-env")
    assert options_from_env().build().app_name == "from-env"


def test_overrides_are_coerced() -> None:
    opts = options_from_env(
        {
            "CLOUDSTORE_PROJECT_ID": "proj",
            "CLOUDSTORE_APP_NAME": "app",
            "CLOUDSTORE_AUTO_REPAIR_IMPLICIT_DIRECTORIES": "false",
            "CLOUDSTORE_INFER_IMPLICIT_DIRECTORIES": "0",
            "CLOUDSTORE_MARKER_FILE_CREATION": "yes",
            "CLOUDSTORE_MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION": "500",
            "CLOUDSTORE_MAX_LIST_ITEMS_PER_CALL": "2048",
            "CLOUDSTORE_MAX_REQUESTS_PER_BATCH": "1000",
            "CLOUDSTORE_BATCH_THREADS": "16",
            "CLOUDSTORE_MAX_HTTP_REQUEST_RETRIES": "3",
            "CLOUDSTORE_HTTP_CONNECT_TIMEOUT_MS": "1500",
            "CLOUDSTORE_HTTP_READ_TIMEOUT_MS": "2500",
            "CLOUDSTORE_TRANSPORT_TYPE": "CRT",
            "CLOUDSTORE_PROXY_ADDRESS": "proxy.internal:3128",
            "CLOUDSTORE_COPY_WITH_REWRITE": "true",
        }
    ).build()

    assert opts.project_id == "proj"
    assert opts.app_name == "app"
    assert opts.auto_repair_implicit_directories_enabled is False
    assert opts.infer_implicit_directories_enabled is False
    assert opts.marker_file_creation_enabled is True
    assert opts.max_wait_millis_for_empty_object_creation == 500
    assert opts.max_list_items_per_call == 2048
    assert opts.max_requests_per_batch == 1000
    assert opts.batch_threads == 16
    assert opts.max_http_request_retries == 3
    assert opts.http_request_connect_timeout == 1500
    assert opts.http_request_read_timeout == 2500
    assert opts.transport_type is HttpTransportType.CRT
    assert opts.proxy_address == "proxy.internal:3128"
    assert opts.copy_with_rewrite_enabled is True


def test_requester_pays_from_env() -> None:
    opts = options_from_env(
        {
            "CLOUDSTORE_REQUESTER_PAYS_MODE": "Custom",
            "CLOUDSTORE_REQUESTER_PAYS_PROJECT_ID": "billing",
            "CLOUDSTORE_REQUESTER_PAYS_BUCKETS": "b1, b2,,",
        }
    ).build()
    rp = opts.requester_pays_options
    assert rp.mode is RequesterPaysMode.CUSTOM
    assert rp.project_id == "billing"
    assert rp.buckets == frozenset({"b1", "b2"})


def test_requester_pays_project_alone_keeps_disabled_mode() -> None:
    opts = options_from_env({"CLOUDSTORE_REQUESTER_PAYS_PROJECT_ID": "billing"}).build()
    assert opts.requester_pays_options.mode is RequesterPaysMode.DISABLED
    assert opts.requester_pays_options.project_id == "billing"


def test_empty_and_unrelated_variables_are_ignored() -> None:
    opts = options_from_env(
        {
            "CLOUDSTORE_BATCH_THREADS": "",
            "CLOUDSTORE_UNKNOWN": "x",
            "OTHER_APP_NAME": "nope",
        }
    ).build()
    assert opts == StorageOptions.new_builder().build()


@pytest.mark.parametrize(
    "name, value",
    [
        ("CLOUDSTORE_BATCH_THREADS", "many"),
        ("CLOUDSTORE_COPY_WITH_REWRITE", "perhaps"),
        ("CLOUDSTORE_TRANSPORT_TYPE", "apache"),
        ("CLOUDSTORE_REQUESTER_PAYS_MODE", "sometimes"),
    ],
)
def test_unparseable_value_names_variable(name: str, value: str) -> None:
    with pytest.raises(InvalidConfigurationError) as exc_info:
        options_from_env({name: value})
    assert exc_info.value.field == name
    assert name in str(exc_info.value)


def test_returned_builder_stays_open() -> None:
    builder = options_from_env({"CLOUDSTORE_APP_NAME": "env"})
    opts = builder.set_app_name("override").build()
    assert opts.app_name == "override"


def test_env_options_are_not_validated() -> None:
    opts = options_from_env({}).build()
    with pytest.raises(InvalidConfigurationError):
        opts.throw_if_not_valid()
