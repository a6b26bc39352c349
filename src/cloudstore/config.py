"""Environment-driven configuration for storage options."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from cloudstore.errors import InvalidConfigurationError
from cloudstore.options import StorageOptions, StorageOptionsBuilder
from cloudstore.requester_pays import RequesterPaysMode, RequesterPaysOptions
from cloudstore.transport import HttpTransportType

logger = logging.getLogger(__name__)

ENV_PREFIX = "CLOUDSTORE_"

# Environment variable suffix -> builder setter.
_ENV_FIELDS: dict[str, str] = {
    "PROJECT_ID": "set_project_id",
    "APP_NAME": "set_app_name",
    "AUTO_REPAIR_IMPLICIT_DIRECTORIES": "set_auto_repair_implicit_directories_enabled",
    "INFER_IMPLICIT_DIRECTORIES": "set_infer_implicit_directories_enabled",
    "MARKER_FILE_CREATION": "set_marker_file_creation_enabled",
    "MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION": "set_max_wait_millis_for_empty_object_creation",
    "MAX_LIST_ITEMS_PER_CALL": "set_max_list_items_per_call",
    "MAX_REQUESTS_PER_BATCH": "set_max_requests_per_batch",
    "BATCH_THREADS": "set_batch_threads",
    "MAX_HTTP_REQUEST_RETRIES": "set_max_http_request_retries",
    "HTTP_CONNECT_TIMEOUT_MS": "set_http_request_connect_timeout",
    "HTTP_READ_TIMEOUT_MS": "set_http_request_read_timeout",
    "TRANSPORT_TYPE": "set_transport_type",
    "PROXY_ADDRESS": "set_proxy_address",
    "COPY_WITH_REWRITE": "set_copy_with_rewrite_enabled",
}

_REQUESTER_PAYS_FIELDS = (
    "REQUESTER_PAYS_MODE",
    "REQUESTER_PAYS_PROJECT_ID",
    "REQUESTER_PAYS_BUCKETS",
)


class _EnvOptions(BaseModel):
    """Coerces raw environment strings into typed option values."""

    PROJECT_ID: str | None = None
    APP_NAME: str | None = None
    AUTO_REPAIR_IMPLICIT_DIRECTORIES: bool | None = None
    INFER_IMPLICIT_DIRECTORIES: bool | None = None
    MARKER_FILE_CREATION: bool | None = None
    MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION: int | None = None
    MAX_LIST_ITEMS_PER_CALL: int | None = None
    MAX_REQUESTS_PER_BATCH: int | None = None
    BATCH_THREADS: int | None = None
    MAX_HTTP_REQUEST_RETRIES: int | None = None
    HTTP_CONNECT_TIMEOUT_MS: int | None = None
    HTTP_READ_TIMEOUT_MS: int | None = None
    TRANSPORT_TYPE: HttpTransportType | None = None
    PROXY_ADDRESS: str | None = None
    COPY_WITH_REWRITE: bool | None = None
    REQUESTER_PAYS_MODE: RequesterPaysMode | None = None
    REQUESTER_PAYS_PROJECT_ID: str | None = None
    REQUESTER_PAYS_BUCKETS: frozenset[str] | None = None

    @field_validator("TRANSPORT_TYPE", mode="before")
    @classmethod
    def parse_transport(cls, value: object) -> object:
        if isinstance(value, str):
            return HttpTransportType.parse(value)
        return value

    @field_validator("REQUESTER_PAYS_MODE", mode="before")
    @classmethod
    def lowercase_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("REQUESTER_PAYS_BUCKETS", mode="before")
    @classmethod
    def split_buckets(cls, value: object) -> object:
        if isinstance(value, str):
            return frozenset(b.strip() for b in value.split(",") if b.strip())
        return value


def _read_env(environ: Mapping[str, str]) -> _EnvOptions:
    raw = {
        key[len(ENV_PREFIX) :]: value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
        and key[len(ENV_PREFIX) :] in _EnvOptions.model_fields
        and value != ""
    }
    try:
        return _EnvOptions(**raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        name = str(first["loc"][0]) if first["loc"] else "?"
        raise InvalidConfigurationError(
            f"{ENV_PREFIX}{name}", f"is invalid: {first['msg']}"
        ) from e


def options_from_env(environ: Mapping[str, str] | None = None) -> StorageOptionsBuilder:
    """Return a builder seeded with defaults and any CLOUDSTORE_* overrides.

    The builder is returned unbuilt so callers can layer further settings on
    top before building and validating.
    """
    env = _read_env(os.environ if environ is None else environ)
    builder = StorageOptions.new_builder()

    for name, setter in _ENV_FIELDS.items():
        value = getattr(env, name)
        if value is None:
            continue
        logger.debug("option %s set from %s%s", setter[len("set_") :], ENV_PREFIX, name)
        getattr(builder, setter)(value)

    if any(getattr(env, name) is not None for name in _REQUESTER_PAYS_FIELDS):
        builder.set_requester_pays_options(
            RequesterPaysOptions(
                mode=env.REQUESTER_PAYS_MODE or RequesterPaysMode.DISABLED,
                project_id=env.REQUESTER_PAYS_PROJECT_ID,
                buckets=env.REQUESTER_PAYS_BUCKETS or frozenset(),
            )
        )

    return builder


__all__ = ["ENV_PREFIX", "options_from_env"]
