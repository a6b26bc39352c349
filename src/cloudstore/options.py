"""Configuration options for object-storage clients."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cloudstore.errors import InvalidConfigurationError
from cloudstore.requester_pays import RequesterPaysOptions
from cloudstore.transport import DEFAULT_TRANSPORT_TYPE, HttpTransportType
from cloudstore.write_channel import AsyncWriteChannelOptions, AsyncWriteChannelOptionsBuilder

logger = logging.getLogger(__name__)

# Default setting for enabling auto-repair of implicit directories.
AUTO_REPAIR_IMPLICIT_DIRECTORIES_DEFAULT = True

# Default setting for enabling inferring of implicit directories.
INFER_IMPLICIT_DIRECTORIES_DEFAULT = True

# Default setting for whether to create a marker file when beginning file creation.
CREATE_EMPTY_MARKER_OBJECT_DEFAULT = False

# How long to wait for empty objects to appear when racing other workers.
MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION = 3_000

MAX_LIST_ITEMS_PER_CALL_DEFAULT = 1024

# The service accepts at most 1000 requests per batch; not enforced here.
MAX_REQUESTS_PER_BATCH_DEFAULT = 30

BATCH_THREADS_DEFAULT = 0

MAX_HTTP_REQUEST_RETRIES = 10

HTTP_REQUEST_CONNECT_TIMEOUT = 20 * 1000

HTTP_REQUEST_READ_TIMEOUT = 20 * 1000

# Default setting for whether to use a rewrite request for copy operations.
COPY_WITH_REWRITE_DEFAULT = False

ASYNC_WRITE_CHANNEL_OPTIONS_DEFAULT = AsyncWriteChannelOptions.new_builder().build()

REQUESTER_PAYS_OPTIONS_DEFAULT = RequesterPaysOptions.DEFAULT


@dataclass(frozen=True)
class StorageOptions:
    """Immutable settings read by a storage client when it is constructed.

    Instances come from ``StorageOptions.new_builder()`` or from
    ``to_builder()`` on an existing value. Building never validates; owners
    call ``throw_if_not_valid()`` once they have finished assembling.
    """

    project_id: str | None
    app_name: str | None
    auto_repair_implicit_directories_enabled: bool
    infer_implicit_directories_enabled: bool
    marker_file_creation_enabled: bool
    max_wait_millis_for_empty_object_creation: int
    max_list_items_per_call: int
    max_requests_per_batch: int
    batch_threads: int
    max_http_request_retries: int
    http_request_connect_timeout: int
    http_request_read_timeout: int
    transport_type: HttpTransportType
    proxy_address: str | None
    copy_with_rewrite_enabled: bool
    write_channel_options: AsyncWriteChannelOptions
    requester_pays_options: RequesterPaysOptions

    @classmethod
    def new_builder(cls) -> StorageOptionsBuilder:
        """Return a builder populated with every documented default."""
        return (
            StorageOptionsBuilder()
            .set_auto_repair_implicit_directories_enabled(AUTO_REPAIR_IMPLICIT_DIRECTORIES_DEFAULT)
            .set_infer_implicit_directories_enabled(INFER_IMPLICIT_DIRECTORIES_DEFAULT)
            .set_marker_file_creation_enabled(CREATE_EMPTY_MARKER_OBJECT_DEFAULT)
            .set_max_wait_millis_for_empty_object_creation(
                MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION
            )
            .set_max_list_items_per_call(MAX_LIST_ITEMS_PER_CALL_DEFAULT)
            .set_max_requests_per_batch(MAX_REQUESTS_PER_BATCH_DEFAULT)
            .set_batch_threads(BATCH_THREADS_DEFAULT)
            .set_max_http_request_retries(MAX_HTTP_REQUEST_RETRIES)
            .set_http_request_connect_timeout(HTTP_REQUEST_CONNECT_TIMEOUT)
            .set_http_request_read_timeout(HTTP_REQUEST_READ_TIMEOUT)
            .set_transport_type(DEFAULT_TRANSPORT_TYPE)
            .set_copy_with_rewrite_enabled(COPY_WITH_REWRITE_DEFAULT)
            .set_write_channel_options(ASYNC_WRITE_CHANNEL_OPTIONS_DEFAULT)
            .set_requester_pays_options(REQUESTER_PAYS_OPTIONS_DEFAULT)
        )

    def to_builder(self) -> StorageOptionsBuilder:
        """Reopen this value as a builder seeded with its current fields."""
        return (
            StorageOptionsBuilder()
            .set_project_id(self.project_id)
            .set_app_name(self.app_name)
            .set_auto_repair_implicit_directories_enabled(
                self.auto_repair_implicit_directories_enabled
            )
            .set_infer_implicit_directories_enabled(self.infer_implicit_directories_enabled)
            .set_marker_file_creation_enabled(self.marker_file_creation_enabled)
            .set_max_wait_millis_for_empty_object_creation(
                self.max_wait_millis_for_empty_object_creation
            )
            .set_max_list_items_per_call(self.max_list_items_per_call)
            .set_max_requests_per_batch(self.max_requests_per_batch)
            .set_batch_threads(self.batch_threads)
            .set_max_http_request_retries(self.max_http_request_retries)
            .set_http_request_connect_timeout(self.http_request_connect_timeout)
            .set_http_request_read_timeout(self.http_request_read_timeout)
            .set_transport_type(self.transport_type)
            .set_proxy_address(self.proxy_address)
            .set_copy_with_rewrite_enabled(self.copy_with_rewrite_enabled)
            .set_write_channel_options(self.write_channel_options)
            .set_requester_pays_options(self.requester_pays_options)
        )

    def throw_if_not_valid(self) -> None:
        """Raise InvalidConfigurationError unless app_name is non-empty."""
        if not self.app_name:
            raise InvalidConfigurationError("app_name", "must not be None or empty")

    def to_dict(self) -> dict[str, Any]:
        """Render the options as a JSON-friendly mapping."""
        return {
            "project_id": self.project_id,
            "app_name": self.app_name,
            "auto_repair_implicit_directories_enabled": (
                self.auto_repair_implicit_directories_enabled
            ),
            "infer_implicit_directories_enabled": self.infer_implicit_directories_enabled,
            "marker_file_creation_enabled": self.marker_file_creation_enabled,
            "max_wait_millis_for_empty_object_creation": (
                self.max_wait_millis_for_empty_object_creation
            ),
            "max_list_items_per_call": self.max_list_items_per_call,
            "max_requests_per_batch": self.max_requests_per_batch,
            "batch_threads": self.batch_threads,
            "max_http_request_retries": self.max_http_request_retries,
            "http_request_connect_timeout": self.http_request_connect_timeout,
            "http_request_read_timeout": self.http_request_read_timeout,
            "transport_type": self.transport_type.value,
            "proxy_address": self.proxy_address,
            "copy_with_rewrite_enabled": self.copy_with_rewrite_enabled,
            "write_channel_options": self.write_channel_options.to_dict(),
            "requester_pays_options": self.requester_pays_options.to_dict(),
        }


class WriteChannelSource(str, Enum):
    """Where a builder takes its write-channel options from at build time."""

    DIRECT = "direct"
    SUB_BUILDER = "sub_builder"


class StorageOptionsBuilder:
    """Mutable builder for StorageOptions.

    Prefer ``StorageOptions.new_builder()``: a bare builder starts without
    defaults and ``build()`` fails with TypeError until every required field
    has been set.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {
            "project_id": None,
            "app_name": None,
            "proxy_address": None,
        }
        self._write_channel_source = WriteChannelSource.DIRECT
        self._write_channel_options_builder: AsyncWriteChannelOptionsBuilder | None = None

    def _set(self, name: str, value: Any) -> StorageOptionsBuilder:
        self._values[name] = value
        return self

    def set_project_id(self, project_id: str | None) -> StorageOptionsBuilder:
        return self._set("project_id", project_id)

    def set_app_name(self, app_name: str | None) -> StorageOptionsBuilder:
        return self._set("app_name", app_name)

    def set_auto_repair_implicit_directories_enabled(
        self, auto_repair: bool
    ) -> StorageOptionsBuilder:
        return self._set("auto_repair_implicit_directories_enabled", auto_repair)

    def set_infer_implicit_directories_enabled(self, infer: bool) -> StorageOptionsBuilder:
        return self._set("infer_implicit_directories_enabled", infer)

    def set_marker_file_creation_enabled(self, enabled: bool) -> StorageOptionsBuilder:
        return self._set("marker_file_creation_enabled", enabled)

    def set_create_marker_objects(self, create_marker_objects: bool) -> StorageOptionsBuilder:
        """Set marker file creation.

        .. deprecated::
            Use `set_marker_file_creation_enabled()` instead.
        """
        warnings.warn(
            "set_create_marker_objects() is deprecated. "
            "Use set_marker_file_creation_enabled() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_marker_file_creation_enabled(create_marker_objects)

    def set_max_wait_millis_for_empty_object_creation(
        self, duration_millis: int
    ) -> StorageOptionsBuilder:
        return self._set("max_wait_millis_for_empty_object_creation", duration_millis)

    def set_max_list_items_per_call(self, max_list_items_per_call: int) -> StorageOptionsBuilder:
        return self._set("max_list_items_per_call", max_list_items_per_call)

    def set_max_requests_per_batch(self, max_requests_per_batch: int) -> StorageOptionsBuilder:
        return self._set("max_requests_per_batch", max_requests_per_batch)

    def set_batch_threads(self, batch_threads: int) -> StorageOptionsBuilder:
        return self._set("batch_threads", batch_threads)

    def set_max_http_request_retries(self, max_retries: int) -> StorageOptionsBuilder:
        return self._set("max_http_request_retries", max_retries)

    def set_http_request_connect_timeout(self, timeout_millis: int) -> StorageOptionsBuilder:
        return self._set("http_request_connect_timeout", timeout_millis)

    def set_http_request_read_timeout(self, timeout_millis: int) -> StorageOptionsBuilder:
        return self._set("http_request_read_timeout", timeout_millis)

    def set_transport_type(self, transport_type: HttpTransportType) -> StorageOptionsBuilder:
        return self._set("transport_type", transport_type)

    def set_proxy_address(self, proxy_address: str | None) -> StorageOptionsBuilder:
        return self._set("proxy_address", proxy_address)

    def set_copy_with_rewrite_enabled(self, copy_with_rewrite: bool) -> StorageOptionsBuilder:
        return self._set("copy_with_rewrite_enabled", copy_with_rewrite)

    def set_requester_pays_options(
        self, requester_pays_options: RequesterPaysOptions
    ) -> StorageOptionsBuilder:
        return self._set("requester_pays_options", requester_pays_options)

    def set_write_channel_options(
        self, write_channel_options: AsyncWriteChannelOptions
    ) -> StorageOptionsBuilder:
        # Stored even when a sub-builder is active; the sub-builder still wins at build().
        return self._set("write_channel_options", write_channel_options)

    @property
    def write_channel_source(self) -> WriteChannelSource:
        return self._write_channel_source

    def set_write_channel_options_builder(
        self, builder: AsyncWriteChannelOptionsBuilder
    ) -> StorageOptionsBuilder:
        """Install a sub-builder whose result replaces write_channel_options at build().

        .. deprecated::
            Use `set_write_channel_options()` instead.
        """
        warnings.warn(
            "set_write_channel_options_builder() is deprecated. "
            "Use set_write_channel_options() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        self._write_channel_options_builder = builder
        self._write_channel_source = WriteChannelSource.SUB_BUILDER
        return self

    def get_write_channel_options_builder(self) -> AsyncWriteChannelOptionsBuilder:
        """Return the write-channel sub-builder, creating it on first access.

        Once requested, the sub-builder's result overrides any value passed to
        ``set_write_channel_options()``, whatever the call order.

        .. deprecated::
            Use `set_write_channel_options()` instead.
        """
        warnings.warn(
            "get_write_channel_options_builder() is deprecated. "
            "Use set_write_channel_options() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        if self._write_channel_options_builder is None:
            self._write_channel_options_builder = AsyncWriteChannelOptions.new_builder()
            self._write_channel_source = WriteChannelSource.SUB_BUILDER
        return self._write_channel_options_builder

    def build(self) -> StorageOptions:
        """Resolve the write-channel source and freeze the options."""
        values = dict(self._values)
        if self._write_channel_source is WriteChannelSource.SUB_BUILDER:
            assert self._write_channel_options_builder is not None
            if "write_channel_options" in values:
                logger.debug("write-channel sub-builder overrides directly set options")
            values["write_channel_options"] = self._write_channel_options_builder.build()
        return StorageOptions(**values)


__all__ = [
    "StorageOptions",
    "StorageOptionsBuilder",
    "WriteChannelSource",
    "AUTO_REPAIR_IMPLICIT_DIRECTORIES_DEFAULT",
    "INFER_IMPLICIT_DIRECTORIES_DEFAULT",
    "CREATE_EMPTY_MARKER_OBJECT_DEFAULT",
    "MAX_WAIT_MILLIS_FOR_EMPTY_OBJECT_CREATION",
    "MAX_LIST_ITEMS_PER_CALL_DEFAULT",
    "MAX_REQUESTS_PER_BATCH_DEFAULT",
    "BATCH_THREADS_DEFAULT",
    "MAX_HTTP_REQUEST_RETRIES",
    "HTTP_REQUEST_CONNECT_TIMEOUT",
    "HTTP_REQUEST_READ_TIMEOUT",
    "COPY_WITH_REWRITE_DEFAULT",
    "ASYNC_WRITE_CHANNEL_OPTIONS_DEFAULT",
    "REQUESTER_PAYS_OPTIONS_DEFAULT",
]
