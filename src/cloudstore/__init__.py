"""cloudstore: configuration options for object-storage clients."""

__version__ = "0.1.0"

from cloudstore.config import options_from_env
from cloudstore.errors import CloudStoreError, InvalidConfigurationError
from cloudstore.options import StorageOptions, StorageOptionsBuilder, WriteChannelSource
from cloudstore.requester_pays import RequesterPaysMode, RequesterPaysOptions
from cloudstore.transport import DEFAULT_TRANSPORT_TYPE, HttpTransportType
from cloudstore.write_channel import AsyncWriteChannelOptions, AsyncWriteChannelOptionsBuilder

__all__ = [
    "__version__",
    "StorageOptions",
    "StorageOptionsBuilder",
    "WriteChannelSource",
    "AsyncWriteChannelOptions",
    "AsyncWriteChannelOptionsBuilder",
    "RequesterPaysMode",
    "RequesterPaysOptions",
    "HttpTransportType",
    "DEFAULT_TRANSPORT_TYPE",
    "CloudStoreError",
    "InvalidConfigurationError",
    "options_from_env",
]
