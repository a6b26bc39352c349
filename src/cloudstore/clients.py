"""Wire StorageOptions into boto3/botocore S3 clients."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

import boto3
from botocore.config import Config as BotoConfig

from cloudstore.errors import InvalidConfigurationError
from cloudstore.options import StorageOptions

logger = logging.getLogger(__name__)

# botocore's own default connection pool size.
_MIN_POOL_CONNECTIONS = 10


def _proxy_url(proxy_address: str) -> str:
    """Normalize ``host:port`` (optionally with scheme) into a proxy URL."""
    url = proxy_address if "://" in proxy_address else f"http://{proxy_address}"
    parsed = urlparse(url)
    try:
        port = parsed.port
    except ValueError:
        port = None
    if not parsed.hostname or port is None:
        raise InvalidConfigurationError(
            "proxy_address", f"must be in the form host:port, got '{proxy_address}'"
        )
    return url


def botocore_config(options: StorageOptions) -> BotoConfig:
    """Translate storage options into a botocore client config.

    Non-positive timeouts keep botocore's defaults and negative retry counts
    become zero.
    """
    kwargs: dict[str, Any] = {
        "retries": {
            "max_attempts": max(0, options.max_http_request_retries),
            "mode": "standard",
        },
        "max_pool_connections": max(_MIN_POOL_CONNECTIONS, options.batch_threads),
    }
    if options.http_request_connect_timeout > 0:
        kwargs["connect_timeout"] = options.http_request_connect_timeout / 1000
    if options.http_request_read_timeout > 0:
        kwargs["read_timeout"] = options.http_request_read_timeout / 1000
    if options.proxy_address:
        proxy = _proxy_url(options.proxy_address)
        kwargs["proxies"] = {"http": proxy, "https": proxy}
    if options.app_name:
        kwargs["user_agent_extra"] = options.app_name
    return BotoConfig(**kwargs)


def create_s3_client(
    options: StorageOptions,
    *,
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> Any:
    """Validate options and create an S3 client configured from them."""
    options.throw_if_not_valid()
    session = boto3.Session(region_name=region_name)
    logger.debug(
        "creating s3 client for app %s (endpoint=%s, transport=%s)",
        options.app_name,
        endpoint_url or "default",
        options.transport_type.value,
    )
    return session.client(
        "s3",
        region_name=region_name,
        endpoint_url=endpoint_url,
        config=botocore_config(options),
    )


__all__ = ["botocore_config", "create_s3_client"]
