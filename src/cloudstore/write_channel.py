"""Options for buffered, asynchronous object uploads."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

BUFFER_SIZE_DEFAULT = 8 * 1024 * 1024
PIPE_BUFFER_SIZE_DEFAULT = 1024 * 1024
UPLOAD_CHUNK_SIZE_DEFAULT = 64 * 1024 * 1024
DIRECT_UPLOAD_ENABLED_DEFAULT = False


@dataclass(frozen=True)
class AsyncWriteChannelOptions:
    """Upload buffering settings handed through to the write channel."""

    buffer_size: int = BUFFER_SIZE_DEFAULT
    pipe_buffer_size: int = PIPE_BUFFER_SIZE_DEFAULT
    upload_chunk_size: int = UPLOAD_CHUNK_SIZE_DEFAULT
    direct_upload_enabled: bool = DIRECT_UPLOAD_ENABLED_DEFAULT

    @classmethod
    def new_builder(cls) -> AsyncWriteChannelOptionsBuilder:
        return AsyncWriteChannelOptionsBuilder()

    def to_builder(self) -> AsyncWriteChannelOptionsBuilder:
        return (
            AsyncWriteChannelOptionsBuilder()
            .set_buffer_size(self.buffer_size)
            .set_pipe_buffer_size(self.pipe_buffer_size)
            .set_upload_chunk_size(self.upload_chunk_size)
            .set_direct_upload_enabled(self.direct_upload_enabled)
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class AsyncWriteChannelOptionsBuilder:
    """Mutable builder for AsyncWriteChannelOptions."""

    def __init__(self) -> None:
        self._buffer_size = BUFFER_SIZE_DEFAULT
        self._pipe_buffer_size = PIPE_BUFFER_SIZE_DEFAULT
        self._upload_chunk_size = UPLOAD_CHUNK_SIZE_DEFAULT
        self._direct_upload_enabled = DIRECT_UPLOAD_ENABLED_DEFAULT

    def set_buffer_size(self, buffer_size: int) -> AsyncWriteChannelOptionsBuilder:
        self._buffer_size = buffer_size
        return self

    def set_pipe_buffer_size(self, pipe_buffer_size: int) -> AsyncWriteChannelOptionsBuilder:
        self._pipe_buffer_size = pipe_buffer_size
        return self

    def set_upload_chunk_size(self, upload_chunk_size: int) -> AsyncWriteChannelOptionsBuilder:
        self._upload_chunk_size = upload_chunk_size
        return self

    def set_direct_upload_enabled(self, enabled: bool) -> AsyncWriteChannelOptionsBuilder:
        self._direct_upload_enabled = enabled
        return self

    def build(self) -> AsyncWriteChannelOptions:
        return AsyncWriteChannelOptions(
            buffer_size=self._buffer_size,
            pipe_buffer_size=self._pipe_buffer_size,
            upload_chunk_size=self._upload_chunk_size,
            direct_upload_enabled=self._direct_upload_enabled,
        )


__all__ = ["AsyncWriteChannelOptions", "AsyncWriteChannelOptionsBuilder"]
