"""NDJSON record models emitted by the CLI."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..addressing import Endpoint


class EndpointRecord(BaseModel):
    """One successfully parsed input."""

    input: str
    version: Literal[4, 6]
    address: str
    port: Optional[int] = Field(default=None, ge=0, le=65535)

    @classmethod
    def from_endpoint(cls, raw: str, endpoint: Endpoint) -> EndpointRecord:
        return cls(
            input=raw,
            version=endpoint.address.version,
            address=str(endpoint.address),
            port=endpoint.port,
        )


class Error(BaseModel):
    """One rejected input."""

    model_config = ConfigDict(populate_by_name=True)

    input: str
    error: bool = Field(default=True, alias="_error")
    message: str

    def __str__(self) -> str:
        return self.message
