"""Serialization models for ipnorm output."""

from .records import EndpointRecord, Error

__all__ = ["EndpointRecord", "Error"]
