"""Normalized domain records returned by the repository."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .base import Document

RecordT = TypeVar("RecordT", bound="Record")


def normalize_document(document: Document | None) -> Document | None:
    """Convert the store-native ``_id`` to its string form.

    Absent documents pass through as None.
    """
    if document is None:
        return None
    normalized = dict(document)
    if normalized.get("_id") is not None:
        normalized["_id"] = str(normalized["_id"])
    return normalized


class Record(BaseModel):
    # Documents are schemaless: unknown keys are dropped, missing keys are None.
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", frozen=True, coerce_numbers_to_str=True
    )

    id: str = Field(alias="_id")

    @classmethod
    def from_document(cls: type[RecordT], document: Document | None) -> RecordT | None:
        normalized = normalize_document(document)
        if normalized is None:
            return None
        return cls.model_validate(normalized)


class ApplicationRecord(Record):
    name: str | None = None
    git_hub_url: str | None = Field(default=None, alias="gitHubUrl")
    info: str | None = None


class StartUpInfoRecord(Record):
    application_id: str | None = Field(default=None, alias="applicationId")
    device_id: str | None = Field(default=None, alias="deviceId")
    startup_time: str | None = Field(default=None, alias="startupTime")
    build_info: str | None = Field(default=None, alias="buildInfo")
    build_date: str | None = Field(default=None, alias="buildDate")


class DeviceRecord(Record):
    token: str | None = None
    name: str | None = None
    device_type: str | None = Field(default=None, alias="type")
    os_version: str | None = Field(default=None, alias="osVersion")


def to_document(fields: dict[str, Any]) -> Document:
    """Drop unset (None) values so stored documents only carry provided fields."""
    return {key: value for key, value in fields.items() if value is not None}
