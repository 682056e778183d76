"""Read connection profiles from a JSON document.

Used by the command line entry point to populate a registry; the bridge
never writes profiles back.
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Annotated, Any, Dict, List, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pvfs_bridge.connections.details import ConnectionDetails, GenericDetails, HCPDetails, S3Details
from pvfs_bridge.connections.registry import ConnectionRegistry
from pvfs_bridge.constants import HCP_TYPE, S3_TYPES


class ConnectionRecord(BaseModel):
    """One connection profile as written in a connections file."""

    model_config = ConfigDict(extra="allow")

    name: Annotated[str, Field(min_length=1, description="Logical connection name (pvfs authority)")]
    type: Annotated[str, Field(min_length=1, description="Backend type tag", examples=["s3", "hcp", "hdfs"])]

    @field_validator("name", "type")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def details_class(self) -> Type[ConnectionDetails]:
        if self.type in S3_TYPES:
            return S3Details
        if self.type == HCP_TYPE:
            return HCPDetails
        return GenericDetails

    def to_details(self) -> ConnectionDetails:
        cls = self.details_class()
        known = {f.name for f in dataclasses.fields(cls)}
        attributes: Dict[str, Any] = {
            key: value for key, value in (self.model_extra or {}).items() if key in known
        }
        if "acceptSelfSignedCertificate" in attributes:
            flag = attributes["acceptSelfSignedCertificate"]
            attributes["acceptSelfSignedCertificate"] = str(flag).strip().lower() == "true"
        return cls(name=self.name, type=self.type, **attributes)


class ConnectionsFile(BaseModel):
    """Top-level document: ``{"connections": [...]}``."""

    connections: List[ConnectionRecord] = Field(default_factory=list)


def load_connections(path: str | Path) -> ConnectionRegistry:
    """Build a registry from a connections file.

    Raises:
        FileNotFoundError: When the file does not exist
        pydantic.ValidationError: When a record is invalid
    """
    with Path(path).open("r", encoding="utf-8") as handle:
        document = ConnectionsFile.model_validate(json.load(handle))

    registry = ConnectionRegistry()
    for record in document.connections:
        registry.register(record.to_details())
    return registry
