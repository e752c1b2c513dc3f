"""Models for server resources and patch versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from komodels.database import COLLATE, NUMBER, STRING, Column, DbType, Model


@dataclass
class ServerResource(Model):
    """Server resource."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "SERVER_RESOURCE"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("resource_id", "nResourceID", "int", NUMBER, nullable=False, primary_key=True),
        Column("name", "strName", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("resource", "strResource", "varchar(100)" + COLLATE, STRING),
    )

    resource_id: int = 0
    name: str = ""
    resource: str | None = None


@dataclass
class Version(Model):
    """Version data and patch management."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "VERSION"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("version", "sVersion", "smallint", NUMBER, nullable=False, primary_key=True),
        Column("file_name", "strFileName", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("compress_name", "strCompressName", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("history_version", "sHistoryVersion", "smallint", NUMBER, nullable=False),
    )

    version: int = 0
    file_name: str = ""
    compress_name: str = ""
    history_version: int = 0