"""Models for the operator editing logs and the hack tool log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from komodels.database import (
    BYTES,
    COLLATE,
    DATETIME,
    NUMBER,
    STRING,
    Column,
    DbType,
    Model,
)


def _operator_columns() -> tuple[Column, ...]:
    return (
        Column("char_id", "strCharID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("account_id", "strAccountID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("op_id", "strOpID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("op_ip", "strOpIP", "varchar(21)" + COLLATE, STRING, nullable=False),
    )


def _blob(attr: str, name: str, size: int, hex_protect: bool) -> Column:
    return Column(
        attr, name, f"char({size})" + COLLATE, BYTES,
        nullable=False, hex_protect=hex_protect,
    )


@dataclass
class UserEditor(Model):
    """Snapshot of a character before and after an operator edit."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_EDITOR"
    _columns: ClassVar[tuple[Column, ...]] = (
        *_operator_columns(),
        _blob("old_user_value", "strOldUserValue", 600, False),
        _blob("new_user_value", "strNewUserValue", 600, False),
        _blob("old_user_skill", "strOldUserSkill", 10, True),
        _blob("new_user_skill", "strNewUserSkill", 10, True),
        _blob("old_user_item", "strOldUserItem", 400, True),
        _blob("new_user_item", "strNewUserItem", 400, True),
        _blob("old_warehouse_value", "strOldWHValue", 100, True),
        _blob("new_warehouse_value", "strNewWHValue", 100, True),
        _blob("old_warehouse_item", "strOldWHItem", 1600, True),
        _blob("new_warehouse_item", "strNewWHItem", 1600, True),
        Column(
            "editor_time", "EditorTime", "smalldatetime", DATETIME,
            nullable=False, default="getdate()",
        ),
    )

    char_id: str = ""
    account_id: str = ""
    op_id: str = ""
    op_ip: str = ""
    old_user_value: bytes = b""
    new_user_value: bytes = b""
    old_user_skill: bytes = b""
    new_user_skill: bytes = b""
    old_user_item: bytes = b""
    new_user_item: bytes = b""
    old_warehouse_value: bytes = b""
    new_warehouse_value: bytes = b""
    old_warehouse_item: bytes = b""
    new_warehouse_item: bytes = b""
    editor_time: datetime = datetime.min


@dataclass
class UserEditorItem(Model):
    """Single item change made by an operator."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_EDITOR_ITEM"
    _columns: ClassVar[tuple[Column, ...]] = (
        *_operator_columns(),
        Column("db_index", "sDBIndex", "smallint", NUMBER, nullable=False),
        Column("pos", "sPos", "smallint", NUMBER, nullable=False),
        Column("type", "byType", "tinyint", NUMBER, nullable=False),
        Column("item_id1", "nItemID1", "int", NUMBER, nullable=False),
        Column("item_id2", "nItemID2", "int", NUMBER, nullable=False),
        Column("update_time", "UpdateTime", "smalldatetime", DATETIME),
    )

    char_id: str = ""
    account_id: str = ""
    op_id: str = ""
    op_ip: str = ""
    db_index: int = 0
    pos: int = 0
    type: int = 0
    item_id1: int = 0
    item_id2: int = 0
    update_time: datetime | None = None


@dataclass
class ProgramListLog(Model):
    """Program list log."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "PROGRAMLIST_LOG"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("id", "id", "int", NUMBER, nullable=False, primary_key=True),
        Column("account_id", "strAccountID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("char_id", "strCharID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column(
            "hack_tool_name", "strHackToolName", "varchar(1024)" + COLLATE, STRING,
            nullable=False,
        ),
        Column(
            "write_time", "tWriteTime", "smalldatetime", DATETIME,
            nullable=False, default="getdate()",
        ),
    )

    id: int = 0
    account_id: str = ""
    char_id: str = ""
    hack_tool_name: str = ""
    write_time: datetime = datetime.min