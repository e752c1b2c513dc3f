"""Models for account, skill shortcut, saved magic and warehouse tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from komodels.database import COLLATE, DATETIME, NUMBER, STRING, Column, DbType, Model


def _saved_magic_columns() -> tuple[Column, ...]:
    slots = tuple(
        column
        for n in range(1, 11)
        for column in (
            Column(f"skill{n}", f"nSkill{n}", "int", NUMBER, nullable=False),
            Column(f"during{n}", f"nDuring{n}", "smallint", NUMBER, nullable=False),
        )
    )
    char_id = Column(
        "char_id", "strCharID", "varchar(50)" + COLLATE, STRING,
        nullable=False, primary_key=True,
    )
    return (char_id, *slots)


@dataclass
class TbUser(Model):
    """User account information."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "TB_USER"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column(
            "account_id", "strAccountID", "varchar(21)" + COLLATE, STRING,
            nullable=False, primary_key=True,
        ),
        Column("password", "strPasswd", "varchar(13)" + COLLATE, STRING, nullable=False),
        Column("soc_no", "strSocNo", "varchar(20)" + COLLATE, STRING, nullable=False, default="''"),
        Column("email", "strEmail", "varchar(250)" + COLLATE, STRING, nullable=False, default="''"),
        Column("authority", "strAuthority", "tinyint", NUMBER, nullable=False, default="1"),
        Column(
            "premium_expire", "PremiumExpire", "datetime", DATETIME,
            nullable=False, default="getdate()+(3)",
        ),
    )

    account_id: str = ""
    password: str = ""
    soc_no: str = ""
    email: str = ""
    authority: int = 0
    premium_expire: datetime = datetime.min


@dataclass
class UserDataSkillShortcut(Model):
    """User data skill shortcut."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USERDATA_SKILLSHORTCUT"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column(
            "char_id", "strCharID", "varchar(21)" + COLLATE, STRING,
            nullable=False, primary_key=True, default="''",
        ),
        Column("count", "nCount", "smallint", NUMBER, nullable=False, default="0"),
        Column(
            "skill_data", "strSkillData", "varchar(260)" + COLLATE, STRING,
            nullable=False, default="0x00", hex_protect=True,
        ),
    )

    char_id: str = ""
    count: int = 0
    skill_data: str = ""


@dataclass
class UserSavedMagic(Model):
    """User saved magic: ten skill slots with their remaining durations."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_SAVED_MAGIC"
    _columns: ClassVar[tuple[Column, ...]] = _saved_magic_columns()

    char_id: str = ""
    skill1: int = 0
    during1: int = 0
    skill2: int = 0
    during2: int = 0
    skill3: int = 0
    during3: int = 0
    skill4: int = 0
    during4: int = 0
    skill5: int = 0
    during5: int = 0
    skill6: int = 0
    during6: int = 0
    skill7: int = 0
    during7: int = 0
    skill8: int = 0
    during8: int = 0
    skill9: int = 0
    during9: int = 0
    skill10: int = 0
    during10: int = 0


@dataclass
class Warehouse(Model):
    """Account-level storage, known in game as the Inn."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "WAREHOUSE"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column(
            "account_id", "strAccountID", "varchar(21)" + COLLATE, STRING,
            nullable=False, primary_key=True,
        ),
        Column("money", "nMoney", "int", NUMBER, nullable=False, default="0"),
        Column("dw_time", "dwTime", "int", NUMBER, nullable=False, default="0"),
        Column("item_data", "WarehouseData", "varchar(1600)" + COLLATE, STRING, hex_protect=True),
        Column("serial", "strSerial", "varchar(1600)" + COLLATE, STRING, hex_protect=True),
    )

    account_id: str = ""
    money: int = 0
    dw_time: int = 0
    item_data: str | None = None
    serial: str | None = None