"""Models for the knights and personal ranking tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from komodels.database import COLLATE, DATETIME, NUMBER, STRING, Column, DbType, Model


def _name_column(attr: str, name: str, nullable: bool = True) -> Column:
    return Column(attr, name, "varchar(21)" + COLLATE, STRING, nullable=nullable)


@dataclass
class UserKnightsRank(Model):
    """User knights ranking."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_KNIGHTS_RANK"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("index", "shIndex", "smallint", NUMBER, nullable=False, primary_key=True),
        _name_column("name", "strName", nullable=False),
        _name_column("elmo_user_id", "strElmoUserID"),
        _name_column("elmo_knights_name", "strElmoKnightsName"),
        Column("elmo_loyalty", "nElmoLoyalty", "int", NUMBER),
        _name_column("karus_user_id", "strKarusUserID"),
        _name_column("karus_knights_name", "strKarusKnightsName"),
        Column("karus_loyalty", "nKarusLoyalty", "int", NUMBER),
        Column("money", "nMoney", "int", NUMBER, nullable=False),
    )

    index: int = 0
    name: str = ""
    elmo_user_id: str | None = None
    elmo_knights_name: str | None = None
    elmo_loyalty: int | None = None
    karus_user_id: str | None = None
    karus_knights_name: str | None = None
    karus_loyalty: int | None = None
    money: int = 0


@dataclass
class UserPersonalRank(Model):
    """User personal ranking."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_PERSONAL_RANK"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("rank", "nRank", "smallint", NUMBER, nullable=False, primary_key=True),
        _name_column("position", "strPosition", nullable=False),
        Column("elmo_up", "nElmoUP", "smallint", NUMBER, nullable=False),
        _name_column("elmo_user_id", "strElmoUserID"),
        Column("elmo_loyalty_monthly", "nElmoLoyaltyMonthly", "int", NUMBER),
        Column("elmo_check", "nElmoCheck", "int", NUMBER, nullable=False, default="0"),
        Column("karus_up", "nKarusUP", "smallint", NUMBER, nullable=False),
        _name_column("karus_user_id", "strKarusUserID"),
        Column("karus_loyalty_monthly", "nKarusLoyaltyMonthly", "int", NUMBER),
        Column("karus_check", "nKarusCheck", "int", NUMBER, nullable=False, default="0"),
        Column("salary", "nSalary", "int", NUMBER, nullable=False),
        Column("update_date", "UpdateDate", "smalldatetime", DATETIME, nullable=False),
    )

    rank: int = 0
    position: str = ""
    elmo_up: int = 0
    elmo_user_id: str | None = None
    elmo_loyalty_monthly: int | None = None
    elmo_check: int = 0
    karus_up: int = 0
    karus_user_id: str | None = None
    karus_loyalty_monthly: int | None = None
    karus_check: int = 0
    salary: int = 0
    update_date: datetime = datetime.min