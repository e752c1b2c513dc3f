"""Models for the item rental tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from komodels.database import COLLATE, DATETIME, NUMBER, STRING, Column, DbType, Model


def _rental_columns(with_primary_key: bool) -> tuple[Column, ...]:
    return (
        Column(
            "rental_index", "nRentalIndex", "int", NUMBER,
            nullable=False, primary_key=with_primary_key,
        ),
        Column("item_index", "nItemIndex", "int", NUMBER, nullable=False),
        Column("durability", "sDurability", "smallint", NUMBER, nullable=False, default="0"),
        Column("serial_number", "nSerialNumber", "bigint", NUMBER, nullable=False),
        Column("reg_type", "byRegType", "tinyint", NUMBER, nullable=False, default="0"),
        Column("item_type", "byItemType", "tinyint", NUMBER, nullable=False),
        Column("item_class", "byClass", "tinyint", NUMBER, nullable=False),
        Column("rental_time", "sRentalTime", "smallint", NUMBER, nullable=False),
        Column("rental_money", "nRentalMoney", "int", NUMBER, nullable=False),
        Column("lender_char_id", "strLenderCharID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("lender_account_id", "strLenderAcID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("borrower_char_id", "strBorrowerCharID", "varchar(21)" + COLLATE, STRING),
        Column("borrower_account_id", "strBorrowerAcID", "varchar(21)" + COLLATE, STRING),
        Column("lend_time", "timeLender", "smalldatetime", DATETIME),
        Column(
            "register_time", "timeRegister", "smalldatetime", DATETIME,
            nullable=False, default="getdate()",
        ),
    )


@dataclass
class RentalItem(Model):
    """Rental item."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "RENTAL_ITEM"
    _columns: ClassVar[tuple[Column, ...]] = _rental_columns(True)

    rental_index: int = 0
    item_index: int = 0
    durability: int = 0
    serial_number: int = 0
    reg_type: int = 0
    item_type: int = 0
    item_class: int = 0
    rental_time: int = 0
    rental_money: int = 0
    lender_char_id: str = ""
    lender_account_id: str = ""
    borrower_char_id: str | None = None
    borrower_account_id: str | None = None
    lend_time: datetime | None = None
    register_time: datetime = datetime.min


@dataclass
class RentalItemList(Model):
    """Rental item list."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "RENTAL_ITEM_LIST"
    _columns: ClassVar[tuple[Column, ...]] = _rental_columns(False)

    rental_index: int = 0
    item_index: int = 0
    durability: int = 0
    serial_number: int = 0
    reg_type: int = 0
    item_type: int = 0
    item_class: int = 0
    rental_time: int = 0
    rental_money: int = 0
    lender_char_id: str = ""
    lender_account_id: str = ""
    borrower_char_id: str | None = None
    borrower_account_id: str | None = None
    lend_time: datetime | None = None
    register_time: datetime = datetime.min


@dataclass
class UserRentalItem(Model):
    """User rental item."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "USER_RENTAL_ITEM"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("user_id", "strUserID", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("account_id", "strAccountID", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("rental_type", "byRentalType", "tinyint", NUMBER, nullable=False),
        Column("reg_type", "byRegType", "tinyint", NUMBER, nullable=False, default="0"),
        Column("rental_index", "nRentalIndex", "int", NUMBER, nullable=False),
        Column("item_index", "nItemIndex", "int", NUMBER, nullable=False),
        Column("durability", "sDurability", "smallint", NUMBER, nullable=False, default="0"),
        Column("serial_number", "nSerialNumber", "bigint", NUMBER, nullable=False),
        Column("rental_money", "nRentalMoney", "int", NUMBER, nullable=False),
        Column("rental_time", "sRentalTime", "smallint", NUMBER, nullable=False),
        Column("during_time", "sDuringTime", "smallint", NUMBER, nullable=False),
        Column("rental_timestamp", "timeRental", "smalldatetime", DATETIME),
        Column("register_time", "timeRegister", "smalldatetime", DATETIME, default="getdate()"),
    )

    user_id: str = ""
    account_id: str = ""
    rental_type: int = 0
    reg_type: int = 0
    rental_index: int = 0
    item_index: int = 0
    durability: int = 0
    serial_number: int = 0
    rental_money: int = 0
    rental_time: int = 0
    during_time: int = 0
    rental_timestamp: datetime | None = None
    register_time: datetime | None = None