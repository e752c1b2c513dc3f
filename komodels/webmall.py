"""Models for the power-up store and web page tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from komodels.database import COLLATE, DATETIME, NUMBER, STRING, Column, DbType, Model


def _store_columns(item_count_default: str | None) -> tuple[Column, ...]:
    return (
        Column("account_id", "strAccountID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("char_id", "strCharID", "varchar(21)" + COLLATE, STRING, nullable=False),
        Column("server_id", "ServerNo", "smallint", NUMBER, nullable=False),
        Column("item_id", "ItemID", "int", NUMBER, nullable=False),
        Column("item_count", "ItemCount", "smallint", NUMBER, nullable=False, default=item_count_default),
        Column("buy_time", "BuyTime", "smalldatetime", DATETIME, nullable=False, default="getdate()"),
        Column("img_file_name", "img_file_name", "varchar(50)" + COLLATE, STRING),
        Column("item_name", "strItemName", "varchar(100)" + COLLATE, STRING),
        Column("price", "price", "int", NUMBER),
        Column("pay_type", "pay_type", "int", NUMBER),
    )


@dataclass
class WebItemMall(Model):
    """Power-up store purchases."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "WEB_ITEMMALL"
    _columns: ClassVar[tuple[Column, ...]] = _store_columns("1")

    account_id: str = ""
    char_id: str = ""
    server_id: int = 0
    item_id: int = 0
    item_count: int = 0
    buy_time: datetime = datetime.min
    img_file_name: str | None = None
    item_name: str | None = None
    price: int | None = None
    pay_type: int | None = None


@dataclass
class WebItemMallLog(Model):
    """Power-up store purchase log."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "WEB_ITEMMALL_LOG"
    _columns: ClassVar[tuple[Column, ...]] = _store_columns(None)

    account_id: str = ""
    char_id: str = ""
    server_id: int = 0
    item_id: int = 0
    item_count: int = 0
    buy_time: datetime = datetime.min
    img_file_name: str | None = None
    item_name: str | None = None
    price: int | None = None
    pay_type: int | None = None


@dataclass
class WebpageAddress(Model):
    """Webpage URL list."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "WEBPAGE_ADDRESS"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("index", "nIndex", "int", NUMBER, nullable=False, primary_key=True),
        Column("web_page_address", "strWebPageAddress", "varchar(100)" + COLLATE, STRING),
    )

    index: int = 0
    web_page_address: str | None = None