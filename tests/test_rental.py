from datetime import datetime

import pytest

from komodels.database import registered_models, set_game_db_name
from komodels.rental import RentalItem, RentalItemList, UserRentalItem


class _FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql):
        self.executed.append(sql)

    def fetchall(self):
        return list(self.rows)

    def close(self):
        self.closed = True


class _FakeConn:
    def __init__(self, rows):
        self.cursor_obj = _FakeCursor(rows)

    def cursor(self):
        return self.cursor_obj


@pytest.fixture
def game_db():
    set_game_db_name("GAME")
    yield
    set_game_db_name("GAME")


RENTAL_COLS = (
    "([nRentalIndex], [nItemIndex], [sDurability], [nSerialNumber], [byRegType], "
    "[byItemType], [byClass], [sRentalTime], [nRentalMoney], [strLenderCharID], "
    "[strLenderAcID], [strBorrowerCharID], [strBorrowerAcID], [timeLender], [timeRegister])"
)

SAMPLE_FIELDS = dict(
    rental_index=1,
    item_index=2,
    serial_number=99,
    item_type=3,
    item_class=4,
    rental_time=5,
    rental_money=6,
    lender_char_id="o'k",
    lender_account_id="acc",
    register_time=datetime(2020, 1, 2, 3, 4, 5),
)


def test_rental_item_table_name():
    assert RentalItem().table_name() == "RENTAL_ITEM"
    assert RentalItemList().table_name() == "RENTAL_ITEM_LIST"
    assert UserRentalItem().table_name() == "USER_RENTAL_ITEM"


def test_rental_item_insert_header():
    assert RentalItem().insert_header() == "INSERT INTO [RENTAL_ITEM] " + RENTAL_COLS + " VALUES\n"
    assert RentalItemList().insert_header() == (
        "INSERT INTO [RENTAL_ITEM_LIST] " + RENTAL_COLS + " VALUES\n"
    )


def test_user_rental_item_insert_header():
    assert UserRentalItem().insert_header() == (
        "INSERT INTO [USER_RENTAL_ITEM] ([strUserID], [strAccountID], [byRentalType], "
        "[byRegType], [nRentalIndex], [nItemIndex], [sDurability], [nSerialNumber], "
        "[nRentalMoney], [sRentalTime], [sDuringTime], [timeRental], [timeRegister]) VALUES\n"
    )


def test_rental_item_insert_data_pinned():
    item = RentalItem(**SAMPLE_FIELDS)
    assert item.insert_data() == (
        "(1, 2, 0, 99, 0, 3, 4, 5, 6, N'o''k', N'acc', NULL, NULL, NULL, "
        "CAST(N'2020-01-02T03:04:05' AS DateTime))"
    )


def test_rental_item_list_data_matches_rental_item():
    list_data = RentalItemList(**SAMPLE_FIELDS).insert_data()
    assert list_data == RentalItem(**SAMPLE_FIELDS).insert_data()
    assert list_data.startswith("(1, 2, 0, 99, ")


@pytest.mark.parametrize("cls", [RentalItem, RentalItemList, UserRentalItem])
def test_insert_string_is_header_plus_data(cls):
    record = cls()
    assert record.insert_string() == record.insert_header() + record.insert_data()


def test_user_rental_item_nulls():
    data = UserRentalItem(user_id="u", account_id="a").insert_data()
    assert data.endswith(", NULL, NULL)")
    assert data.startswith("(N'u', N'a', ")


def test_rental_item_create_table(game_db):
    expected = (
        "USE [GAME]\nGO\n\n"
        "CREATE TABLE [RENTAL_ITEM] (\n\t[nRentalIndex] int NOT NULL,\n\t[nItemIndex] int NOT NULL,\n\t[sDurability] smallint NOT NULL,\n\t[nSerialNumber] bigint NOT NULL,\n\t[byRegType] tinyint NOT NULL,\n\t[byItemType] tinyint NOT NULL,\n\t[byClass] tinyint NOT NULL,\n\t[sRentalTime] smallint NOT NULL,\n\t[nRentalMoney] int NOT NULL,\n\t[strLenderCharID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[strLenderAcID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[strBorrowerCharID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS,\n\t[strBorrowerAcID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS,\n\t[timeLender] smalldatetime,\n\t[timeRegister] smalldatetime NOT NULL\n\tCONSTRAINT [PK_RENTAL_ITEM] PRIMARY KEY CLUSTERED ([nRentalIndex])\n)\nGO\nALTER TABLE [RENTAL_ITEM] ADD CONSTRAINT [DF_RENTAL_ITEM_sDurability] DEFAULT 0 FOR [sDurability]\nGO\nALTER TABLE [RENTAL_ITEM] ADD CONSTRAINT [DF_RENTAL_ITEM_byRegType] DEFAULT 0 FOR [byRegType]\nGO\nALTER TABLE [RENTAL_ITEM] ADD CONSTRAINT [DF_RENTAL_ITEM_timeRegister] DEFAULT getdate() FOR [timeRegister]\nGO\n"
    )
    assert RentalItem().create_table_string() == expected


def test_rental_item_list_create_table(game_db):
    expected = (
        "USE [GAME]\nGO\n\n"
        "CREATE TABLE [RENTAL_ITEM_LIST] (\n\t[nRentalIndex] int NOT NULL,\n\t[nItemIndex] int NOT NULL,\n\t[sDurability] smallint NOT NULL,\n\t[nSerialNumber] bigint NOT NULL,\n\t[byRegType] tinyint NOT NULL,\n\t[byItemType] tinyint NOT NULL,\n\t[byClass] tinyint NOT NULL,\n\t[sRentalTime] smallint NOT NULL,\n\t[nRentalMoney] int NOT NULL,\n\t[strLenderCharID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[strLenderAcID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[strBorrowerCharID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS,\n\t[strBorrowerAcID] varchar(21) COLLATE SQL_Latin1_General_CP1_CI_AS,\n\t[timeLender] smalldatetime,\n\t[timeRegister] smalldatetime NOT NULL\n)\nGO\nALTER TABLE [RENTAL_ITEM_LIST] ADD CONSTRAINT [DF_RENTAL_ITEM_LIST_sDurability] DEFAULT 0 FOR [sDurability]\nGO\nALTER TABLE [RENTAL_ITEM_LIST] ADD CONSTRAINT [DF_RENTAL_ITEM_LIST_byRegType] DEFAULT 0 FOR [byRegType]\nGO\nALTER TABLE [RENTAL_ITEM_LIST] ADD CONSTRAINT [DF_RENTAL_ITEM_LIST_timeRegister] DEFAULT getdate() FOR [timeRegister]\nGO\n"
    )
    assert RentalItemList().create_table_string() == expected


def test_user_rental_item_create_table(game_db):
    expected = (
        "USE [GAME]\nGO\n\n"
        "CREATE TABLE [USER_RENTAL_ITEM] (\n\t[strUserID] varchar(50) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[strAccountID] varchar(50) COLLATE SQL_Latin1_General_CP1_CI_AS NOT NULL,\n\t[byRentalType] tinyint NOT NULL,\n\t[byRegType] tinyint NOT NULL,\n\t[nRentalIndex] int NOT NULL,\n\t[nItemIndex] int NOT NULL,\n\t[sDurability] smallint NOT NULL,\n\t[nSerialNumber] bigint NOT NULL,\n\t[nRentalMoney] int NOT NULL,\n\t[sRentalTime] smallint NOT NULL,\n\t[sDuringTime] smallint NOT NULL,\n\t[timeRental] smalldatetime,\n\t[timeRegister] smalldatetime\n)\nGO\nALTER TABLE [USER_RENTAL_ITEM] ADD CONSTRAINT [DF_USER_RENTAL_ITEM_byRegType] DEFAULT 0 FOR [byRegType]\nGO\nALTER TABLE [USER_RENTAL_ITEM] ADD CONSTRAINT [DF_USER_RENTAL_ITEM_sDurability] DEFAULT 0 FOR [sDurability]\nGO\nALTER TABLE [USER_RENTAL_ITEM] ADD CONSTRAINT [DF_USER_RENTAL_ITEM_timeRegister] DEFAULT getdate() FOR [timeRegister]\nGO\n"
    )
    assert UserRentalItem().create_table_string() == expected


def test_database_name_follows_game_db(game_db):
    set_game_db_name("KN_online")
    assert RentalItem().database_name() == "KN_online"
    assert UserRentalItem().create_table_string().startswith("USE [KN_online]\nGO\n\n")


def test_select_clause_plain_columns():
    assert UserRentalItem().select_clause() == (
        "[strUserID]", "[strAccountID]", "[byRentalType]", "[byRegType]",
        "[nRentalIndex]", "[nItemIndex]", "[sDurability]", "[nSerialNumber]",
        "[nRentalMoney]", "[sRentalTime]", "[sDuringTime]", "[timeRental]", "[timeRegister]",
    )


def test_all_table_data_round_trip():
    original = RentalItem(**SAMPLE_FIELDS)
    original.borrower_char_id = "borrower"
    original.lend_time = datetime(2021, 5, 6, 7, 8)
    row = tuple(getattr(original, c.attr) for c in RentalItem._columns)
    conn = _FakeConn([row])
    records = RentalItem().all_table_data(conn)
    assert records == [original]
    assert conn.cursor_obj.executed == [
        "SELECT " + RENTAL_COLS[1:-1] + " FROM [RENTAL_ITEM]"
    ]
    assert conn.cursor_obj.closed


def test_all_table_data_user_rental_sql_and_conversion():
    row = ("u", "a", 1, 0, 2, 3, 0, 4, 5, 6, 7, None, "2022-03-04T05:06:07")
    conn = _FakeConn([row])
    records = UserRentalItem().all_table_data(conn)
    assert records[0].register_time == datetime(2022, 3, 4, 5, 6, 7)
    assert records[0].rental_timestamp is None
    assert conn.cursor_obj.executed[0] == (
        "SELECT [strUserID], [strAccountID], [byRentalType], [byRegType], [nRentalIndex], "
        "[nItemIndex], [sDurability], [nSerialNumber], [nRentalMoney], [sRentalTime], "
        "[sDuringTime], [timeRental], [timeRegister] FROM [USER_RENTAL_ITEM]"
    )


def test_models_are_registered():
    models = registered_models()
    for cls in (RentalItem, RentalItemList, UserRentalItem):
        assert cls in models


def test_bad_number_raises():
    with pytest.raises(TypeError):
        RentalItem(rental_index="1").insert_data()