# komodels

Table models for a game server's SQL Server databases. Each model is a
dataclass that knows its table name, which logical database it lives in, and
its columns with their SQL types, nullability, primary keys and defaults. From
that it produces:

- a `CREATE TABLE` script, with the primary key constraint and one
  `ALTER TABLE ... ADD CONSTRAINT ... DEFAULT` statement per default,
- an `INSERT` statement for one record, or a header line and a value row for
  bulk dumps,
- a safe `SELECT` column list, converting columns that hold raw bytes to
  `VARBINARY`,
- every row of its table, read through a DB-API connection you supply.

## Installation

```
pip install komodels
```

No third-party libraries are required. To run the tests:

```
pip install "komodels[test]"
pytest
```

## Database names

Tables belong to one of three logical databases, `DbType.ACCOUNT`,
`DbType.GAME` and `DbType.LOG`. Their physical names default to `ACCOUNT`,
`GAME` and `LOG` and can be changed at runtime:

```python
from komodels.database import DbType, get_database_name, set_db_name_by_type, set_game_db_name

set_game_db_name("KN_online")
set_db_name_by_type(DbType.LOG, "KN_log")
get_database_name(DbType.GAME)     # "KN_online"
get_database_name("UNKNOWN")       # ""
```

`set_login_db_name` and `set_log_db_name` set the other two names directly;
`set_db_name_by_type` ignores types it does not know.

## Using a model

```python
from datetime import datetime
from komodels.server import Version
from komodels.webmall import WebItemMall

v = Version(version=1001, file_name="patch1001.zip",
            compress_name="patch1001.zip", history_version=1000)
print(v.insert_string())
# INSERT INTO [VERSION] ([sVersion], [strFileName], [strCompressName], [sHistoryVersion]) VALUES
# (1001, N'patch1001.zip', N'patch1001.zip', 1000)

print(v.create_table_string())     # USE [GAME] / GO / CREATE TABLE [VERSION] ...

purchase = WebItemMall(account_id="tester", char_id="hero", server_id=1,
                       item_id=900000000, item_count=1,
                       buy_time=datetime(2024, 1, 2, 3, 4, 5))
purchase.insert_data()
# "(N'tester', N'hero', 1, 900000000, 1, CAST(N'2024-01-02T03:04:05' AS DateTime), NULL, NULL, NULL, NULL)"
```

Every model has `database_name()`, `table_name()`, `insert_header()`,
`insert_data()`, `insert_string()`, `create_table_string()`,
`select_clause()` (a tuple of column expressions) and `all_table_data(conn)`.

Optional columns default to `None` and are written as `NULL`. Text is quoted
as `N'...'` with single quotes doubled; datetimes become
`CAST(N'...' AS DateTime)` with milliseconds when present; columns holding
raw data are written as hexadecimal literals wrapped in `CONVERT(...)`.
Required fields default to zero, an empty string, empty bytes or
`datetime.min`: database-side defaults such as `getdate()` appear only in the
`CREATE TABLE` script, not in the Python defaults.

The literal helpers are available on their own in `komodels.database`:
`optional_string_val`, `optional_hex_string_val`, `optional_dec_val`,
`optional_binary_val`, `optional_byte_array_val` and `datetime_export_fmt`.

## Models

- `komodels.npc`: `NpcMoveItem`, `NpcPos`, `StartPosition`, `ZoneInfo`
- `komodels.rental`: `RentalItem`, `RentalItemList`, `UserRentalItem`
- `komodels.user`: `TbUser`, `UserDataSkillShortcut`, `UserSavedMagic`, `Warehouse`
- `komodels.editor`: `UserEditor`, `UserEditorItem`, `ProgramListLog`
- `komodels.ranking`: `UserKnightsRank`, `UserPersonalRank`
- `komodels.server`: `ServerResource`, `Version`
- `komodels.webmall`: `WebItemMall`, `WebItemMallLog`, `WebpageAddress`

All of them live in the game database. New models are defined by subclassing
`komodels.database.Model` as a dataclass with `_db_type`, `_table` and a
tuple of `Column` entries; subclasses register themselves on definition.

## Dumping tables

`all_table_data(conn)` runs the model's `SELECT` on a DB-API connection and
returns one model instance per row:

```python
rows = Version().all_table_data(conn)
if rows:
    print(rows[0].insert_header() + ",\n".join(r.insert_data() for r in rows))
```

## The catalog

`komodels.catalog` lists every model and finds one by table name:

```python
from komodels.catalog import find_model, model_list

for model in model_list():         # one fresh instance per model, by class name
    print(model.database_name(), model.table_name())

find_model("ZONE_INFO")            # a fresh ZoneInfo instance
find_model("NO_SUCH_TABLE")        # raises KeyError
```

## What it does not do

The package does not open database connections or ship a database driver:
`all_table_data` needs a connection you create yourself. It has no
command-line program; dumps and scripts are produced by calling the models
from your own code.