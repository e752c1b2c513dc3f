"""Database names, SQL literal helpers and the base class for table models."""

from __future__ import annotations

import contextlib
import enum
import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar

NUMBER = "number"
STRING = "string"
BYTES = "bytes"
DATETIME = "datetime"
_KINDS = frozenset({NUMBER, STRING, BYTES, DATETIME})

COLLATE = " COLLATE SQL_Latin1_General_CP1_CI_AS"


class DbType(str, enum.Enum):
    """The logical databases a table can live in."""

    ACCOUNT = "ACCOUNT"
    GAME = "GAME"
    LOG = "LOG"


_db_names: dict[DbType, str] = {
    DbType.ACCOUNT: "ACCOUNT",
    DbType.GAME: "GAME",
    DbType.LOG: "LOG",
}

_registry: list[type["Model"]] = []


def _as_db_type(db_type: Any) -> DbType | None:
    try:
        return DbType(db_type)
    except ValueError:
        return None


def set_db_name_by_type(db_type: DbType | str, db_name: str) -> None:
    """Set the physical name of a logical database; unknown types are ignored."""
    resolved = _as_db_type(db_type)
    if resolved is not None:
        _db_names[resolved] = db_name


def set_login_db_name(name: str) -> None:
    """Set the name of the account database."""
    _db_names[DbType.ACCOUNT] = name


def set_game_db_name(name: str) -> None:
    """Set the name of the game database."""
    _db_names[DbType.GAME] = name


def set_log_db_name(name: str) -> None:
    """Set the name of the log database."""
    _db_names[DbType.LOG] = name


def get_database_name(db_type: DbType | str) -> str:
    """Return the physical name of a logical database, or "" if unknown."""
    resolved = _as_db_type(db_type)
    return _db_names[resolved] if resolved is not None else ""


def registered_models() -> list[type["Model"]]:
    """Return the model classes registered so far, in definition order."""
    return list(_registry)


def _escape(text: str) -> str:
    return text.replace("'", "''")


def optional_string_val(val: str | None, hex_protect: bool) -> str:
    """Render an optional string as an N'' literal or, protected, as hex."""
    if val is None:
        return "NULL"
    if hex_protect:
        return "0x" + val.encode("utf-8", "surrogateescape").hex()
    return f"N'{_escape(val)}'"


def optional_hex_string_val(val: str | None) -> str:
    """Render an optional string as a hex literal."""
    return optional_string_val(val, True)


def _format_float(val: float) -> str:
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "+Inf" if val > 0 else "-Inf"
    number = Decimal(repr(val)).normalize()
    exponent = number.adjusted()
    if -4 <= exponent < 21:
        return format(number, "f")
    sign, digits, _ = number.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent):02d}"


def optional_dec_val(val: int | float | None) -> str:
    """Render an optional integer or float value."""
    if val is None:
        return "NULL"
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise TypeError(f"expected a number, got {type(val).__name__}")
    if isinstance(val, float):
        return _format_float(val)
    return str(val)


def optional_binary_val(val: bytes | None) -> str:
    """Render optional binary data as a hex literal."""
    if val is None:
        return "NULL"
    return "0x" + bytes(val).hex()


def optional_byte_array_val(val: bytes | None, hex_protect: bool) -> str:
    """Render optional bytes as hex or as an N'' literal of the raw bytes.

    Bytes that are not valid UTF-8 are kept as surrogate escapes.
    """
    if val is None:
        return "NULL"
    if hex_protect:
        return "0x" + bytes(val).hex()
    return f"N'{_escape(bytes(val).decode('utf-8', 'surrogateescape'))}'"


def datetime_export_fmt(t: datetime | None) -> str:
    """Render an optional datetime as a CAST(... AS DateTime) expression."""
    if t is None:
        return "NULL"
    text = t.strftime("%Y-%m-%dT%H:%M:%S")
    millis = t.microsecond // 1000
    if millis:
        text += "." + f"{millis:03d}".rstrip("0")
    return f"CAST(N'{text}' AS DateTime)"


@dataclass(frozen=True)
class Column:
    """One column of a table model and how it is rendered."""

    attr: str
    name: str
    sql_type: str
    kind: str
    nullable: bool = True
    primary_key: bool = False
    default: str | None = None
    hex_protect: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown column kind: {self.kind!r}")
        if self.hex_protect and "(" not in self.base_type:
            raise ValueError(f"hex-protected column {self.name} needs a sized type")

    @property
    def base_type(self) -> str:
        """The SQL type without its collation."""
        return self.sql_type.split(COLLATE, 1)[0]

    @property
    def quoted(self) -> str:
        """The bracket-quoted column name."""
        return f"[{self.name}]"

    def render(self, value: Any) -> str:
        """Return the INSERT expression for a value of this column."""
        if self.kind == NUMBER:
            text = optional_dec_val(value)
        elif self.kind == DATETIME:
            text = datetime_export_fmt(value)
        elif isinstance(value, (bytes, bytearray)):
            text = optional_byte_array_val(value, self.hex_protect)
        elif self.kind == BYTES and isinstance(value, str):
            text = optional_byte_array_val(
                value.encode("utf-8", "surrogateescape"), self.hex_protect
            )
        else:
            text = optional_string_val(value, self.hex_protect)
        if self.hex_protect:
            return f"CONVERT({self.base_type}, {text})"
        return text

    def ddl(self) -> str:
        """Return the column definition used in CREATE TABLE."""
        text = f"{self.quoted} {self.sql_type}"
        return text if self.nullable else text + " NOT NULL"

    def select_expr(self) -> str:
        """Return the expression that selects this column safely."""
        if not self.hex_protect:
            return self.quoted
        base = self.base_type
        size = base[base.index("(") + 1 : base.index(")")]
        return f"CONVERT(VARBINARY({size}), {self.quoted}) as {self.quoted}"

    def _from_db(self, value: Any) -> Any:
        if value is None:
            return None
        if self.kind == STRING and isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).decode("utf-8", "surrogateescape")
        if self.kind == BYTES and isinstance(value, str):
            return value.encode("utf-8", "surrogateescape")
        if self.kind == BYTES and isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        if self.kind == DATETIME and isinstance(value, str):
            return datetime.fromisoformat(value)
        return value


class Model:
    """Base class of table models; subclasses are dataclasses."""

    _db_type: ClassVar[DbType]
    _table: ClassVar[str]
    _columns: ClassVar[tuple[Column, ...]]

    def __init_subclass__(cls, register: bool = True, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if register and "_table" in cls.__dict__:
            _registry.append(cls)

    def database_name(self) -> str:
        """Return the name of the database the table lives in."""
        return get_database_name(self._db_type)

    def table_name(self) -> str:
        """Return the table name."""
        return self._table

    def insert_header(self) -> str:
        """Return the INSERT INTO ... VALUES line for the table."""
        names = ", ".join(c.quoted for c in self._columns)
        return f"INSERT INTO [{self._table}] ({names}) VALUES\n"

    def insert_data(self) -> str:
        """Return the values tuple of this record."""
        values = ", ".join(c.render(getattr(self, c.attr)) for c in self._columns)
        return f"({values})"

    def insert_string(self) -> str:
        """Return the full INSERT statement for this record."""
        return self.insert_header() + self.insert_data()

    def create_table_string(self) -> str:
        """Return the CREATE TABLE script for the table."""
        table = self._table
        body = ",\n\t".join(c.ddl() for c in self._columns)
        keys = [c.quoted for c in self._columns if c.primary_key]
        if keys:
            body += (
                f"\n\tCONSTRAINT [PK_{table}] PRIMARY KEY CLUSTERED ({', '.join(keys)})"
            )
        query = f"CREATE TABLE [{table}] (\n\t{body}\n)\nGO\n"
        query += "".join(
            f"ALTER TABLE [{table}] ADD CONSTRAINT [DF_{table}_{c.name}] "
            f"DEFAULT {c.default} FOR {c.quoted}\nGO\n"
            for c in self._columns
            if c.default is not None
        )
        return f"USE [{self.database_name()}]\nGO\n\n{query}"

    def select_clause(self) -> tuple[str, ...]:
        """Return the select expressions for every column."""
        return tuple(c.select_expr() for c in self._columns)

    def all_table_data(self, conn: Any) -> list["Model"]:
        """Read every row of the table through a DB-API connection."""
        sql = f"SELECT {', '.join(self.select_clause())} FROM [{self._table}]"
        with contextlib.closing(conn.cursor()) as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()
        cls = type(self)
        return [
            cls(**{c.attr: c._from_db(v) for c, v in zip(self._columns, row)})
            for row in rows
        ]