"""Models for NPC placement, start positions and zone tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from komodels.database import BYTES, COLLATE, NUMBER, STRING, Column, DbType, Model


@dataclass
class NpcMoveItem(Model):
    """NPC move item."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "K_NPC_MOVE_ITEM"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("castle_index", "sCastleIndex", "smallint", NUMBER, nullable=False, primary_key=True),
        Column("change_item", "byChangeItem", "int", NUMBER),
        Column("change_id", "sChangeSid", "int", NUMBER),
        Column("move_item", "byMoveItem", "int", NUMBER),
        Column("move_min_x", "sMoveMinX", "smallint", NUMBER),
        Column("move_min_y", "sMoveMinY", "smallint", NUMBER),
        Column("move_max_x", "sMoveMaxX", "smallint", NUMBER),
        Column("move_max_y", "sMoveMaxY", "smallint", NUMBER),
    )

    castle_index: int = 0
    change_item: int | None = None
    change_id: int | None = None
    move_item: int | None = None
    move_min_x: int | None = None
    move_min_y: int | None = None
    move_max_x: int | None = None
    move_max_y: int | None = None


@dataclass
class NpcPos(Model):
    """NPC spawn positions."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "K_NPCPOS"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("zone_id", "ZoneID", "smallint", NUMBER),
        Column("npc_id", "NpcID", "int", NUMBER),
        Column("act_type", "ActType", "tinyint", NUMBER),
        Column("regen_type", "RegenType", "tinyint", NUMBER),
        Column("dungeon_family", "DungeonFamily", "tinyint", NUMBER),
        Column("special_type", "SpecialType", "tinyint", NUMBER),
        Column("trap_number", "TrapNumber", "tinyint", NUMBER),
        Column("left_x", "LeftX", "int", NUMBER),
        Column("top_z", "TopZ", "int", NUMBER),
        Column("right_x", "RightX", "int", NUMBER),
        Column("bottom_z", "BottomZ", "int", NUMBER),
        Column("limit_min_z", "LimitMinZ", "int", NUMBER),
        Column("limit_min_x", "LimitMinX", "int", NUMBER),
        Column("limit_max_x", "LimitMaxX", "int", NUMBER),
        Column("limit_max_z", "LimitMaxZ", "int", NUMBER),
        Column("num_npc", "NumNPC", "tinyint", NUMBER),
        Column("respawn_time", "RegTime", "smallint", NUMBER),
        Column("direction", "byDirection", "int", NUMBER),
        Column("dot_count", "DotCnt", "tinyint", NUMBER),
        Column("path", "path", "text" + COLLATE, BYTES),
    )

    zone_id: int | None = None
    npc_id: int | None = None
    act_type: int | None = None
    regen_type: int | None = None
    dungeon_family: int | None = None
    special_type: int | None = None
    trap_number: int | None = None
    left_x: int | None = None
    top_z: int | None = None
    right_x: int | None = None
    bottom_z: int | None = None
    limit_min_z: int | None = None
    limit_min_x: int | None = None
    limit_max_x: int | None = None
    limit_max_z: int | None = None
    num_npc: int | None = None
    respawn_time: int | None = None
    direction: int | None = None
    dot_count: int | None = None
    path: bytes | None = None


@dataclass
class StartPosition(Model):
    """Start position of each nation in a zone."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "START_POSITION"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("zone_id", "ZoneID", "smallint", NUMBER, nullable=False, primary_key=True),
        Column("karus_x", "sKarusX", "smallint", NUMBER, nullable=False),
        Column("karus_z", "sKarusZ", "smallint", NUMBER, nullable=False),
        Column("elmo_x", "sElmoradX", "smallint", NUMBER, nullable=False),
        Column("elmo_z", "sElmoradZ", "smallint", NUMBER, nullable=False),
        Column("range_x", "bRangeX", "tinyint", NUMBER, nullable=False),
        Column("range_z", "bRangeZ", "tinyint", NUMBER, nullable=False),
        Column("karus_gate_x", "sKarusGateX", "smallint", NUMBER, nullable=False),
        Column("karus_gate_z", "sKarusGateZ", "smallint", NUMBER, nullable=False),
        Column("elmo_gate_x", "sElmoGateX", "smallint", NUMBER, nullable=False),
        Column("elmo_gate_z", "sElmoGateZ", "smallint", NUMBER, nullable=False),
    )

    zone_id: int = 0
    karus_x: int = 0
    karus_z: int = 0
    elmo_x: int = 0
    elmo_z: int = 0
    range_x: int = 0
    range_z: int = 0
    karus_gate_x: int = 0
    karus_gate_z: int = 0
    elmo_gate_x: int = 0
    elmo_gate_z: int = 0


@dataclass
class ZoneInfo(Model):
    """Zone (map) information."""

    _db_type: ClassVar[DbType] = DbType.GAME
    _table: ClassVar[str] = "ZONE_INFO"
    _columns: ClassVar[tuple[Column, ...]] = (
        Column("server_id", "ServerNo", "tinyint", NUMBER, nullable=False, primary_key=True),
        Column("zone_id", "ZoneNo", "smallint", NUMBER, nullable=False, primary_key=True),
        Column("name", "strZoneName", "varchar(50)" + COLLATE, STRING, nullable=False),
        Column("init_x", "InitX", "int", NUMBER, nullable=False),
        Column("init_z", "InitZ", "int", NUMBER, nullable=False),
        Column("init_y", "InitY", "int", NUMBER, nullable=False),
        Column("type", "Type", "tinyint", NUMBER, nullable=False),
        Column("room_event", "RoomEvent", "tinyint", NUMBER, nullable=False),
        Column("bz", "bz", "varchar(50)" + COLLATE, STRING),
    )

    server_id: int = 0
    zone_id: int = 0
    name: str = ""
    init_x: int = 0
    init_z: int = 0
    init_y: int = 0
    type: int = 0
    room_event: int = 0
    bz: str | None = None