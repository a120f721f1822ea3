from __future__ import annotations

import logging
import sqlite3
import threading
import uuid
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Generic, TypeVar

from agro_registry.domain.entities.crop import Crop
from agro_registry.domain.entities.farm import Farm
from agro_registry.domain.entities.harvest import Harvest
from agro_registry.domain.entities.producer import Producer
from agro_registry.domain.repositories.interfaces import DuplicateKeyError
from agro_registry.domain.value_objects.document import Document, DocumentType
from agro_registry.infrastructure.clock import Clock, SystemClock

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS producers (
  id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  document TEXT NOT NULL UNIQUE,
  document_type TEXT NOT NULL CHECK (document_type IN ('CPF', 'CNPJ')),
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS farms (
  id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  city TEXT NOT NULL,
  state TEXT NOT NULL,
  total_area REAL NOT NULL,
  arable_area REAL NOT NULL,
  vegetation_area REAL NOT NULL,
  producer_id TEXT NOT NULL REFERENCES producers (id),
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS harvests (
  id TEXT PRIMARY KEY,
  year INTEGER NOT NULL,
  season TEXT NOT NULL,
  farm_id TEXT NOT NULL REFERENCES farms (id),
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS crops (
  id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  area REAL NOT NULL,
  harvest_id TEXT NOT NULL REFERENCES harvests (id),
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_farms_producer ON farms (producer_id);
CREATE INDEX IF NOT EXISTS idx_harvests_farm ON harvests (farm_id);
CREATE INDEX IF NOT EXISTS idx_crops_harvest ON crops (harvest_id);
"""

T = TypeVar("T", Producer, Farm, Harvest, Crop)


def _parse_ts(value: str) -> datetime:
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts


def _to_column(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.astimezone(UTC).isoformat()
    return value


class _SQLiteRepository(Generic[T]):
    table: str
    columns: tuple[str, ...]
    order_by = "created_at DESC, rowid DESC"

    def __init__(self, store: SQLiteStore) -> None:
        self._store = store

    def _from_row(self, row: sqlite3.Row) -> T:
        raise NotImplementedError

    def _query(self, sql: str, params: Sequence[Any] = ()) -> list[T]:
        with self._store.lock:
            rows = self._store.conn.execute(sql, params).fetchall()
        return [self._from_row(r) for r in rows]

    def _select(self, where: str = "", params: Sequence[Any] = ()) -> list[T]:
        sql = f"SELECT * FROM {self.table}"
        if where:
            sql += f" WHERE {where}"
        return self._query(f"{sql} ORDER BY {self.order_by}", params)

    def _write(self, sql: str, params: Sequence[Any]) -> None:
        with self._store.lock, self._store.conn:
            self._store.conn.execute(sql, params)

    def _delete_children(self, entity_id: str) -> None:
        """Delete rows owned by ``entity_id``; runs inside the delete transaction."""

    def get(self, entity_id: str) -> T | None:
        rows = self._select("id = ?", (entity_id,))
        return rows[0] if rows else None

    def create(self, fields: Mapping[str, Any]) -> T:
        now = _to_column(self._store.clock.now())
        values = {"id": str(uuid.uuid4()), **fields, "created_at": now, "updated_at": now}
        names = ", ".join(values)
        marks = ", ".join("?" for _ in values)
        self._write(
            f"INSERT INTO {self.table} ({names}) VALUES ({marks})",
            [_to_column(v) for v in values.values()],
        )
        return self.get(values["id"])  # type: ignore[return-value]

    def update(self, entity_id: str, changes: Mapping[str, Any]) -> T:
        unknown = set(changes) - set(self.columns)
        if unknown:
            raise ValueError(f"unknown {self.table} columns: {sorted(unknown)}")
        values = {**changes, "updated_at": self._store.clock.now()}
        assignments = ", ".join(f"{name} = ?" for name in values)
        self._write(
            f"UPDATE {self.table} SET {assignments} WHERE id = ?",
            [*(_to_column(v) for v in values.values()), entity_id],
        )
        record = self.get(entity_id)
        if record is None:
            raise KeyError(entity_id)
        return record

    def delete(self, entity_id: str) -> None:
        with self._store.lock, self._store.conn:
            self._delete_children(entity_id)
            self._store.conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))


class SQLiteProducerRepository(_SQLiteRepository[Producer]):
    table = "producers"
    columns = ("name", "document", "document_type")

    def _from_row(self, row: sqlite3.Row) -> Producer:
        return Producer(
            id=row["id"],
            name=row["name"],
            document=Document(row["document"]),
            document_type=DocumentType(row["document_type"]),
            created_at=_parse_ts(row["created_at"]),
            updated_at=_parse_ts(row["updated_at"]),
        )

    def create(self, fields: Mapping[str, Any]) -> Producer:
        try:
            return super().create(fields)
        except sqlite3.IntegrityError as exc:
            if "producers.document" not in str(exc):
                raise
            raise DuplicateKeyError("document", fields["document"]) from exc

    def update(self, entity_id: str, changes: Mapping[str, Any]) -> Producer:
        try:
            return super().update(entity_id, changes)
        except sqlite3.IntegrityError as exc:
            if "producers.document" not in str(exc):
                raise
            raise DuplicateKeyError("document", changes["document"]) from exc

    def find_by_document(self, document: str, exclude_id: str | None = None) -> Producer | None:
        if exclude_id is None:
            rows = self._select("document = ?", (document,))
        else:
            rows = self._select("document = ? AND id != ?", (document, exclude_id))
        return rows[0] if rows else None

    def list(self) -> Sequence[Producer]:
        return self._select()

    def _delete_children(self, entity_id: str) -> None:
        conn = self._store.conn
        conn.execute(
            "DELETE FROM crops WHERE harvest_id IN ("
            " SELECT h.id FROM harvests h JOIN farms f ON h.farm_id = f.id"
            " WHERE f.producer_id = ?)",
            (entity_id,),
        )
        conn.execute(
            "DELETE FROM harvests WHERE farm_id IN (SELECT id FROM farms WHERE producer_id = ?)",
            (entity_id,),
        )
        conn.execute("DELETE FROM farms WHERE producer_id = ?", (entity_id,))


class SQLiteFarmRepository(_SQLiteRepository[Farm]):
    table = "farms"
    columns = ("name", "city", "state", "total_area", "arable_area", "vegetation_area", "producer_id")

    def _from_row(self, row: sqlite3.Row) -> Farm:
        return Farm(
            id=row["id"],
            name=row["name"],
            city=row["city"],
            state=row["state"],
            total_area=row["total_area"],
            arable_area=row["arable_area"],
            vegetation_area=row["vegetation_area"],
            producer_id=row["producer_id"],
            created_at=_parse_ts(row["created_at"]),
            updated_at=_parse_ts(row["updated_at"]),
        )

    def list(self, producer_id: str | None = None) -> Sequence[Farm]:
        if producer_id is None:
            return self._select()
        return self._select("producer_id = ?", (producer_id,))

    def _delete_children(self, entity_id: str) -> None:
        conn = self._store.conn
        conn.execute(
            "DELETE FROM crops WHERE harvest_id IN (SELECT id FROM harvests WHERE farm_id = ?)",
            (entity_id,),
        )
        conn.execute("DELETE FROM harvests WHERE farm_id = ?", (entity_id,))


class SQLiteHarvestRepository(_SQLiteRepository[Harvest]):
    table = "harvests"
    columns = ("year", "season", "farm_id")
    order_by = "year DESC, created_at DESC, rowid DESC"

    def _from_row(self, row: sqlite3.Row) -> Harvest:
        return Harvest(
            id=row["id"],
            year=row["year"],
            season=row["season"],
            farm_id=row["farm_id"],
            created_at=_parse_ts(row["created_at"]),
            updated_at=_parse_ts(row["updated_at"]),
        )

    def list(self, farm_id: str | None = None) -> Sequence[Harvest]:
        if farm_id is None:
            return self._select()
        return self._select("farm_id = ?", (farm_id,))

    def _delete_children(self, entity_id: str) -> None:
        self._store.conn.execute("DELETE FROM crops WHERE harvest_id = ?", (entity_id,))


class SQLiteCropRepository(_SQLiteRepository[Crop]):
    table = "crops"
    columns = ("name", "area", "harvest_id")

    def _from_row(self, row: sqlite3.Row) -> Crop:
        return Crop(
            id=row["id"],
            name=row["name"],
            area=row["area"],
            harvest_id=row["harvest_id"],
            created_at=_parse_ts(row["created_at"]),
            updated_at=_parse_ts(row["updated_at"]),
        )

    def list(self, harvest_id: str | None = None) -> Sequence[Crop]:
        if harvest_id is None:
            return self._select()
        return self._select("harvest_id = ?", (harvest_id,))


class SQLiteDashboardQueries:
    def __init__(self, store: SQLiteStore) -> None:
        self._store = store

    def _one(self, sql: str) -> tuple[Any, ...]:
        with self._store.lock:
            return tuple(self._store.conn.execute(sql).fetchone())

    def _all(self, sql: str) -> list[tuple[Any, ...]]:
        with self._store.lock:
            return [tuple(r) for r in self._store.conn.execute(sql).fetchall()]

    def count_producers(self) -> int:
        return self._one("SELECT COUNT(*) FROM producers")[0]

    def count_farms(self) -> int:
        return self._one("SELECT COUNT(*) FROM farms")[0]

    def count_crops(self) -> int:
        return self._one("SELECT COUNT(*) FROM crops")[0]

    def sum_total_area(self) -> float | None:
        return self._one("SELECT SUM(total_area) FROM farms")[0]

    def farms_by_state(self) -> Sequence[tuple[str, int]]:
        return self._all(
            "SELECT state, COUNT(id) AS n FROM farms GROUP BY state ORDER BY n DESC, state"
        )

    def crop_area_by_name(self) -> Sequence[tuple[str, float | None]]:
        return self._all(
            "SELECT name, SUM(area) AS total FROM crops GROUP BY name ORDER BY total DESC, name"
        )

    def sum_land_use(self) -> tuple[float | None, float | None]:
        arable, vegetation = self._one("SELECT SUM(arable_area), SUM(vegetation_area) FROM farms")
        return arable, vegetation


class SQLiteStore:
    """SQLite-backed store. ``UNIQUE(document)`` backs up the uniqueness guard.

    File path configurable (``:memory:`` works); creates schema on first use.
    """

    def __init__(self, db_path: str = ".agro_registry.sqlite", clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()
        self.lock = threading.RLock()
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(db_path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON;")
        if db_path != ":memory:":
            self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.executescript(SCHEMA)
        self.conn.commit()
        logger.debug("schema ready at %s", db_path)

        self.producers = SQLiteProducerRepository(self)
        self.farms = SQLiteFarmRepository(self)
        self.harvests = SQLiteHarvestRepository(self)
        self.crops = SQLiteCropRepository(self)
        self.dashboard = SQLiteDashboardQueries(self)

    def close(self) -> None:
        self.conn.close()
