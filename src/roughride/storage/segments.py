"""SegmentStorage — persists finalized segment records to SQLite.

Schema design notes:
  - ``doc_id`` (start coordinate at 6 dp + export time + position in the
    batch) is the primary key; re-uploading the same batch upserts instead
    of duplicating rows.  A batch that repeats a ``doc_id`` is rejected.
  - ``write_batch`` runs in a single transaction: a batch is either stored
    completely or not at all.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence

from roughride.errors import SinkError
from roughride.segmentation.models import SegmentRecord

_logger = logging.getLogger(__name__)

_DDL = """
PRAGMA journal_mode = WAL;
PRAGMA synchronous  = NORMAL;

CREATE TABLE IF NOT EXISTS road_quality (
    doc_id         TEXT    PRIMARY KEY,
    start_lat      REAL    NOT NULL,
    start_lng      REAL    NOT NULL,
    end_lat        REAL    NOT NULL,
    end_lng        REAL    NOT NULL,
    distance       REAL    NOT NULL,
    roughness      REAL    NOT NULL,
    sample_count   INTEGER NOT NULL,
    recorded_at_ms INTEGER NOT NULL,
    test_mode      INTEGER NOT NULL DEFAULT 0,
    batch_index    INTEGER NOT NULL DEFAULT 0
);

CREATE INDEX IF NOT EXISTS idx_road_quality_recorded
    ON road_quality (recorded_at_ms);
"""

_UPSERT = """
INSERT INTO road_quality (
    doc_id, start_lat, start_lng, end_lat, end_lng,
    distance, roughness, sample_count, recorded_at_ms, test_mode, batch_index
) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
ON CONFLICT (doc_id) DO UPDATE SET
    end_lat        = excluded.end_lat,
    end_lng        = excluded.end_lng,
    distance       = excluded.distance,
    roughness      = excluded.roughness,
    sample_count   = excluded.sample_count,
    test_mode      = excluded.test_mode
"""

_SELECT = """
SELECT start_lat, start_lng, end_lat, end_lng, distance, roughness,
       sample_count, recorded_at_ms, test_mode, batch_index
FROM   road_quality
"""


class SegmentStorage:
    """Stores and retrieves :class:`SegmentRecord` rows from a SQLite database.

    Implements the :class:`~roughride.session.sink.SegmentSink` protocol.

    Parameters
    ----------
    db_path:
        Path to the SQLite file.  Pass ``":memory:"`` for in-process testing.
    """

    def __init__(self, db_path: str = "roughride.db") -> None:
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        for stmt in _DDL.strip().split(";"):
            stmt = stmt.strip()
            if stmt:
                self._conn.execute(stmt)
        self._conn.commit()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def write_batch(self, records: Sequence[SegmentRecord]) -> int:
        """Upsert all *records* atomically and return how many were written.

        Raises:
            SinkError: If the batch repeats a ``doc_id`` or the database rejects
                it; nothing is stored.
        """
        if not records:
            return 0
        rows = [
            (
                r.doc_id,
                r.start_lat,
                r.start_lng,
                r.end_lat,
                r.end_lng,
                r.distance,
                r.roughness,
                r.sample_count,
                r.recorded_at_ms,
                int(r.test_mode),
                r.batch_index,
            )
            for r in records
        ]
        ids = [row[0] for row in rows]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise SinkError(f"Batch repeats doc_id(s): {', '.join(dupes)}")
        try:
            with self._conn:
                self._conn.executemany(_UPSERT, rows)
        except sqlite3.Error as exc:
            raise SinkError(f"Failed to store {len(rows)} segments: {exc}") from exc
        _logger.debug("Stored %d segment records", len(rows))
        return len(rows)

    def list_records(self, test_mode: bool | None = None) -> list[SegmentRecord]:
        """Return stored records, oldest first; optionally filter by *test_mode*."""
        if test_mode is None:
            cursor = self._conn.execute(_SELECT + " ORDER BY recorded_at_ms, batch_index, doc_id")
        else:
            cursor = self._conn.execute(
                _SELECT + " WHERE test_mode = ? ORDER BY recorded_at_ms, batch_index, doc_id",
                (int(test_mode),),
            )
        return [
            SegmentRecord(
                start_lat=float(row["start_lat"]),
                start_lng=float(row["start_lng"]),
                end_lat=float(row["end_lat"]),
                end_lng=float(row["end_lng"]),
                distance=float(row["distance"]),
                roughness=float(row["roughness"]),
                sample_count=int(row["sample_count"]),
                recorded_at_ms=int(row["recorded_at_ms"]),
                test_mode=bool(row["test_mode"]),
                batch_index=int(row["batch_index"]),
            )
            for row in cursor.fetchall()
        ]

    def count(self) -> int:
        return int(self._conn.execute("SELECT COUNT(*) FROM road_quality").fetchone()[0])

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
