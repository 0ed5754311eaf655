"""
SQLite Flight Repository - flight records in a single SQLite table.

Reads go through pandas for the bulk edge list (validated against
FlightSchema) and through plain cursors for single-record lookups.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from src.flight_routes.exceptions import RepositoryError
from src.flight_routes.ports.flight_repository import FlightRepository
from src.flight_routes.schemas.flight import (
    FLIGHT_COLUMNS,
    Flight,
    FlightDataFrame,
    FlightSchema,
)

logger = logging.getLogger(__name__)

IN_MEMORY = ":memory:"

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS flights (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        source TEXT NOT NULL,
        destination TEXT NOT NULL,
        price INTEGER NOT NULL
    )
"""


class SQLiteFlightRepository(FlightRepository):
    """
    Flight repository backed by SQLite.

    A single connection serves every caller. It is opened with
    ``check_same_thread=False`` and every access holds a lock, so one
    instance may be used from worker threads as well as the thread that
    created it.

    Attributes:
        _db_path: Database file, or ":memory:".
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(self, db_path: Union[str, Path] = "data/flights.db") -> None:
        """
        Initialize the SQLite repository.

        Args:
            db_path: Path to SQLite database file. Created if missing.
        """
        self._db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection, creating the table once."""
        if self._conn is None:
            if self._db_path != IN_MEMORY:
                Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
            try:
                self._conn = sqlite3.connect(self._db_path, check_same_thread=False)
                self._conn.execute(CREATE_TABLE_SQL)
                self._conn.commit()
            except sqlite3.Error as e:
                self._conn = None
                raise RepositoryError(
                    f"Cannot open flight database {self._db_path}: {e}"
                ) from e
            logger.debug("Opened flight database %s", self._db_path)
        return self._conn

    def get_flights_df(self) -> FlightDataFrame:
        """
        Fetch all flights in insertion order, validated against FlightSchema.

        Returns:
            DataFrame with id, source, destination and price columns.
        """
        query = "SELECT id, source, destination, price FROM flights ORDER BY id"

        with self._lock:
            conn = self._get_connection()
            logger.debug("Executing query: %s", query)
            try:
                df = pd.read_sql(query, conn)
            except (sqlite3.Error, pd.errors.DatabaseError) as e:
                raise RepositoryError(f"Failed to read flights: {e}") from e

        if df.empty:
            logger.warning("No flights stored")
            return pd.DataFrame(columns=FLIGHT_COLUMNS)

        validated = FlightSchema.validate(df)
        logger.info("Loaded %d flights from %s", len(validated), self.name)
        return validated

    def list_flights(self) -> List[Flight]:
        """Return every stored flight in insertion order."""
        rows = self._fetch_all(
            "SELECT id, source, destination, price FROM flights ORDER BY id"
        )
        return [self._row_to_flight(row) for row in rows]

    def find_by_route(self, source: str, destination: str) -> Optional[Flight]:
        """Look up the flight between two airports, if stored."""
        rows = self._fetch_all(
            "SELECT id, source, destination, price FROM flights "
            "WHERE source = ? AND destination = ? ORDER BY id LIMIT 1",
            (source, destination),
        )
        return self._row_to_flight(rows[0]) if rows else None

    def save(self, flight: Flight) -> Flight:
        """Insert a flight and return it with its new id."""
        with self._lock:
            conn = self._get_connection()
            try:
                cursor = conn.execute(
                    "INSERT INTO flights (source, destination, price) VALUES (?, ?, ?)",
                    (flight.source, flight.destination, flight.price),
                )
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise RepositoryError(f"Failed to save flight: {e}") from e

        saved = flight.with_id(cursor.lastrowid)
        logger.debug("Saved flight %s", saved)
        return saved

    def delete_all(self) -> int:
        """Remove every flight and return how many were removed."""
        with self._lock:
            conn = self._get_connection()
            try:
                cursor = conn.execute("DELETE FROM flights")
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise RepositoryError(f"Failed to delete flights: {e}") from e

        logger.info("Deleted %d flights", cursor.rowcount)
        return cursor.rowcount

    def _fetch_all(self, query: str, params: tuple = ()) -> list:
        with self._lock:
            conn = self._get_connection()
            try:
                return conn.execute(query, params).fetchall()
            except sqlite3.Error as e:
                raise RepositoryError(f"Failed to query flights: {e}") from e

    @staticmethod
    def _row_to_flight(row: tuple) -> Flight:
        flight_id, source, destination, price = row
        return Flight(source=source, destination=destination, price=price, id=flight_id)

    @property
    def name(self) -> str:
        """Human-readable repository name."""
        return "SQLite"

    @property
    def is_available(self) -> bool:
        """Check if database is accessible."""
        try:
            with self._lock:
                self._get_connection()
        except RepositoryError:
            return False
        return True

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Database connection closed")
