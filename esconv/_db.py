"""Połączenie z bazą docelową PostgreSQL — konfiguracja przez zmienne środowiskowe (.env)."""

from __future__ import annotations

import os
import pathlib

import psycopg2
from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

load_dotenv(ROOT / ".env")


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(
        host     = os.getenv("PGHOST",     "localhost"),
        port     = int(os.getenv("PGPORT", "5432")),
        dbname   = os.getenv("PGDATABASE", "eschol5"),
        user     = os.getenv("PGUSER",     "eschol5"),
        password = os.getenv("PGPASSWORD", "eschol5"),
    )
