"""
store — repozytoria docelowe konwertera.

Publiczne API:
  Repository          protokół (kontrakt zapisu i odczytu domknięcia)
  PostgresRepository  implementacja psycopg2
  MemoryRepository    implementacja w pamięci
"""

from .base     import Repository
from .memory   import MemoryRepository
from .postgres import PostgresRepository

__all__ = [
    "Repository",
    "MemoryRepository",
    "PostgresRepository",
]
