"""Module de logging."""

from ini_store.logging.base import Logger
from ini_store.logging.file_logger import FileLogger
from ini_store.logging.standard_logger import StandardLogger

__all__ = [
    "Logger",
    "FileLogger",
    "StandardLogger",
]
