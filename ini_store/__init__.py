"""
INI Store - Analyse et sérialisation de fichiers de configuration INI.

Modules disponibles:
- document: Magasin de documents INI (chargement, get/set, rendu)
- errors: Hiérarchie d'exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger, StandardLogger)
- config: Réglages du magasin (StoreSettings) chargés depuis TOML/JSON
"""

__version__ = "1.0.0"

from ini_store.logging import Logger, FileLogger, StandardLogger
from ini_store.config import (
    ConfigLoader,
    FileConfigLoader,
    StoreSettings,
    load_settings
)
from ini_store.errors import (
    IniError,
    IniParseError,
    UnsupportedFormatError,
    IniFileError,
    IniFileNotFoundError,
    MalformedSectionError,
    MalformedLineError,
    InvalidKeyValueError,
    NoCurrentSectionError,
    DuplicateKeyError,
    InvalidArgumentError,
    NotFoundError,
    SectionNotFoundError,
    KeyNotFoundError
)
from ini_store.document import (
    DocumentStore,
    IniDocumentStore,
    IniParser
)

__all__ = [
    "__version__",
    # Logging
    "Logger",
    "FileLogger",
    "StandardLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "StoreSettings",
    "load_settings",
    # Erreurs
    "IniError",
    "IniParseError",
    "UnsupportedFormatError",
    "IniFileError",
    "IniFileNotFoundError",
    "MalformedSectionError",
    "MalformedLineError",
    "InvalidKeyValueError",
    "NoCurrentSectionError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "NotFoundError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    # Document
    "DocumentStore",
    "IniDocumentStore",
    "IniParser",
]
