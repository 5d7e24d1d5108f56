"""Module de gestion des errors."""

from ini_store.errors.base import ErrorHandler, ErrorHandlerChain
from ini_store.errors.exceptions import (ApplicationError,
                                         ConfigurationError,
                                         FileConfigurationError,
                                         IniError,
                                         UnsupportedFormatError,
                                         IniFileError,
                                         IniFileNotFoundError,
                                         IniParseError,
                                         MalformedSectionError,
                                         MalformedLineError,
                                         InvalidKeyValueError,
                                         NoCurrentSectionError,
                                         DuplicateKeyError,
                                         InvalidArgumentError,
                                         NotFoundError,
                                         SectionNotFoundError,
                                         KeyNotFoundError)
from ini_store.errors.console_handler import ConsoleErrorHandler
from ini_store.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniError",
    "UnsupportedFormatError",
    "IniFileError",
    "IniFileNotFoundError",
    "IniParseError",
    "MalformedSectionError",
    "MalformedLineError",
    "InvalidKeyValueError",
    "NoCurrentSectionError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "NotFoundError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
