"""
Module contenant les exceptions personnalisées pour ini_store.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Chaque erreur du magasin de documents INI hérite de IniError, ce qui
permet à l'appelant de tout intercepter d'un seul bloc.
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass

class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass

class FileConfigurationError(ConfigurationError):
    """ Exception de base pour toutes les fichiers de configurations    """
    pass


class IniError(ApplicationError):
    """Exception de base pour toutes les erreurs du magasin INI."""
    pass

class UnsupportedFormatError(IniError):
    """L'extension du fichier n'est pas l'extension INI reconnue."""

    def __init__(self, path: str, extension: str) -> None:
        self.path = path
        self.extension = extension
        super().__init__(
            f"Format de fichier non supporté : {path} "
            f"(extension attendue : {extension})"
        )

class IniFileError(IniError):
    """Échec de lecture ou d'écriture d'un fichier INI."""
    pass

class IniFileNotFoundError(IniFileError):
    """Le fichier INI n'existe pas."""
    pass


class IniParseError(IniError):
    """Exception de base pour les erreurs de syntaxe INI.

    Attributes:
        line_number: Numéro de la ligne fautive (commence à 1).
        line: Contenu brut de la ligne fautive.
    """

    def __init__(self, message: str, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Ligne {line_number} : {message} ({line!r})")

class MalformedSectionError(IniParseError):
    """En-tête de section vide ou sans crochet fermant."""
    pass

class MalformedLineError(IniParseError):
    """Ligne sans séparateur '='."""
    pass

class InvalidKeyValueError(IniParseError):
    """Clé ou valeur vide après suppression des espaces."""
    pass

class NoCurrentSectionError(IniParseError):
    """Paire clé=valeur avant toute déclaration de section."""
    pass

class DuplicateKeyError(IniParseError):
    """Clé déjà présente dans la section courante."""
    pass


class InvalidArgumentError(IniError, ValueError):
    """Argument invalide passé à une opération du magasin."""
    pass

class NotFoundError(IniError, LookupError):
    """Section ou clé absente du magasin."""
    pass

class SectionNotFoundError(NotFoundError):
    """La section demandée n'existe pas."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Section [{section}] non trouvée")

class KeyNotFoundError(NotFoundError):
    """La clé demandée n'existe pas dans la section."""

    def __init__(self, section: str, key: str) -> None:
        self.section = section
        self.key = key
        super().__init__(f"Clé '{key}' non trouvée dans la section [{section}]")
