"""Modèles Pydantic des réglages du magasin INI."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ini_store.logging.file_logger import DEFAULT_FORMAT

DEFAULT_EXTENSION = ".ini"
DEFAULT_COMMENT_PREFIXES = ("#", ";")


class LoggingSettings(BaseModel):
    """Réglages du FileLogger (niveau et format des messages)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    format: str = DEFAULT_FORMAT

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Vérifie que le niveau est un niveau logging connu."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in allowed:
            raise ValueError(
                f"Niveau de log invalide : {v!r}. "
                f"Valeurs autorisées : {sorted(allowed)}"
            )
        return level


class StoreSettings(BaseModel):
    """Réglages du magasin de documents INI.

    Attributes:
        extension: Extension reconnue pour le chargement et la sauvegarde,
            comparée en respectant la casse.
        comment_prefixes: Caractères qui, en première position d'une
            ligne, en font un commentaire.
        encoding: Encodage des fichiers ; None utilise l'encodage par
            défaut de la plateforme.
        logging: Réglages du logger fichier.

    Example:
        >>> settings = StoreSettings(extension=".conf")
        >>> store = IniDocumentStore(settings=settings)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    extension: str = DEFAULT_EXTENSION
    comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES
    encoding: str | None = None
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Vérifie que l'extension commence par un point."""
        if len(v) < 2 or not v.startswith("."):
            raise ValueError(
                f"Extension invalide : {v!r} (format attendu : '.ini')"
            )
        return v

    @field_validator("comment_prefixes")
    @classmethod
    def validate_comment_prefixes(
        cls, v: tuple[str, ...]
    ) -> tuple[str, ...]:
        """Vérifie que chaque marqueur est un caractère unique."""
        for prefix in v:
            if len(prefix) != 1:
                raise ValueError(
                    f"Marqueur de commentaire invalide : {prefix!r} "
                    "(un seul caractère attendu)"
                )
            if prefix == "[" or prefix.isspace():
                raise ValueError(
                    f"Marqueur de commentaire interdit : {prefix!r}"
                )
        return v
