"""Magasin de documents INI.

Ce module fournit IniDocumentStore, l'implémentation de DocumentStore
qui possède la structure analysée et expose le chargement, la
consultation, la modification et la sérialisation.
"""

from pathlib import Path

from ini_store.config.settings import StoreSettings
from ini_store.document.base import DocumentStore, PathLike, Section, Sections
from ini_store.document.parser import (KEY_VALUE_SEPARATOR,
                                       SECTION_END,
                                       SECTION_START,
                                       IniParser)
from ini_store.errors.exceptions import (IniFileError,
                                         IniFileNotFoundError,
                                         InvalidArgumentError,
                                         KeyNotFoundError,
                                         SectionNotFoundError,
                                         UnsupportedFormatError)
from ini_store.logging.base import Logger
from ini_store.logging.standard_logger import StandardLogger


class IniDocumentStore(DocumentStore):
    """Magasin en mémoire d'un document INI.

    Les sections et les clés conservent leur ordre de déclaration, ce
    qui rend render() reproductible. Un nouveau chargement remplace
    entièrement le contenu ; un chargement en échec laisse le contenu
    précédent intact.

    L'instance n'est pas protégée contre les accès concurrents.

    Attributes:
        logger: Instance de Logger pour tracer les accès fichiers.
        settings: Réglages (extension, commentaires, encodage).

    Example:
        >>> store = IniDocumentStore()
        >>> store.load_from_string("[server]\\nport=8080\\n")
        >>> store.get("server", "port")
        '8080'
        >>> store.set("server", "port", "9090")
        >>> store.render()
        '[server]\\nport=9090\\n'
    """

    def __init__(
        self,
        logger: Logger | None = None,
        settings: StoreSettings | None = None
    ) -> None:
        """Initialise un magasin vide.

        Args:
            logger: Logger pour les opérations fichiers
                (StandardLogger par défaut).
            settings: Réglages du magasin (valeurs par défaut si None).
        """
        self.logger = logger or StandardLogger()
        self.settings = settings or StoreSettings()
        self._parser = IniParser(self.settings.comment_prefixes, self.logger)
        self._sections: Sections = {}

    def __len__(self) -> int:
        return len(self._sections)

    def __str__(self) -> str:
        return self.render()

    # Chargement

    def load_from_file(self, path: PathLike) -> None:
        """Charge un document depuis un fichier INI.

        L'extension est vérifiée avant tout accès au système de fichiers.

        Args:
            path: Chemin du fichier à lire.

        Raises:
            UnsupportedFormatError: Si l'extension n'est pas reconnue.
            IniFileNotFoundError: Si le fichier n'existe pas.
            IniFileError: Si le fichier ne peut pas être lu ou décodé.
            IniParseError: Si le contenu est mal formé.
        """
        path = self._check_extension(path)

        try:
            text = path.read_text(encoding=self.settings.encoding)
        except FileNotFoundError as e:
            raise IniFileNotFoundError(
                f"Fichier non trouvé : {path}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise IniFileError(
                f"Erreur lors de la lecture du fichier {path}: {e}"
            ) from e

        self.load_from_string(text)
        self.logger.log_info(
            f"Fichier {path} chargé : {len(self._sections)} section(s)."
        )

    def load_from_string(self, text: str) -> None:
        """Charge un document depuis un texte INI.

        Args:
            text: Contenu INI.

        Raises:
            IniParseError: Si le contenu est mal formé.
        """
        self._sections = self._parser.parse_string(text)

    # Consultation

    def list_section_names(self) -> list[str]:
        """Retourne les noms de section dans leur ordre de déclaration."""
        return list(self._sections)

    def list_sections(self) -> Sections:
        """Retourne une copie profonde de toutes les sections.

        Modifier le résultat n'affecte pas le magasin.
        """
        return {
            name: dict(section) for name, section in self._sections.items()
        }

    def has_section(self, section: str) -> bool:
        """Indique si la section existe."""
        return section in self._sections

    def has_option(self, section: str, key: str) -> bool:
        """Indique si la clé existe dans la section."""
        return key in self._sections.get(section, {})

    def get_section(self, section: str) -> Section:
        """Retourne une copie d'une section.

        Raises:
            InvalidArgumentError: Si le nom de section est vide.
            SectionNotFoundError: Si la section n'existe pas.
        """
        return dict(self._lookup_section(section))

    def get(self, section: str, key: str) -> str:
        """Retourne la valeur d'une clé.

        Args:
            section: Nom de la section.
            key: Nom de la clé.

        Returns:
            La valeur associée.

        Raises:
            InvalidArgumentError: Si le nom de section est vide.
            SectionNotFoundError: Si la section n'existe pas.
            KeyNotFoundError: Si la clé n'existe pas.
        """
        entries = self._lookup_section(section)
        if key not in entries:
            raise KeyNotFoundError(section, key)
        return entries[key]

    # Modification

    def set(self, section: str, key: str, value: str) -> None:
        """Remplace la valeur d'une clé existante.

        Seul un chargement peut créer des sections ou des clés.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Nouvelle valeur, non vide, sur une seule ligne et sans
                espace en début ou en fin (ils seraient perdus au
                rechargement du rendu).

        Raises:
            InvalidArgumentError: Si le nom de section est vide ou si la
                valeur est vide, contient un saut de ligne ou est
                entourée d'espaces.
            SectionNotFoundError: Si la section n'existe pas.
            KeyNotFoundError: Si la clé n'existe pas.
        """
        entries = self._lookup_section(section)
        if key not in entries:
            raise KeyNotFoundError(section, key)
        if not value.strip():
            raise InvalidArgumentError(
                f"La valeur de '{key}' ne peut pas être vide"
            )
        if "\n" in value or "\r" in value:
            raise InvalidArgumentError(
                f"La valeur de '{key}' doit tenir sur une seule ligne"
            )
        if value != value.strip():
            raise InvalidArgumentError(
                f"La valeur de '{key}' ne peut pas commencer ni finir "
                "par un espace"
            )
        entries[key] = value

    # Sérialisation

    def render(self) -> str:
        """Sérialise le document au format INI.

        Les valeurs sont écrites telles quelles, sans échappement.

        Returns:
            Une strophe par section : en-tête [nom] puis une ligne
            clé=valeur par entrée.
        """
        lines: list[str] = []
        for name, section in self._sections.items():
            lines.append(f"{SECTION_START}{name}{SECTION_END}")
            lines.extend(
                f"{key}{KEY_VALUE_SEPARATOR}{value}"
                for key, value in section.items()
            )
        return "".join(f"{line}\n" for line in lines)

    def save_to_file(self, path: PathLike) -> None:
        """Écrit le document rendu dans un fichier INI.

        Args:
            path: Chemin du fichier de destination.

        Raises:
            UnsupportedFormatError: Si l'extension n'est pas reconnue.
            IniFileError: Si l'écriture échoue.
        """
        path = self._check_extension(path)

        try:
            path.write_text(self.render(), encoding=self.settings.encoding)
        except OSError as e:
            raise IniFileError(
                f"Erreur lors de l'écriture du fichier {path}: {e}"
            ) from e

        self.logger.log_info(f"Fichier {path} écrit avec succès.")

    # Utilitaires internes

    def _check_extension(self, path: PathLike) -> Path:
        """Vérifie l'extension d'un chemin et le convertit en Path.

        Raises:
            UnsupportedFormatError: Si l'extension diffère de celle
                des réglages (comparaison sensible à la casse).
        """
        path = Path(path)
        if path.suffix != self.settings.extension:
            raise UnsupportedFormatError(str(path), self.settings.extension)
        return path

    def _lookup_section(self, section: str) -> Section:
        """Retourne la section interne demandée.

        Raises:
            InvalidArgumentError: Si le nom de section est vide.
            SectionNotFoundError: Si la section n'existe pas.
        """
        if not section:
            raise InvalidArgumentError("Le nom de section est invalide")
        if section not in self._sections:
            raise SectionNotFoundError(section)
        return self._sections[section]
