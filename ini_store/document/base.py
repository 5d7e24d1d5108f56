"""Interfaces abstraites pour le magasin de documents INI.

Ce module définit le contrat (ABC) DocumentStore : chargement depuis un
texte ou un fichier, interrogation, modification et sérialisation d'un
document composé de sections [nom] contenant des paires clé=valeur.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

Section = dict[str, str]
"""Paires clé=valeur d'une section."""

Sections = dict[str, Section]
"""Document complet : nom de section -> Section."""

PathLike = Union[str, Path]


class DocumentStore(ABC):
    """Interface pour un magasin de documents INI.

    Un document est créé vide, rempli par un chargement, interrogé ou
    modifié librement, puis sérialisé à la demande. Toute erreur est
    levée vers l'appelant sous forme d'IniError.
    """

    @abstractmethod
    def load_from_file(self, path: PathLike) -> None:
        """Charge un document depuis un fichier INI.

        Args:
            path: Chemin du fichier à lire.

        Raises:
            UnsupportedFormatError: Si l'extension n'est pas reconnue.
            IniFileNotFoundError: Si le fichier n'existe pas.
            IniFileError: Si le fichier ne peut pas être lu.
            IniParseError: Si le contenu est mal formé.
        """
        pass

    @abstractmethod
    def load_from_string(self, text: str) -> None:
        """Charge un document depuis un texte INI.

        Args:
            text: Contenu INI, une entrée par ligne.

        Raises:
            IniParseError: Si le contenu est mal formé.
        """
        pass

    @abstractmethod
    def list_section_names(self) -> list[str]:
        """Retourne les noms des sections du document."""
        pass

    @abstractmethod
    def list_sections(self) -> Sections:
        """Retourne une copie profonde de toutes les sections."""
        pass

    @abstractmethod
    def get(self, section: str, key: str) -> str:
        """Retourne la valeur d'une clé.

        Raises:
            InvalidArgumentError: Si le nom de section est vide.
            NotFoundError: Si la section ou la clé n'existe pas.
        """
        pass

    @abstractmethod
    def set(self, section: str, key: str, value: str) -> None:
        """Remplace la valeur d'une clé existante.

        Raises:
            InvalidArgumentError: Si le nom de section est vide.
            NotFoundError: Si la section ou la clé n'existe pas.
        """
        pass

    @abstractmethod
    def render(self) -> str:
        """Sérialise le document au format INI."""
        pass

    @abstractmethod
    def save_to_file(self, path: PathLike) -> None:
        """Écrit le document rendu dans un fichier INI.

        Raises:
            UnsupportedFormatError: Si l'extension n'est pas reconnue.
            IniFileError: Si l'écriture échoue.
        """
        pass
