"""Module document pour le chargement et la sérialisation de fichiers INI.

Ce module fournit un magasin en mémoire pour des documents au format INI
(sections [nom] contenant des paires clé=valeur) avec :
- Analyse ligne à ligne en une seule passe, arrêtée à la première erreur
- Validation stricte (sections, clés et valeurs non vides, clés uniques)
- Consultation, modification des clés existantes et rendu texte

Classes principales:
    - DocumentStore: Interface abstraite du magasin
    - IniDocumentStore: Implémentation en mémoire
    - IniParser: Analyseur de lignes INI

Example:
    >>> from ini_store.document import IniDocumentStore
    >>>
    >>> store = IniDocumentStore()
    >>> store.load_from_file("/etc/app/settings.ini")
    >>> store.set("main", "retries", "5")
    >>> store.save_to_file("/etc/app/settings.ini")
"""

from ini_store.document.base import DocumentStore, Section, Sections
from ini_store.document.parser import (
    IniParser,
    LineKind,
    ParsedLine,
    parse_line,
    split_lines,
)
from ini_store.document.store import IniDocumentStore

__all__ = [
    # Interfaces abstraites
    "DocumentStore",
    "Section",
    "Sections",
    # Implémentations
    "IniDocumentStore",
    "IniParser",
    # Fonctions utilitaires
    "LineKind",
    "ParsedLine",
    "parse_line",
    "split_lines",
]
