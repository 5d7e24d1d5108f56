"""Analyse ligne à ligne du format INI.

Chaque ligne est découpée puis classée (vide, commentaire, en-tête de
section, paire clé=valeur) et validée, le tout en une seule passe. La
première erreur interrompt l'analyse.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ini_store.config.settings import DEFAULT_COMMENT_PREFIXES
from ini_store.document.base import Sections
from ini_store.errors.exceptions import (DuplicateKeyError,
                                         InvalidKeyValueError,
                                         MalformedLineError,
                                         MalformedSectionError,
                                         NoCurrentSectionError)
from ini_store.logging.base import Logger

SECTION_START = "["
SECTION_END = "]"
KEY_VALUE_SEPARATOR = "="


class LineKind(Enum):
    """Nature d'une ligne INI."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    KEY_VALUE = "key_value"


@dataclass(frozen=True)
class ParsedLine:
    """Résultat de la classification d'une ligne.

    Attributes:
        kind: Nature de la ligne.
        number: Numéro de la ligne (commence à 1).
        raw: Contenu de la ligne sans terminaison.
        name: Nom de section (LineKind.SECTION uniquement).
        key: Clé (LineKind.KEY_VALUE uniquement).
        value: Valeur (LineKind.KEY_VALUE uniquement).
    """

    kind: LineKind
    number: int
    raw: str
    name: str = ""
    key: str = ""
    value: str = ""


def split_lines(text: str) -> list[str]:
    """Découpe un texte en lignes sans leurs terminaisons (\\n ou \\r\\n)."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def parse_line(
    raw: str,
    number: int,
    comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES
) -> ParsedLine:
    """Classe et valide une ligne INI isolée.

    Les marqueurs de commentaire et le crochet ouvrant sont reconnus sur
    le premier caractère non blanc de la ligne.

    Args:
        raw: Ligne sans terminaison.
        number: Numéro de la ligne, pour les messages d'erreur.
        comment_prefixes: Caractères marquant un commentaire.

    Returns:
        La ligne classée.

    Raises:
        MalformedSectionError: En-tête vide ou sans crochet fermant.
        MalformedLineError: Ligne sans séparateur '='.
        InvalidKeyValueError: Clé ou valeur vide.
    """
    line = raw.rstrip("\r\n")
    content = line.strip()

    if not content:
        return ParsedLine(LineKind.BLANK, number, line)

    first = content[0]
    if first in comment_prefixes:
        return ParsedLine(LineKind.COMMENT, number, line)

    if first == SECTION_START:
        if not content.endswith(SECTION_END) or len(content) < 2:
            raise MalformedSectionError(
                "en-tête de section sans crochet fermant", number, line
            )
        name = content[1:-1].strip()
        if not name:
            raise MalformedSectionError(
                "le nom de section ne peut pas être vide", number, line
            )
        return ParsedLine(LineKind.SECTION, number, line, name=name)

    key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
    if not separator:
        raise MalformedLineError(
            f"séparateur '{KEY_VALUE_SEPARATOR}' absent", number, line
        )
    key = key.strip()
    value = value.strip()
    if not key or not value:
        raise InvalidKeyValueError(
            "la clé et la valeur ne peuvent pas être vides", number, line
        )
    return ParsedLine(LineKind.KEY_VALUE, number, line, key=key, value=value)


class IniParser:
    """Construit la structure section -> clé -> valeur d'un document.

    Chaque appel à parse() part d'une structure vide : l'analyseur ne
    conserve aucun état entre deux documents.

    Example:
        >>> IniParser().parse(["[A]", "k=v"])
        {'A': {'k': 'v'}}
    """

    def __init__(
        self,
        comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES,
        logger: Logger | None = None
    ) -> None:
        """Initialise l'analyseur.

        Args:
            comment_prefixes: Caractères marquant un commentaire.
            logger: Logger optionnel pour les avertissements
                (redéclaration de section).
        """
        self.comment_prefixes = comment_prefixes
        self.logger = logger

    def parse(self, lines: Iterable[str]) -> Sections:
        """Analyse une séquence de lignes.

        Args:
            lines: Lignes du document, terminaisons tolérées.

        Returns:
            Nouvelle structure {section: {clé: valeur}} dans l'ordre
            de déclaration.

        Raises:
            IniParseError: À la première ligne invalide.
        """
        sections: Sections = {}
        current: str | None = None

        for number, raw in enumerate(lines, start=1):
            parsed = parse_line(raw, number, self.comment_prefixes)

            if parsed.kind is LineKind.SECTION:
                if parsed.name in sections and self.logger is not None:
                    self.logger.log_warning(
                        f"Ligne {number} : section [{parsed.name}] "
                        "redéclarée, son contenu précédent est remplacé."
                    )
                # Une redéclaration repart d'une section vide
                sections[parsed.name] = {}
                current = parsed.name

            elif parsed.kind is LineKind.KEY_VALUE:
                if current is None:
                    raise NoCurrentSectionError(
                        "paire clé=valeur avant toute section",
                        number, parsed.raw
                    )
                section = sections[current]
                if parsed.key in section:
                    raise DuplicateKeyError(
                        f"clé '{parsed.key}' dupliquée dans la section "
                        f"[{current}], valeur existante "
                        f"{section[parsed.key]!r}",
                        number, parsed.raw
                    )
                section[parsed.key] = parsed.value

        return sections

    def parse_string(self, text: str) -> Sections:
        """Analyse un texte INI complet."""
        return self.parse(split_lines(text))
