"""Tests unitaires pour l'analyseur de lignes INI."""

from unittest.mock import MagicMock

import pytest

from ini_store.document import IniParser, LineKind, parse_line, split_lines
from ini_store.errors import (DuplicateKeyError,
                              IniParseError,
                              InvalidKeyValueError,
                              MalformedLineError,
                              MalformedSectionError,
                              NoCurrentSectionError)


VALID_INI = """[Simple Values]
you can also use=to delimit keys from values
key=value
paces in keys=allowed

[You can use comments]
# like this
; or this
# By default only in an empty line.
"""


class TestSplitLines:
    """Tests pour split_lines."""

    def test_strips_line_terminators(self):
        """Teste la suppression de \\n et \\r\\n."""
        assert split_lines("[A]\r\nk=v\n") == ["[A]", "k=v"]

    def test_keeps_inner_blank_lines(self):
        """Teste que les lignes vides intermédiaires sont conservées."""
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self):
        """Teste un texte vide."""
        assert split_lines("") == []


class TestParseLine:
    """Tests pour parse_line."""

    def test_blank_line(self):
        """Teste une ligne vide."""
        assert parse_line("", 1).kind is LineKind.BLANK

    def test_whitespace_only_line_is_blank(self):
        """Teste qu'une ligne d'espaces est vide."""
        assert parse_line("   \t", 1).kind is LineKind.BLANK

    @pytest.mark.parametrize("line", ["# commentaire", "; commentaire", "#a=b"])
    def test_comment_lines(self, line):
        """Teste les deux marqueurs de commentaire."""
        assert parse_line(line, 1).kind is LineKind.COMMENT

    def test_custom_comment_prefix(self):
        """Teste un marqueur de commentaire personnalisé."""
        parsed = parse_line("!note", 1, comment_prefixes=("!",))
        assert parsed.kind is LineKind.COMMENT

    def test_section_header_is_trimmed(self):
        """Teste que le nom de section est débarrassé des espaces."""
        parsed = parse_line("[  my section  ]", 4)
        assert parsed.kind is LineKind.SECTION
        assert parsed.name == "my section"
        assert parsed.number == 4

    def test_section_header_trailing_whitespace(self):
        """Teste la tolérance des espaces après le crochet fermant."""
        assert parse_line("[A]   ", 1).name == "A"

    @pytest.mark.parametrize("line", ["[  ]", "[]"])
    def test_empty_section_name_raises(self, line):
        """Teste qu'un nom de section vide lève une exception."""
        with pytest.raises(MalformedSectionError, match="vide"):
            parse_line(line, 1)

    @pytest.mark.parametrize("line", ["[A", "[", "[A] extra"])
    def test_unterminated_section_raises(self, line):
        """Teste qu'un en-tête sans crochet fermant lève une exception."""
        with pytest.raises(MalformedSectionError, match="crochet fermant"):
            parse_line(line, 1)

    def test_key_value_split_on_first_separator(self):
        """Teste le découpage sur le premier '='."""
        parsed = parse_line("url = http://h/?a=b ", 2)
        assert parsed.kind is LineKind.KEY_VALUE
        assert parsed.key == "url"
        assert parsed.value == "http://h/?a=b"

    def test_indented_key_is_trimmed(self):
        """Teste qu'une clé indentée est acceptée."""
        parsed = parse_line("  key= val1", 1)
        assert (parsed.key, parsed.value) == ("key", "val1")

    def test_missing_separator_raises(self):
        """Teste qu'une ligne sans '=' lève une exception."""
        with pytest.raises(MalformedLineError) as exc_info:
            parse_line("juste du texte", 7)
        assert exc_info.value.line_number == 7
        assert exc_info.value.line == "juste du texte"

    @pytest.mark.parametrize("line", [" =value", "key=  ", "="])
    def test_empty_key_or_value_raises(self, line):
        """Teste qu'une clé ou valeur vide lève une exception."""
        with pytest.raises(InvalidKeyValueError):
            parse_line(line, 1)

    @pytest.mark.parametrize("line", ["  #k=v", " ;k=v", "\t# indenté"])
    def test_indented_comment(self, line):
        """Teste que les commentaires indentés sont reconnus."""
        assert parse_line(line, 1).kind is LineKind.COMMENT

    def test_indented_section_header(self):
        """Teste qu'un en-tête indenté est reconnu."""
        parsed = parse_line("  [A]  ", 1)
        assert parsed.kind is LineKind.SECTION
        assert parsed.name == "A"

    def test_indented_unterminated_header_raises(self):
        """Teste qu'un crochet ouvrant indenté reste un en-tête."""
        with pytest.raises(MalformedSectionError):
            parse_line(" [k=v", 1)


class TestIniParser:
    """Tests pour IniParser."""

    def setup_method(self):
        """Initialise l'analyseur avant chaque test."""
        self.parser = IniParser()

    def test_parse_valid_document(self):
        """Teste l'analyse d'un document complet."""
        result = self.parser.parse_string(VALID_INI)
        assert result == {
            "Simple Values": {
                "you can also use": "to delimit keys from values",
                "key": "value",
                "paces in keys": "allowed",
            },
            "You can use comments": {},
        }

    def test_parse_accepts_line_terminators(self):
        """Teste que parse() tolère les terminaisons de ligne."""
        assert self.parser.parse(["[A]\n", "k=v\r\n"]) == {"A": {"k": "v"}}

    def test_preserves_declaration_order(self):
        """Teste la conservation de l'ordre de déclaration."""
        result = self.parser.parse_string("[b]\nz=1\na=2\n[a]\n")
        assert list(result) == ["b", "a"]
        assert list(result["b"]) == ["z", "a"]

    def test_key_before_section_raises(self):
        """Teste qu'une paire avant toute section lève une exception."""
        with pytest.raises(NoCurrentSectionError) as exc_info:
            self.parser.parse_string("# en-tête\nk=v\n")
        assert exc_info.value.line_number == 2

    def test_duplicate_key_raises(self):
        """Teste qu'une clé dupliquée lève une exception."""
        with pytest.raises(DuplicateKeyError, match="'key' dupliquée"):
            self.parser.parse_string("[section]\n key= val1\n key=val2\n")

    def test_same_key_in_distinct_sections(self):
        """Teste qu'une même clé est permise dans deux sections."""
        result = self.parser.parse_string("[A]\nk=1\n[B]\nk=2\n")
        assert result == {"A": {"k": "1"}, "B": {"k": "2"}}

    def test_redeclared_section_is_reset(self):
        """Teste qu'une section redéclarée repart vide."""
        result = self.parser.parse_string("[A]\nk=v\n[B]\n[A]\nx=y\n")
        assert result == {"A": {"x": "y"}, "B": {}}

    def test_redeclared_section_logs_warning(self):
        """Teste l'avertissement émis lors d'une redéclaration."""
        logger = MagicMock()
        parser = IniParser(logger=logger)
        parser.parse_string("[A]\n[A]\n")
        logger.log_warning.assert_called_once()
        assert "[A]" in logger.log_warning.call_args[0][0]

    def test_stops_at_first_error(self):
        """Teste que l'analyse s'arrête à la première erreur."""
        with pytest.raises(IniParseError) as exc_info:
            self.parser.parse_string("[A]\nbad\n[  ]\n")
        assert isinstance(exc_info.value, MalformedLineError)
        assert exc_info.value.line_number == 2

    def test_parse_returns_fresh_structure(self):
        """Teste l'absence d'état entre deux analyses."""
        first = self.parser.parse_string("[A]\nk=v\n")
        second = self.parser.parse_string("[B]\n")
        assert first == {"A": {"k": "v"}}
        assert second == {"B": {}}

    def test_comments_and_blanks_are_transparent(self):
        """Teste que commentaires et lignes vides sont sans effet."""
        plain = self.parser.parse_string("[A]\nk=v\n[B]\nx=y\n")
        noisy = self.parser.parse_string(
            "\n# début\n[A]\n; note\n\nk=v\n#k=autre\n[B]\n\nx=y\n;fin\n"
        )
        assert noisy == plain
