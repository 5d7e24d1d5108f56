"""Tests pour le module logging."""

import logging

import pytest

from ini_store.logging import Logger, FileLogger, StandardLogger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Test message")

        content = log_file.read_text()
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Warning message")

        content = log_file.read_text()
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Error message")

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error message" in content

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_config_level_and_format(self, tmp_path):
        """Test du niveau et du format fournis par la configuration."""
        log_file = tmp_path / "test.log"
        config = {"logging": {"level": "WARNING", "format": "%(levelname)s|%(message)s"}}
        logger = FileLogger(str(log_file), config)

        logger.log_info("ignoré")
        logger.log_warning("retenu")

        content = log_file.read_text()
        assert "ignoré" not in content
        assert "WARNING|retenu" in content

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        """Test qu'un niveau inconnu revient à INFO."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), {"logging": {"level": "BAVARD"}})

        assert logger.logger.level == logging.INFO

    def test_no_propagation(self, tmp_path):
        """Test que les messages ne sont pas propagés."""
        logger = FileLogger(str(tmp_path / "test.log"))

        assert logger.logger.propagate is False


class TestStandardLogger:
    """Tests pour StandardLogger."""

    def test_implements_logger_interface(self):
        """Vérifie que StandardLogger implémente l'interface Logger."""
        assert isinstance(StandardLogger(), Logger)

    def test_default_name(self):
        """Vérifie le nom du logger standard par défaut."""
        assert StandardLogger().logger.name == "ini_store"

    @pytest.mark.parametrize(
        "method, level",
        [
            ("log_info", logging.INFO),
            ("log_warning", logging.WARNING),
            ("log_error", logging.ERROR),
        ],
    )
    def test_levels(self, caplog, method, level):
        """Vérifie que chaque méthode utilise le bon niveau."""
        logger = StandardLogger("ini_store.test")

        with caplog.at_level(logging.DEBUG, logger="ini_store.test"):
            getattr(logger, method)("message")

        assert caplog.records[-1].levelno == level
        assert caplog.records[-1].getMessage() == "message"
