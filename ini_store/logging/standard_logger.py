"""Logger délégant au module logging de la bibliothèque standard."""

import logging

from ini_store.logging.base import Logger


class StandardLogger(Logger):
    """
    Logger sans fichier, basé sur logging.getLogger(name).

    Logger par défaut du magasin INI : la configuration des handlers
    (niveau, destination) reste à la charge de l'application hôte.
    """

    def __init__(self, name: str = "ini_store") -> None:
        """
        Initialise le logger.

        Args:
            name: Nom du logger standard à utiliser
        """
        self.logger = logging.getLogger(name)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)
