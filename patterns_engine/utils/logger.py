import logging
import sys

from constants import PATH_LOG


# Configuration du logger
class PatternsLogger:
    _instance = None
    LOG_FILE = PATH_LOG

    @staticmethod
    def get_logger():
        if PatternsLogger._instance is None:
            PatternsLogger()
        return PatternsLogger._instance

    def __init__(self):
        if PatternsLogger._instance is not None:
            raise RuntimeError("This class is a singleton!")

        self.logger = logging.getLogger("PatternsLogger")
        self.logger.setLevel(logging.DEBUG)

        # Format : [HEURE] [NIVEAU] Message
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')

        # 1. Handler Console (Ce qu'on voit dans le terminal)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        # 2. Handler Fichier (Tout l'historique pour le debug)
        file_handler = logging.FileHandler(self.LOG_FILE, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

        PatternsLogger._instance = self.logger


# Fonctions helper pour un accès rapide
def log_info(msg):
    PatternsLogger.get_logger().info(msg)


def log_debug(msg):
    PatternsLogger.get_logger().debug(msg)


def log_error(msg):
    PatternsLogger.get_logger().error(msg)
