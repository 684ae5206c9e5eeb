from constants import PATH_SETTINGS
from patterns_engine.core.config import ConfigurationService
from patterns_gui.app import PatternsApp

if __name__ == "__main__":
    # 1. Paramètres à côté de l'exécutable / du script
    ConfigurationService.FILE_PATH = PATH_SETTINGS
    config = ConfigurationService()

    # 2. Lancement
    app = PatternsApp(config=config)
    app.run()
