import os
import sys

# --- CHEMIN DE BASE ---
# Détection automatique de l'environnement (Dev vs Exe)
if getattr(sys, 'frozen', False):
    # Mode EXE : settings.json est créé à côté de l'exécutable
    BASE_DIR = os.path.dirname(sys.executable)
else:
    # Mode DEV : dossier du script python actuel
    BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# --- FENÊTRE ---
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
WINDOW_TITLE = "Design Patterns Playground"
FPS_CAP = 60

# Taille d'une case de la grille (pixels)
CELL_SIZE = 20
# Nombre de lignes de statut affichées
STATUS_LINES = 8

# --- COULEURS ---
COLOR_BG = (20, 25, 40)
COLOR_GRID = (50, 60, 80)
COLOR_PLAYER = (152, 195, 121)
COLOR_BLOCKED = (224, 108, 117)
COLOR_TEXT = (240, 240, 240)
COLOR_TEXT_DIM = (171, 178, 191)

# --- CHEMINS ---
# Fichier de sauvegarde des paramètres (Externe -> BASE_DIR)
PATH_SETTINGS = os.path.join(BASE_DIR, "settings.json")

# Journal de debug (Externe -> BASE_DIR, jamais le dossier courant)
PATH_LOG = os.path.join(BASE_DIR, "patterns_debug.log")
