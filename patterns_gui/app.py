from collections import deque
from typing import Optional

import pygame

from constants import (
    WINDOW_TITLE, FPS_CAP, CELL_SIZE, STATUS_LINES,
    COLOR_BG, COLOR_GRID, COLOR_PLAYER, COLOR_BLOCKED, COLOR_TEXT, COLOR_TEXT_DIM
)
from patterns_engine.commands import InputHandler
from patterns_engine.concurrency import Counter
from patterns_engine.core.config import ConfigurationService
from patterns_engine.core.consts import Button
from patterns_engine.memento import DefaultScorePlayer, SaveSlots
from patterns_engine.players import DefaultPlayer, MoveReport, log_reporter
from patterns_engine.utils.logger import log_info, log_error
from patterns_gui.keymap import KeyMap, ACTION_PLAY, ACTION_SAVE, ACTION_RESTORE, ACTION_COUNT, ACTION_QUIT


class PatternsApp:
    """
    Classe principale de l'application (Contrôleur racine).
    Relie la manette (KeyMap) aux patterns : Command pour les déplacements,
    Memento pour le score, Active Object pour le compteur d'appuis.
    """

    def __init__(self, config=None, keymap: Optional[KeyMap] = None, slot_name: str = "quicksave"):
        self.config = config or ConfigurationService()
        self.keymap = keymap or KeyMap()
        self.slot_name = slot_name

        # Journal des dernières lignes de statut (affiché à l'écran)
        self.status = deque(maxlen=STATUS_LINES)
        self.last_report: Optional[MoveReport] = None

        # 1. Command : invoker + cible
        self.input_handler = InputHandler.from_names(self.config.button_bindings)
        self.player = DefaultPlayer(minimum=self.config.grid_min,
                                    maximum=self.config.grid_max,
                                    reporter=self._on_move)

        # 2. Memento : joueur + caretaker
        self.score_player = DefaultScorePlayer(limit=self.config.score_limit,
                                               max_increment=self.config.max_increment,
                                               reporter=self._on_status)
        self.save_slots = SaveSlots()

        # 3. Active Object : nombre total d'intentions traitées
        self.counter = Counter("presses")

        self.running = True
        self.screen = None
        self.clock = None
        self.font = None

    # =========================================================================
    #  REPORTERS
    # =========================================================================

    def _on_move(self, report: MoveReport):
        self.last_report = report
        log_reporter(report)
        self.status.append(str(report))

    def _on_status(self, message: str):
        log_info(message)
        self.status.append(message)

    # =========================================================================
    #  ÉVÉNEMENTS (indépendant de l'affichage)
    # =========================================================================

    def handle_event(self, event) -> Optional[str]:
        """
        Traite un événement pygame.
        Retourne l'intention traitée (valeur du bouton ou action), ou None.
        """
        intent = self.keymap.translate(event)
        if intent is None:
            return None

        if isinstance(intent, Button):
            self.input_handler.handle(intent, self.player)
        elif intent == ACTION_PLAY:
            self.score_player.play()
        elif intent == ACTION_SAVE:
            self.save_slots.store(self.slot_name, self.score_player.save_score())
        elif intent == ACTION_RESTORE:
            self._restore()
        elif intent == ACTION_COUNT:
            self._on_status(f"Inputs so far: {self.counter.value() + 1}.")
        elif intent == ACTION_QUIT:
            self.running = False
            return ACTION_QUIT
        else:
            log_error(f"❌ Unknown intent {intent!r}")
            return None

        self.counter.increment()
        return intent.value if isinstance(intent, Button) else intent

    def _restore(self):
        if self.slot_name not in self.save_slots:
            self._on_status(f"No saved score in slot '{self.slot_name}'.")
            return
        self.score_player.restore_score(self.save_slots.load(self.slot_name))

    # =========================================================================
    #  BOUCLE PRINCIPALE
    # =========================================================================

    def run(self):
        """Boucle principale (Game Loop)."""
        pygame.display.init()
        pygame.font.init()
        pygame.joystick.init()
        joysticks = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]
        log_info(f"{len(joysticks)} joystick(s) detected.")

        flags = pygame.FULLSCREEN if self.config.fullscreen else 0
        self.screen = pygame.display.set_mode(tuple(self.config.resolution), flags)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)

        try:
            while self.running:
                self.clock.tick(FPS_CAP)
                for event in pygame.event.get():
                    self.handle_event(event)
                self.draw(self.screen)
                pygame.display.flip()
        finally:
            self._shutdown()

    def draw(self, surface):
        surface.fill(COLOR_BG)
        w, h = surface.get_size()
        span = self.config.grid_max - self.config.grid_min + 1
        origin_x = (w - span * CELL_SIZE) // 2
        origin_y = 20

        # Grille (y croissant vers le haut)
        for i in range(span + 1):
            pygame.draw.line(surface, COLOR_GRID, (origin_x + i * CELL_SIZE, origin_y),
                             (origin_x + i * CELL_SIZE, origin_y + span * CELL_SIZE))
            pygame.draw.line(surface, COLOR_GRID, (origin_x, origin_y + i * CELL_SIZE),
                             (origin_x + span * CELL_SIZE, origin_y + i * CELL_SIZE))

        x, y = self.player.position
        col = x - self.config.grid_min
        row = self.config.grid_max - y
        blocked = self.last_report is not None and not self.last_report.moved
        rect = pygame.Rect(origin_x + col * CELL_SIZE + 2, origin_y + row * CELL_SIZE + 2,
                           CELL_SIZE - 4, CELL_SIZE - 4)
        pygame.draw.rect(surface, COLOR_BLOCKED if blocked else COLOR_PLAYER, rect)

        # Textes
        text_y = origin_y + span * CELL_SIZE + 10
        header = f"Score: {self.score_player.score:.4g}   Slots: {len(self.save_slots)}"
        surface.blit(self.font.render(header, True, COLOR_TEXT), (10, text_y))
        for i, line in enumerate(self.status):
            surface.blit(self.font.render(line, True, COLOR_TEXT_DIM), (10, text_y + 24 + i * 20))

    def _shutdown(self):
        log_info("Closing the playground...")
        total = self.counter.value()
        log_info(f"{total} input(s) handled.")
        self.counter.shutdown()
        pygame.quit()
