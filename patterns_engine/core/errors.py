"""
Taxonomie des erreurs du moteur.
Toutes héritent aussi de ValueError : ce sont des entrées refusées, pas des crashs.
"""


class PatternsError(Exception):
    """Classe de base de toutes les erreurs du moteur."""


class InvalidButtonError(PatternsError, ValueError):
    """Bouton hors du domaine A / B / X / Y."""


class InvalidBindingError(PatternsError, ValueError):
    """Association bouton -> commande incomplète ou inconnue."""


class MissingSnapshotError(PatternsError, ValueError):
    """restore_score() appelé sans sauvegarde."""


class ForeignSnapshotError(PatternsError, ValueError):
    """Sauvegarde produite par un autre joueur."""


class UnknownClubError(PatternsError, ValueError):
    pass


class UnknownMonsterError(PatternsError, ValueError):
    pass
