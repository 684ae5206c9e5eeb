from abc import ABC, abstractmethod


class Command(ABC):
    """
    Classe abstraite de base pour toutes les commandes (Pattern Command).
    Une commande réifie UN appel sur la cible, sans rien connaître du bouton qui l'a déclenchée.
    """

    @abstractmethod
    def execute(self, player) -> None:
        """
        Exécute l'action sur la cible donnée.
        Le résultat n'est observable que via les rapports de la cible.
        """
        raise NotImplementedError
