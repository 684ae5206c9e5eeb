"""
Pattern Proxy : un représentant se place devant l'objet réel et exécute la logique
côté client (authentification, verrouillage) avant d'y accéder.
"""
from abc import ABC, abstractmethod
from typing import Optional

from patterns_engine.core.consts import AccountState
from patterns_engine.utils.logger import log_info


class Account(ABC):
    @abstractmethod
    def balance(self) -> str:
        raise NotImplementedError


class RealAccount(Account):
    """Le "vrai" compte (accès coûteux et confidentiel)."""

    def balance(self):
        message = "Your balance is $3.50."
        log_info(message)
        return message


class ClientConsole(ABC):
    @abstractmethod
    def read_line(self) -> str:
        raise NotImplementedError


class ProxyAccount(Account):
    """
    Compte mandataire : demande le mot de passe (max_attempts essais)
    et se verrouille définitivement en cas d'échec.
    """
    LOCKED_MESSAGE = "Account locked! Boohoo."

    def __init__(self, console: ClientConsole, password: str, max_attempts: int = 3,
                 real_account: Optional[Account] = None):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.console = console
        self.max_attempts = max_attempts
        self.state = AccountState.UNLOCKED
        self._password = password
        self._real_account = real_account or RealAccount()

    def balance(self):
        if self.state == AccountState.LOCKED:
            log_info(self.LOCKED_MESSAGE)
            return self.LOCKED_MESSAGE

        for attempt in range(1, self.max_attempts + 1):
            if self.console.read_line() == self._password:
                return self._real_account.balance()
            log_info(f"Incorrect password. {self.max_attempts - attempt} attempts remaining.")

        log_info("Maximum password attempts reached, locking account.")
        self.state = AccountState.LOCKED
        return self.LOCKED_MESSAGE
