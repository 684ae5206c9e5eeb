from .player import (
    Player,
    DefaultPlayer,
    BackwardsOnlyPlayer,
    MoveReport,
    log_reporter
)
