from .factory import (
    Stadium, EmiratesStadium, Westfalenstadion, SantiagoBernabeu,
    Club, Arsenal, BorussiaDortmund, RealMadrid,
    StadiumFactory, TicketPrinter
)
