import random

import pytest

from patterns_engine.core.errors import UnknownClubError
from patterns_engine.stadiums import (
    Club, Arsenal, BorussiaDortmund, RealMadrid,
    EmiratesStadium, Westfalenstadion, SantiagoBernabeu,
    StadiumFactory, TicketPrinter
)


class Wrexham(Club):
    name = "Wrexham AFC"
    location = "Wrexham, Wales"

    def current_manager(self):
        return "Phil Parkinson"


@pytest.mark.parametrize("club, stadium_cls", [
    (Arsenal(), EmiratesStadium),
    (BorussiaDortmund(), Westfalenstadion),
    (RealMadrid(), SantiagoBernabeu),
])
def test_factory_maps_club_to_stadium(club, stadium_cls):
    assert isinstance(StadiumFactory().get_stadium(club), stadium_cls)


def test_factory_unknown_club_raises():
    with pytest.raises(UnknownClubError):
        StadiumFactory().get_stadium(Wrexham())


def test_matchday_capacity_below_max():
    stadium = SantiagoBernabeu(rng=random.Random(1))
    for _ in range(100):
        assert 0 <= stadium.matchday_capacity() < stadium.max_capacity


def test_real_madrid_manager_is_picked_at_runtime():
    club = RealMadrid(rng=random.Random(3))
    managers = {club.current_manager() for _ in range(50)}
    assert managers <= set(RealMadrid.MANAGERS)
    assert len(managers) > 1


def test_ticket_printer_uses_host_stadium(recorder):
    printer = TicketPrinter(StadiumFactory(rng=random.Random(0)), reporter=recorder)
    ticket = printer.print_ticket(Arsenal(), BorussiaDortmund())

    assert "at The Emirates!" in ticket
    assert "Our visitors come from Dortmund, Germany" in ticket
    assert "their manager is Marco Rose" in ticket
    assert "Our manager Mikel Arteta welcomes Borussia Dortmund" in ticket
    assert "out of a possible 100" in ticket
    assert recorder.items == [ticket]
