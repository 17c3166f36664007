from datetime import date

import pytest

from apps.auctions.services import schedule_auction


@pytest.fixture
def member(manager, customer, chit_group, enroll):
    """The default customer, enrolled in the default chit group."""
    enroll(manager, chit_group, customer)
    return customer


@pytest.fixture
def scheduled_auction(actor, manager, chit_group):
    return schedule_auction(
        actor=actor(manager),
        chit_group_id=chit_group.id,
        auction_date=date(2024, 2, 1),
        month_number=1,
    )
