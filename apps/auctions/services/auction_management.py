"""Auction scheduling and status changes."""

import logging
from datetime import date
from typing import List

from apps.chitgroups.services import get_owned_chit_group, get_visible_chit_group
from apps.notifications.services import notify_user
from apps.storage import get_store
from apps.storage.records import Auction, AuctionStatus, NotificationType

from . import lifecycle
from .exceptions import AuctionNotFoundError

logger = logging.getLogger(__name__)


def load_auction(auction_id: int) -> Auction:
    auction = get_store().get_auction(auction_id)
    if auction is None:
        raise AuctionNotFoundError(f"Auction with ID {auction_id} not found")
    return auction


def schedule_auction(
    *,
    actor,
    chit_group_id: int,
    auction_date: date,
    month_number: int
) -> Auction:
    """
    Schedule an auction for a group owned by the acting manager.

    New auctions always start scheduled, without winner fields.

    Raises:
        ChitGroupNotFoundError: If group doesn't exist
        NotGroupOwnerError: If actor did not create the group
        InvalidError: If month_number is outside the group's duration
    """
    group = get_owned_chit_group(actor=actor, chit_group_id=chit_group_id)
    lifecycle.validate_month_number(group, month_number)

    auction = get_store().create_auction(
        chit_group_id=group.id,
        auction_date=auction_date,
        month_number=month_number,
        status=AuctionStatus.SCHEDULED,
        winner_user_id=None,
        winning_bid=None,
    )
    logger.info("Auction #%s scheduled for chit group #%s month %s", auction.id, group.id, month_number)
    return auction


def list_auctions(*, actor, chit_group_id: int) -> List[Auction]:
    group = get_visible_chit_group(actor=actor, chit_group_id=chit_group_id)
    return get_store().get_auctions_by_chit_group(group.id)


def get_auction(*, actor, auction_id: int) -> Auction:
    """Auction whose group is visible to the actor."""
    auction = load_auction(auction_id)
    get_visible_chit_group(actor=actor, chit_group_id=auction.chit_group_id)
    return auction


def update_auction(*, actor, auction_id: int, **changes) -> Auction:
    """
    Apply a lifecycle-checked update to an auction of the acting manager.

    Completing an auction notifies the winner.

    Raises:
        AuctionNotFoundError: If auction doesn't exist
        NotGroupOwnerError: If actor did not create the group
        AuctionTransitionError: If the auction is terminal or the transition is illegal
        InvalidError: If winner fields are missing or invalid
    """
    store = get_store()
    auction = load_auction(auction_id)
    group = get_owned_chit_group(actor=actor, chit_group_id=auction.chit_group_id)

    def is_member(user_id):
        return store.get_membership(group.id, user_id) is not None

    locked = []

    def check(current):
        locked.append(current)
        return lifecycle.validate_update(current, group, changes, is_member)

    updated = store.update_auction_checked(auction.id, check)
    if updated is None:
        raise AuctionNotFoundError(f"Auction with ID {auction_id} not found")
    previous = locked[-1]

    if updated.status != previous.status:
        logger.info("Auction #%s moved from %s to %s", auction.id, previous.status, updated.status)

    if updated.status == AuctionStatus.COMPLETED and previous.status != AuctionStatus.COMPLETED:
        notify_user(
            user_id=updated.winner_user_id,
            message=(
                f"Congratulations! You won the auction for {group.name}, "
                f"month {updated.month_number} with a bid of ₹{updated.winning_bid}."
            ),
            type=NotificationType.AUCTION,
        )

    return updated
