"""Bid placement and listing."""

import logging
from decimal import Decimal
from typing import List

from apps.chitgroups.services import get_visible_chit_group, load_chit_group
from apps.core.exceptions import InvalidError
from apps.core.guards import can_bid, deny
from apps.storage import get_store
from apps.storage.records import Bid

from .auction_management import load_auction
from .exceptions import AuctionClosedError, NotGroupMemberError

logger = logging.getLogger(__name__)


def place_bid(*, actor, auction_id: int, bid_amount: Decimal) -> Bid:
    """
    Place a bid as a member of the auction's chit group.

    Args:
        actor: Acting user, must be a member of the group
        auction_id: Target auction
        bid_amount: Offer, positive and at most the group value

    Returns:
        Created Bid record

    Raises:
        AuctionNotFoundError: If auction doesn't exist
        NotGroupMemberError: If actor is not a member of the group
        AuctionClosedError: If the auction is completed or cancelled
        InvalidError: If amount is out of range
    """
    store = get_store()
    auction = load_auction(auction_id)
    group = load_chit_group(auction.chit_group_id)

    membership = store.get_membership(group.id, actor.user_id)
    if membership is None:
        deny(actor, auction, "You are not a member of this chit group", NotGroupMemberError)

    if not can_bid(actor, auction, membership):
        raise AuctionClosedError(
            f"Cannot place bid on a {auction.status} auction"
        )

    if bid_amount <= 0:
        raise InvalidError("Bid amount must be positive", field='bid_amount')
    if bid_amount > group.value:
        raise InvalidError(
            f"Bid amount cannot exceed the chit value of {group.value}",
            field='bid_amount'
        )

    bid = store.create_bid(
        auction_id=auction.id,
        user_id=actor.user_id,
        bid_amount=bid_amount,
    )
    logger.info("User #%s bid %s on auction #%s", actor.user_id, bid_amount, auction.id)
    return bid


def list_bids(*, actor, auction_id: int) -> List[Bid]:
    """Bids of an auction whose group is visible to the actor."""
    auction = load_auction(auction_id)
    get_visible_chit_group(actor=actor, chit_group_id=auction.chit_group_id)
    return get_store().get_bids_by_auction(auction.id)
