"""
Auction lifecycle.

    scheduled --> completed   (winner_user_id and winning_bid set together)
    scheduled --> cancelled   (no winner)

Completed and cancelled are terminal: once there, no field of the auction
may change. Only scheduled auctions accept bids.
"""

from decimal import Decimal

from apps.chitgroups.services.group_access import validate_month_number
from apps.core.exceptions import InvalidError
from apps.storage.records import AuctionStatus

from .exceptions import AuctionTransitionError

TRANSITIONS = {
    AuctionStatus.SCHEDULED: {
        AuctionStatus.SCHEDULED,
        AuctionStatus.COMPLETED,
        AuctionStatus.CANCELLED,
    },
    AuctionStatus.COMPLETED: set(),
    AuctionStatus.CANCELLED: set(),
}

WINNER_FIELDS = ('winner_user_id', 'winning_bid')
UPDATABLE_FIELDS = ('auction_date', 'month_number', 'status') + WINNER_FIELDS


def is_terminal(status: str) -> bool:
    return status in AuctionStatus.terminal


def can_transition(current: str, target: str) -> bool:
    return target in TRANSITIONS.get(current, set())


def accepts_bids(auction) -> bool:
    return auction.status == AuctionStatus.SCHEDULED


def validate_update(auction, group, changes: dict, is_member) -> dict:
    """
    Check ``changes`` against the lifecycle and return the fields to store.

    Args:
        auction: Current Auction record
        group: The auction's ChitGroup record
        changes: Requested field changes
        is_member: Callable telling whether a user id belongs to the group

    Raises:
        AuctionTransitionError: If the auction is terminal or the status change is illegal
        InvalidError: If winner fields are missing, misplaced or out of range
    """
    if is_terminal(auction.status):
        raise AuctionTransitionError(
            f"Auction is {auction.status}; no further changes are allowed"
        )

    changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    target = changes.get('status', auction.status)

    if target not in AuctionStatus.values:
        raise InvalidError(f"Unknown auction status '{target}'", field='status')
    if not can_transition(auction.status, target):
        raise AuctionTransitionError(
            f"Cannot change auction from {auction.status} to {target}"
        )

    if 'month_number' in changes:
        validate_month_number(group, changes['month_number'])

    if target == AuctionStatus.COMPLETED:
        for name in WINNER_FIELDS:
            if changes.get(name) is None:
                raise InvalidError(
                    "Completing an auction requires winner_user_id and winning_bid",
                    field=name
                )
        if Decimal(changes['winning_bid']) <= 0:
            raise InvalidError("Winning bid must be positive", field='winning_bid')
        if Decimal(changes['winning_bid']) > group.value:
            raise InvalidError(
                f"Winning bid cannot exceed the chit value of {group.value}",
                field='winning_bid'
            )
        if not is_member(changes['winner_user_id']):
            raise InvalidError(
                "Winner must be a member of this chit group",
                field='winner_user_id'
            )
    else:
        for name in WINNER_FIELDS:
            if changes.get(name) is not None:
                raise InvalidError(
                    f"A {target} auction cannot have a winner",
                    field=name
                )
        # Explicit nulls are harmless; the stored record has none either
        for name in WINNER_FIELDS:
            changes.pop(name, None)

    return changes
