"""
Auctions service layer.

Status changes go through the lifecycle module; bidding is limited to
members while the auction is scheduled.
"""

from .exceptions import (
    AuctionNotFoundError,
    AuctionTransitionError,
    AuctionClosedError,
    NotGroupMemberError,
)

from .auction_management import (
    load_auction,
    schedule_auction,
    list_auctions,
    get_auction,
    update_auction,
)

from .bidding import (
    place_bid,
    list_bids,
)


__all__ = [
    # Exceptions
    'AuctionNotFoundError',
    'AuctionTransitionError',
    'AuctionClosedError',
    'NotGroupMemberError',

    # Auction Management
    'load_auction',
    'schedule_auction',
    'list_auctions',
    'get_auction',
    'update_auction',

    # Bidding
    'place_bid',
    'list_bids',
]
