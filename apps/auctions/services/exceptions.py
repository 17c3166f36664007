"""Domain-specific exceptions for auctions and bids."""

from apps.core.exceptions import ForbiddenError, InvalidTransitionError, NotFoundError


class AuctionNotFoundError(NotFoundError):
    """Raised when an auction does not exist."""
    default_detail = 'Auction not found.'


class AuctionTransitionError(InvalidTransitionError):
    """Raised when an update would leave a terminal state or skip a rule of the lifecycle."""
    default_detail = 'This auction can no longer be changed.'


class AuctionClosedError(InvalidTransitionError):
    """Raised when bidding on an auction that is no longer scheduled."""
    default_detail = 'Cannot place bid on a completed or cancelled auction.'


class NotGroupMemberError(ForbiddenError):
    """Raised when a non-member tries to bid."""
    default_detail = 'You are not a member of this chit group.'
