"""
Lifecycle rules, checked without a store.
"""

from datetime import date
from decimal import Decimal

import pytest

from apps.auctions.services import lifecycle
from apps.auctions.services.exceptions import AuctionTransitionError
from apps.core.exceptions import InvalidError
from apps.storage.records import Auction, ChitGroup


def make_group(duration=10):
    return ChitGroup(
        id=1,
        name='Savers',
        value=100000,
        duration=duration,
        members_count=5,
        start_date=date(2024, 1, 1),
        created_by=1,
    )


def make_auction(status='scheduled', **kwargs):
    return Auction(id=1, chit_group_id=1, auction_date=date(2024, 2, 1), month_number=1, status=status, **kwargs)


def members(*user_ids):
    return lambda user_id: user_id in user_ids


class TestTransitions:

    @pytest.mark.parametrize('target', ['scheduled', 'completed', 'cancelled'])
    def test_scheduled_moves_anywhere(self, target):
        assert lifecycle.can_transition('scheduled', target)

    @pytest.mark.parametrize('current', ['completed', 'cancelled'])
    @pytest.mark.parametrize('target', ['scheduled', 'completed', 'cancelled'])
    def test_terminal_states_are_final(self, current, target):
        assert lifecycle.is_terminal(current)
        assert not lifecycle.can_transition(current, target)

    def test_only_scheduled_accepts_bids(self):
        assert lifecycle.accepts_bids(make_auction())
        assert not lifecycle.accepts_bids(make_auction('completed'))
        assert not lifecycle.accepts_bids(make_auction('cancelled'))


class TestMonthNumber:

    @pytest.mark.parametrize('month', [1, 10])
    def test_within_duration(self, month):
        lifecycle.validate_month_number(make_group(duration=10), month)

    @pytest.mark.parametrize('month', [0, 11])
    def test_outside_duration(self, month):
        with pytest.raises(InvalidError) as exc_info:
            lifecycle.validate_month_number(make_group(duration=10), month)

        assert exc_info.value.field == 'month_number'


class TestValidateUpdate:

    def test_complete_with_winner(self):
        changes = lifecycle.validate_update(
            make_auction(),
            make_group(),
            {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('95000')},
            members(7),
        )

        assert changes == {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('95000')}

    @pytest.mark.parametrize('missing', ['winner_user_id', 'winning_bid'])
    def test_complete_requires_both_winner_fields(self, missing):
        changes = {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('95000')}
        del changes[missing]

        with pytest.raises(InvalidError) as exc_info:
            lifecycle.validate_update(make_auction(), make_group(), changes, members(7))

        assert exc_info.value.field == missing

    def test_winner_must_be_member(self):
        with pytest.raises(InvalidError) as exc_info:
            lifecycle.validate_update(
                make_auction(),
                make_group(),
                {'status': 'completed', 'winner_user_id': 8, 'winning_bid': Decimal('95000')},
                members(7),
            )

        assert exc_info.value.field == 'winner_user_id'

    def test_winning_bid_must_be_positive(self):
        with pytest.raises(InvalidError):
            lifecycle.validate_update(
                make_auction(),
                make_group(),
                {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('0')},
                members(7),
            )

    def test_winning_bid_capped_at_group_value(self):
        with pytest.raises(InvalidError) as exc_info:
            lifecycle.validate_update(
                make_auction(),
                make_group(),
                {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('100000.01')},
                members(7),
            )

        assert exc_info.value.field == 'winning_bid'

    def test_winning_bid_equal_to_group_value(self):
        changes = lifecycle.validate_update(
            make_auction(),
            make_group(),
            {'status': 'completed', 'winner_user_id': 7, 'winning_bid': Decimal('100000')},
            members(7),
        )

        assert changes['winning_bid'] == Decimal('100000')

    def test_cancel_rejects_winner(self):
        with pytest.raises(InvalidError):
            lifecycle.validate_update(
                make_auction(),
                make_group(),
                {'status': 'cancelled', 'winner_user_id': 7},
                members(7),
            )

    def test_explicit_null_winner_is_dropped(self):
        changes = lifecycle.validate_update(
            make_auction(),
            make_group(),
            {'status': 'cancelled', 'winner_user_id': None, 'winning_bid': None},
            members(),
        )

        assert changes == {'status': 'cancelled'}

    def test_reschedule_date(self):
        changes = lifecycle.validate_update(
            make_auction(),
            make_group(),
            {'auction_date': date(2024, 2, 15), 'id': 99},
            members(),
        )

        assert changes == {'auction_date': date(2024, 2, 15)}

    @pytest.mark.parametrize('current', ['completed', 'cancelled'])
    def test_terminal_auction_rejects_any_change(self, current):
        with pytest.raises(AuctionTransitionError):
            lifecycle.validate_update(
                make_auction(current),
                make_group(),
                {'auction_date': date(2024, 3, 1)},
                members(),
            )
