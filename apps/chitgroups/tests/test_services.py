"""
Service layer tests for chit groups.

Tests cover:
- Group creation and owner-only updates
- Scoped listing and retrieval
- Membership rules (own customers only, no duplicates)
"""

from datetime import date

import pytest

from apps.chitgroups.services import (
    AlreadyMemberError,
    ChitGroupNotFoundError,
    MemberUserNotFoundError,
    MembershipNotFoundError,
    NotGroupOwnerError,
    add_member,
    create_chit_group,
    get_chit_group,
    get_group_members,
    list_chit_groups,
    remove_member,
    update_chit_group,
)
from apps.core.exceptions import ForbiddenError


# =============================================================================
# Group management
# =============================================================================

class TestCreateChitGroup:

    def test_manager_creates_group(self, actor, manager):
        group = create_chit_group(
            actor=actor(manager),
            name='Savers',
            value=50000,
            duration=12,
            members_count=12,
            start_date=date(2024, 3, 1),
        )

        assert group.id is not None
        assert group.created_by == manager.id
        assert group.is_active is True

    def test_customer_cannot_create_group(self, actor, customer):
        with pytest.raises(ForbiddenError):
            create_chit_group(
                actor=actor(customer),
                name='Savers',
                value=50000,
                duration=12,
                members_count=12,
                start_date=date(2024, 3, 1),
            )


class TestUpdateChitGroup:

    def test_owner_updates_fields(self, actor, manager, chit_group):
        updated = update_chit_group(
            actor=actor(manager),
            chit_group_id=chit_group.id,
            name='Renamed',
            is_active=False,
        )

        assert updated.name == 'Renamed'
        assert updated.is_active is False
        assert updated.value == chit_group.value

    def test_identity_fields_are_ignored(self, actor, manager, other_manager, chit_group):
        updated = update_chit_group(
            actor=actor(manager),
            chit_group_id=chit_group.id,
            created_by=other_manager.id,
            id=999,
        )

        assert updated.id == chit_group.id
        assert updated.created_by == manager.id

    def test_other_manager_cannot_update(self, actor, other_manager, chit_group):
        with pytest.raises(NotGroupOwnerError):
            update_chit_group(actor=actor(other_manager), chit_group_id=chit_group.id, name='Mine')

    def test_missing_group(self, actor, manager):
        with pytest.raises(ChitGroupNotFoundError):
            update_chit_group(actor=actor(manager), chit_group_id=404, name='Nope')


class TestGroupVisibility:

    def test_managers_see_only_their_groups(self, actor, manager, other_manager, make_chit_group):
        mine = make_chit_group(manager, name='Mine')
        make_chit_group(other_manager, name='Theirs')

        groups = list_chit_groups(actor=actor(manager))

        assert [g.id for g in groups] == [mine.id]

    def test_customers_see_exactly_their_member_groups(
        self, actor, manager, customer, make_chit_group, enroll
    ):
        joined = make_chit_group(manager, name='Joined')
        make_chit_group(manager, name='Not joined')
        enroll(manager, joined, customer)

        groups = list_chit_groups(actor=actor(customer))

        assert [g.id for g in groups] == [joined.id]

    def test_customer_cannot_retrieve_foreign_group(self, actor, customer, chit_group):
        with pytest.raises(ForbiddenError):
            get_chit_group(actor=actor(customer), chit_group_id=chit_group.id)

    def test_other_manager_cannot_retrieve(self, actor, other_manager, chit_group):
        with pytest.raises(ForbiddenError):
            get_chit_group(actor=actor(other_manager), chit_group_id=chit_group.id)

    def test_not_found_before_forbidden(self, actor, other_manager):
        with pytest.raises(ChitGroupNotFoundError):
            get_chit_group(actor=actor(other_manager), chit_group_id=12345)


# =============================================================================
# Membership
# =============================================================================

class TestAddMember:

    def test_owner_adds_own_customer(self, actor, manager, customer, chit_group):
        membership = add_member(
            actor=actor(manager),
            chit_group_id=chit_group.id,
            user_id=customer.id,
            join_date=date(2024, 1, 5),
        )

        assert membership.chit_group_id == chit_group.id
        assert membership.user_id == customer.id
        assert membership.join_date == date(2024, 1, 5)

    def test_join_date_defaults_to_today(self, actor, manager, customer, chit_group):
        membership = add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=customer.id)

        assert membership.join_date is not None

    def test_duplicate_membership_is_conflict(self, actor, manager, customer, chit_group, memory_store):
        add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=customer.id)

        with pytest.raises(AlreadyMemberError):
            add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=customer.id)

        assert len(memory_store.get_chit_group_members(chit_group.id)) == 1

    def test_cannot_add_other_managers_customer(
        self, actor, manager, other_manager, make_customer, chit_group
    ):
        stranger = make_customer('stranger', managed_by=other_manager)

        with pytest.raises(ForbiddenError):
            add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=stranger.id)

    def test_cannot_add_manager_as_member(self, actor, manager, other_manager, chit_group):
        with pytest.raises(ForbiddenError):
            add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=other_manager.id)

    def test_unknown_user(self, actor, manager, chit_group):
        with pytest.raises(MemberUserNotFoundError):
            add_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=999)

    def test_non_owner_cannot_add(self, actor, other_manager, customer, chit_group):
        with pytest.raises(NotGroupOwnerError):
            add_member(actor=actor(other_manager), chit_group_id=chit_group.id, user_id=customer.id)


class TestRemoveMember:

    def test_owner_removes_member_and_keeps_user(
        self, actor, manager, customer, chit_group, enroll, memory_store
    ):
        enroll(manager, chit_group, customer)

        remove_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=customer.id)

        assert memory_store.get_membership(chit_group.id, customer.id) is None
        assert memory_store.get_user(customer.id) is not None

    def test_removing_non_member(self, actor, manager, customer, chit_group):
        with pytest.raises(MembershipNotFoundError):
            remove_member(actor=actor(manager), chit_group_id=chit_group.id, user_id=customer.id)


class TestGroupMembers:

    def test_member_lists_fellow_members(
        self, actor, manager, customer, make_customer, chit_group, enroll
    ):
        other = make_customer('second')
        enroll(manager, chit_group, customer)
        enroll(manager, chit_group, other)

        members = get_group_members(actor=actor(customer), chit_group_id=chit_group.id)

        assert {m.user_id for m in members} == {customer.id, other.id}

    def test_non_member_customer_is_forbidden(self, actor, customer, chit_group):
        with pytest.raises(ForbiddenError):
            get_group_members(actor=actor(customer), chit_group_id=chit_group.id)
