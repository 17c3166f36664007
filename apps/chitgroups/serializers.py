from rest_framework import serializers

from apps.accounts.serializers import UserSummarySerializer
from apps.storage import get_store


class ChitGroupSerializer(serializers.Serializer):
    """Chit group as returned to managers and members."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    value = serializers.IntegerField(read_only=True)
    duration = serializers.IntegerField(read_only=True)
    members_count = serializers.IntegerField(read_only=True)
    start_date = serializers.DateField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_by = serializers.IntegerField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class ChitGroupCreateSerializer(serializers.Serializer):
    """Input for creating or updating a chit group."""

    name = serializers.CharField(min_length=2, max_length=200)
    value = serializers.IntegerField(min_value=1)
    duration = serializers.IntegerField(min_value=1, max_value=60)
    members_count = serializers.IntegerField(min_value=2, max_value=50)
    start_date = serializers.DateField()
    is_active = serializers.BooleanField(default=True)


class ChitGroupUpdateSerializer(ChitGroupCreateSerializer):
    """Same rules as creation; ``is_active`` has no default on update."""

    is_active = serializers.BooleanField(required=False)


class ChitGroupMemberSerializer(serializers.Serializer):
    """Membership with the member's contact details."""

    id = serializers.IntegerField(read_only=True)
    chit_group_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    join_date = serializers.DateField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    user = serializers.SerializerMethodField()

    def get_user(self, obj):
        user = get_store().get_user(obj.user_id)
        return UserSummarySerializer(user).data if user else None


class AddMemberSerializer(serializers.Serializer):
    """Serializer for enrolling a customer."""

    user_id = serializers.IntegerField(min_value=1)
    join_date = serializers.DateField(required=False)
