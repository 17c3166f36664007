from rest_framework import serializers

from apps.storage import get_store
from apps.storage.records import AuctionStatus


class AuctionSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    chit_group_id = serializers.IntegerField(read_only=True)
    auction_date = serializers.DateField(read_only=True)
    month_number = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)
    winner_user_id = serializers.IntegerField(read_only=True, allow_null=True)
    winning_bid = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class AuctionCreateSerializer(serializers.Serializer):
    """Scheduling input. Status and winner fields are not accepted here."""

    auction_date = serializers.DateField()
    month_number = serializers.IntegerField(min_value=1)


class AuctionUpdateSerializer(serializers.Serializer):
    """
    Update input. Lifecycle rules (terminal states, winner fields) are
    checked by the service, not here.
    """

    auction_date = serializers.DateField(required=False)
    month_number = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=AuctionStatus.choices, required=False)
    winner_user_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    winning_bid = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        required=False,
        allow_null=True
    )


class BidSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    auction_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    bid_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    bid_time = serializers.DateTimeField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    user = serializers.SerializerMethodField()

    def get_user(self, obj):
        user = get_store().get_user(obj.user_id)
        return {'id': user.id, 'name': user.name} if user else None


class PlaceBidSerializer(serializers.Serializer):
    bid_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
