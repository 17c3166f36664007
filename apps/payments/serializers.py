from decimal import Decimal

from rest_framework import serializers

from apps.storage import get_store
from apps.storage.records import PaymentStatus


class PaymentSerializer(serializers.Serializer):
    """Payment with the group name and payer name for listings."""

    id = serializers.IntegerField(read_only=True)
    chit_group_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    payment_date = serializers.DateField(read_only=True)
    month_number = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    chit_group = serializers.SerializerMethodField()
    user = serializers.SerializerMethodField()

    def get_chit_group(self, obj):
        group = get_store().get_chit_group(obj.chit_group_id)
        return {'id': group.id, 'name': group.name} if group else None

    def get_user(self, obj):
        user = get_store().get_user(obj.user_id)
        return {'id': user.id, 'name': user.name} if user else None


class PaymentCreateSerializer(serializers.Serializer):
    chit_group_id = serializers.IntegerField(min_value=1)
    user_id = serializers.IntegerField(min_value=1)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0.01'))
    payment_date = serializers.DateField()
    month_number = serializers.IntegerField(min_value=1)
    status = serializers.ChoiceField(choices=PaymentStatus.choices)


class PaymentUpdateSerializer(serializers.Serializer):
    """Fields a manager may correct on a recorded payment."""

    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0.01'), required=False)
    payment_date = serializers.DateField(required=False)
    month_number = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=PaymentStatus.choices, required=False)


class PaymentFilterSerializer(serializers.Serializer):
    chit_group_id = serializers.IntegerField(min_value=1, required=False)
