from rest_framework import status, viewsets
from rest_framework.response import Response
from drf_spectacular.utils import OpenApiParameter, extend_schema

from apps.accounts.permissions import IsManagerOrReadOnly

from .serializers import (
    PaymentCreateSerializer,
    PaymentFilterSerializer,
    PaymentSerializer,
    PaymentUpdateSerializer,
)
from .services import get_payment, list_payments, record_payment, update_payment


class PaymentViewSet(viewsets.ViewSet):
    """
    ViewSet for payments.

    list: Payments of the manager's groups, or the customer's own payments
    create: Record a payment for a member (owner); notifies the payer
    retrieve: Get a payment
    update: Correct a payment (owner)
    partial_update: Same as update
    """

    permission_classes = [IsManagerOrReadOnly]
    lookup_value_regex = r'\d+'

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='chit_group_id',
                type=int,
                description='Only payments of this chit group',
            ),
        ],
        responses={200: PaymentSerializer(many=True)},
        tags=['payments'],
    )
    def list(self, request):
        filters = PaymentFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        payments = list_payments(
            actor=request.user,
            chit_group_id=filters.validated_data.get('chit_group_id')
        )
        return Response(PaymentSerializer(payments, many=True).data)

    @extend_schema(
        request=PaymentCreateSerializer,
        responses={201: PaymentSerializer},
        tags=['payments'],
    )
    def create(self, request):
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payment = record_payment(actor=request.user, **serializer.validated_data)
        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: PaymentSerializer}, tags=['payments'])
    def retrieve(self, request, pk=None):
        payment = get_payment(actor=request.user, payment_id=int(pk))
        return Response(PaymentSerializer(payment).data)

    @extend_schema(
        request=PaymentUpdateSerializer,
        responses={200: PaymentSerializer},
        tags=['payments'],
    )
    def update(self, request, pk=None):
        serializer = PaymentUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        payment = update_payment(
            actor=request.user,
            payment_id=int(pk),
            **serializer.validated_data
        )
        return Response(PaymentSerializer(payment).data)

    @extend_schema(
        request=PaymentUpdateSerializer,
        responses={200: PaymentSerializer},
        tags=['payments'],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)
