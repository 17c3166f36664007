from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsManagerOrReadOnly

from .serializers import (
    AuctionSerializer,
    AuctionUpdateSerializer,
    BidSerializer,
    PlaceBidSerializer,
)
from .services import get_auction, list_bids, place_bid, update_auction


class AuctionViewSet(viewsets.ViewSet):
    """
    ViewSet for auctions and their bids.

    Auctions are listed and scheduled through their chit group
    (``/api/chitgroups/{id}/auctions/``).

    retrieve: Get an auction
    update: Change an auction (owner); status changes follow the lifecycle
    partial_update: Same as update
    """

    permission_classes = [IsManagerOrReadOnly]
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: AuctionSerializer}, tags=['auctions'])
    def retrieve(self, request, pk=None):
        auction = get_auction(actor=request.user, auction_id=int(pk))
        return Response(AuctionSerializer(auction).data)

    @extend_schema(
        request=AuctionUpdateSerializer,
        responses={200: AuctionSerializer},
        description=(
            "Move a scheduled auction to completed (winner_user_id and winning_bid "
            "required) or cancelled. Completed and cancelled auctions cannot change."
        ),
        tags=['auctions'],
    )
    def update(self, request, pk=None):
        serializer = AuctionUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        auction = update_auction(
            actor=request.user,
            auction_id=int(pk),
            **serializer.validated_data
        )
        return Response(AuctionSerializer(auction).data)

    @extend_schema(
        request=AuctionUpdateSerializer,
        responses={200: AuctionSerializer},
        tags=['auctions'],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(
        methods=['GET'],
        responses={200: BidSerializer(many=True)},
        description="List bids of an auction in a group you created or belong to.",
        tags=['auctions'],
    )
    @extend_schema(
        methods=['POST'],
        request=PlaceBidSerializer,
        responses={201: BidSerializer},
        description="Place a bid. Members only, while the auction is scheduled.",
        tags=['auctions'],
    )
    @action(detail=True, methods=['get', 'post'], permission_classes=[IsAuthenticated])
    def bids(self, request, pk=None):
        """List or place bids."""
        if request.method == 'GET':
            bids = list_bids(actor=request.user, auction_id=int(pk))
            return Response(BidSerializer(bids, many=True).data)

        serializer = PlaceBidSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        bid = place_bid(
            actor=request.user,
            auction_id=int(pk),
            bid_amount=serializer.validated_data['bid_amount']
        )
        return Response(BidSerializer(bid).data, status=status.HTTP_201_CREATED)
