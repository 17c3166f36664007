from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsManager, IsManagerOrReadOnly
from apps.auctions.serializers import AuctionCreateSerializer, AuctionSerializer
from apps.auctions.services import list_auctions, schedule_auction

from .serializers import (
    AddMemberSerializer,
    ChitGroupCreateSerializer,
    ChitGroupMemberSerializer,
    ChitGroupSerializer,
    ChitGroupUpdateSerializer,
)
from .services import (
    add_member,
    create_chit_group,
    get_chit_group,
    get_group_members,
    list_chit_groups,
    remove_member,
    update_chit_group,
)


class ChitGroupViewSet(viewsets.ViewSet):
    """
    ViewSet for chit groups and their members and auctions.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Groups created by the manager, or joined by the customer
    create: Create a new group (manager)
    retrieve: Get a specific group
    update: Update a group (owner)
    partial_update: Partially update a group (owner)
    """

    permission_classes = [IsManagerOrReadOnly]
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: ChitGroupSerializer(many=True)}, tags=['chitgroups'])
    def list(self, request):
        groups = list_chit_groups(actor=request.user)
        return Response(ChitGroupSerializer(groups, many=True).data)

    @extend_schema(
        request=ChitGroupCreateSerializer,
        responses={201: ChitGroupSerializer},
        tags=['chitgroups'],
    )
    def create(self, request):
        serializer = ChitGroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_chit_group(actor=request.user, **serializer.validated_data)
        return Response(ChitGroupSerializer(group).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ChitGroupSerializer}, tags=['chitgroups'])
    def retrieve(self, request, pk=None):
        group = get_chit_group(actor=request.user, chit_group_id=int(pk))
        return Response(ChitGroupSerializer(group).data)

    @extend_schema(
        request=ChitGroupUpdateSerializer,
        responses={200: ChitGroupSerializer},
        tags=['chitgroups'],
    )
    def update(self, request, pk=None, partial=False):
        serializer = ChitGroupUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        group = update_chit_group(
            actor=request.user,
            chit_group_id=int(pk),
            **serializer.validated_data
        )
        return Response(ChitGroupSerializer(group).data)

    @extend_schema(
        request=ChitGroupUpdateSerializer,
        responses={200: ChitGroupSerializer},
        tags=['chitgroups'],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    @extend_schema(
        methods=['GET'],
        responses={200: ChitGroupMemberSerializer(many=True)},
        description="List members of a group you created or belong to.",
        tags=['chitgroups'],
    )
    @extend_schema(
        methods=['POST'],
        request=AddMemberSerializer,
        responses={201: ChitGroupMemberSerializer},
        description="Enroll one of your customers in one of your groups.",
        tags=['chitgroups'],
    )
    @action(detail=True, methods=['get', 'post'])
    def members(self, request, pk=None):
        """List or add members of the group."""
        if request.method == 'GET':
            memberships = get_group_members(actor=request.user, chit_group_id=int(pk))
            return Response(ChitGroupMemberSerializer(memberships, many=True).data)

        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        membership = add_member(
            actor=request.user,
            chit_group_id=int(pk),
            **serializer.validated_data
        )
        return Response(ChitGroupMemberSerializer(membership).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=None,
        responses={204: None},
        description="Remove a customer from the group. The user account is kept.",
        tags=['chitgroups'],
    )
    @action(
        detail=True,
        methods=['delete'],
        url_path=r'members/(?P<user_id>\d+)',
        url_name='remove-member',
        permission_classes=[IsAuthenticated, IsManager],
    )
    def remove_member(self, request, pk=None, user_id=None):
        """Remove a member from the group (owner only)."""
        remove_member(actor=request.user, chit_group_id=int(pk), user_id=int(user_id))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        methods=['GET'],
        responses={200: AuctionSerializer(many=True)},
        description="List auctions of a group you created or belong to.",
        tags=['auctions'],
    )
    @extend_schema(
        methods=['POST'],
        request=AuctionCreateSerializer,
        responses={201: AuctionSerializer},
        description="Schedule an auction for one of your groups.",
        tags=['auctions'],
    )
    @action(detail=True, methods=['get', 'post'])
    def auctions(self, request, pk=None):
        """List or schedule auctions of the group."""
        if request.method == 'GET':
            auctions = list_auctions(actor=request.user, chit_group_id=int(pk))
            return Response(AuctionSerializer(auctions, many=True).data)

        serializer = AuctionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        auction = schedule_auction(
            actor=request.user,
            chit_group_id=int(pk),
            **serializer.validated_data
        )
        return Response(AuctionSerializer(auction).data, status=status.HTTP_201_CREATED)
