from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import NotificationSerializer
from .services import list_notifications, mark_notification_read


@extend_schema(
    responses={200: NotificationSerializer(many=True)},
    description="Notifications addressed to the authenticated user.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def notification_list(request):
    """List own notifications."""
    notifications = list_notifications(actor=request.user)
    return Response(NotificationSerializer(notifications, many=True).data)


@extend_schema(
    request=None,
    responses={204: None},
    description="Mark one of your notifications as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_read(request, pk):
    """Mark notification as read."""
    mark_notification_read(actor=request.user, notification_id=pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
