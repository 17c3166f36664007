from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .authentication import issue_tokens, login_session, logout_session
from .permissions import IsManager
from .serializers import (
    AuthResponseSerializer,
    CustomerCreateSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
    PasswordResetSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from .services import (
    authenticate_user,
    create_customer,
    get_current_user,
    list_customers,
    register_user,
    reset_password,
)


def _actor(request):
    return request.user if request.user and request.user.is_authenticated else None


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description=(
        "Anonymous callers register a manager account and are logged in. "
        "An authenticated manager registers a customer assigned to them."
    ),
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a manager (self-registration) or a customer (by a manager)."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    actor = _actor(request)
    user = register_user(actor=actor, **serializer.validated_data)

    body = {
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
    }
    if actor is None:
        # Self-registered managers are logged in straight away
        login_session(request, user)
        body['tokens'] = issue_tokens(user)

    return Response(body, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Authenticate with username and password; binds a session and returns JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate_user(**serializer.validated_data)
    login_session(request, user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': issue_tokens(user),
    })


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="Drop the server-side session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Logout the current session."""
    logout_session(request)
    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: UserSerializer, 401: ErrorResponseSerializer},
    description="Get the authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user_view(request):
    """Get current user profile."""
    user = get_current_user(actor=request.user)
    return Response(UserSerializer(user).data)


@extend_schema(
    request=PasswordResetSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Change your own password; required on first login for customers.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reset_password_view(request, pk):
    """Replace the password after verifying the current one."""
    serializer = PasswordResetSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = reset_password(actor=request.user, user_id=pk, **serializer.validated_data)

    return Response({
        'message': 'Password updated successfully',
        'user': UserSerializer(user).data,
    })


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer(many=True), 403: ErrorResponseSerializer},
    description="List customers managed by the authenticated manager.",
    tags=['customers'],
)
@extend_schema(
    methods=['POST'],
    request=CustomerCreateSerializer,
    responses={
        201: UserSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Create a customer with a temporary password, assigned to the authenticated manager.",
    tags=['customers'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsManager])
def customers(request):
    """List or create the manager's own customers."""
    if request.method == 'GET':
        return Response(UserSerializer(list_customers(actor=request.user), many=True).data)

    serializer = CustomerCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = create_customer(actor=request.user, **serializer.validated_data)
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
