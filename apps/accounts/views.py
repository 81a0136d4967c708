from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    PasscodeSetupSerializer,
    PasscodeLoginSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    set_passcode,
    verify_passcode,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidPasscodeFormatError,
    PasscodeNotSetError,
    PasscodeLockedError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _auth_payload(user, message):
    refresh = RefreshToken.for_user(user)
    return {
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a student, merchant or recruiter account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(
        _auth_payload(user, 'Registration successful.'),
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'error': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({
            'error': 'Account is deactivated'
        }, status=status.HTTP_403_FORBIDDEN)

    return Response(_auth_payload(user, 'Login successful'))


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=PasscodeSetupSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Create or replace the 6-digit passcode for this device.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def setup_passcode(request):
    """Bind a passcode to the caller's device."""
    serializer = PasscodeSetupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        set_passcode(user=request.user, **serializer.validated_data)
    except InvalidPasscodeFormatError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Passcode set successfully. You can now use quick login.'})


@extend_schema(
    request=PasscodeLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        429: ErrorResponseSerializer,
    },
    description="Quick login on a known device using the 6-digit passcode.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def passcode_login(request):
    """Exchange a device passcode for JWT tokens."""
    serializer = PasscodeLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = verify_passcode(**serializer.validated_data)
    except PasscodeNotSetError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except PasscodeLockedError as e:
        return Response({'error': str(e)}, status=status.HTTP_429_TOO_MANY_REQUESTS)
    except InvalidCredentialsError:
        return Response({'error': 'Invalid passcode'}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({'error': 'Account is deactivated'}, status=status.HTTP_403_FORBIDDEN)

    return Response(_auth_payload(user, 'Login successful'))
