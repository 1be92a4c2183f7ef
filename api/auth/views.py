"""
Account API views.

These endpoints are used to:
- Register an account
- Log in and obtain a bearer token
- Read the authenticated account
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.login import LoginCommand
from accounts.application.commands.register_account import RegisterAccountCommand
from accounts.application.handlers.login_handler import LoginHandler
from accounts.application.handlers.register_account_handler import RegisterAccountHandler
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from accounts.infrastructure.tokens import JWTTokenService
from api.auth.serializers import (
    AccountSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    RegisterRequestSerializer,
    RegisterResponseSerializer,
)
from core.config import get_service_config
from core.request_utils import get_client_ip

_account_repo = DjangoAccountRepository()


class RegisterView(APIView):
    """View for registering accounts."""

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="register_account",
        summary="Register Account",
        tags=["Auth"],
        request=RegisterRequestSerializer,
        responses={
            201: RegisterResponseSerializer,
            400: {"description": "Bad Request or passwords do not match"},
            409: {"description": "Username or email already registered"},
        },
    )
    def post(self, request: Request) -> Response:
        """Register an account."""
        return async_to_sync(self._handle_register)(request)

    async def _handle_register(self, request: Request) -> Response:
        """Async handler for register."""
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        handler = RegisterAccountHandler(account_repository=_account_repo)
        account = await handler.handle(
            RegisterAccountCommand(
                username=data["username"],
                email=data["email"],
                password=data["password"],
                password_repeat=data["password_repeat"],
            )
        )
        return Response(
            {"message": "Registration successful", "user": AccountSerializer(account).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """View for logging in."""

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="login",
        summary="Login",
        description="Exchange email and password for a bearer token.",
        tags=["Auth"],
        request=LoginRequestSerializer,
        responses={
            200: LoginResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid email or password"},
        },
    )
    def post(self, request: Request) -> Response:
        """Log in."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for login."""
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = LoginHandler(
            account_repository=_account_repo,
            token_service=JWTTokenService(get_service_config()),
        )
        result = await handler.handle(
            LoginCommand(
                email=serializer.validated_data["email"],
                password=serializer.validated_data["password"],
                ip_address=get_client_ip(request),
            )
        )
        return Response(
            {
                "message": "Login successful",
                "token": result.token,
                "user": AccountSerializer(result.account).data,
            },
            status=status.HTTP_200_OK,
        )


class MeView(APIView):
    """View for the authenticated account."""

    @extend_schema(
        operation_id="current_account",
        summary="Current Account",
        tags=["Auth"],
        responses={200: AccountSerializer, 401: {"description": "Unauthorized"}},
    )
    def get(self, request: Request) -> Response:
        """Return the account the bearer token belongs to."""
        principal = request.user
        return Response(
            {
                "id": str(principal.account_id),
                "username": principal.username,
                "email": principal.email,
            }
        )
