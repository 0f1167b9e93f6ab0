"""
Exchange API views.

These endpoints are used by users (signed callers) to:
- Receive points issued by a brand
- Exchange points from one brand to another at 1:1
- Read a single balance
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from opentelemetry.trace import Status, StatusCode
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.exchange.serializers import (
    BalanceQuerySerializer,
    BalanceSerializer,
    ExchangeResultSerializer,
    ExchangeTokensRequestSerializer,
    IssueTokensRequestSerializer,
)
from brands.infrastructure.repositories.kv_brand_repository import KeyValueBrandRepository
from core.infrastructure.authentication import ContextCallerAuthenticator
from core.infrastructure.django_key_value_store import DjangoKeyValueStore
from core.infrastructure.retention import RetentionExtender, retention_policy_from_settings
from core.instrumentation import get_tracer
from exchange.application.commands.exchange_tokens import ExchangeTokensCommand
from exchange.application.commands.issue_tokens import IssueTokensCommand
from exchange.application.handlers.exchange_tokens_handler import ExchangeTokensHandler
from exchange.application.handlers.issue_tokens_handler import IssueTokensHandler
from exchange.application.handlers.view_user_balance_handler import ViewUserBalanceHandler
from exchange.application.queries.view_user_balance import ViewUserBalanceQuery
from ledger.infrastructure.kv_balance_ledger import KeyValueBalanceLedger

# Initialize repositories (in production, use DI container)
_store = DjangoKeyValueStore()
_brand_repo = KeyValueBrandRepository(_store)
_balance_ledger = KeyValueBalanceLedger(_store)
_authenticator = ContextCallerAuthenticator()

tracer = get_tracer(__name__)

_SIGNED_CALLER_RESPONSES = {
    400: {"description": "Bad Request - invalid amount or inactive brand"},
    401: {"description": "Unauthorized - Missing or invalid caller signature"},
}


def _validation_error(serializer) -> Response:
    return Response(
        {"error": {"code": "VALIDATION_ERROR", "message": serializer.errors}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class IssueTokensView(APIView):
    """View for issuing points to a user."""

    @extend_schema(
        operation_id="issue_tokens",
        summary="Issue Tokens",
        description=(
            "Credit points of an active brand to a user. The request must be "
            "signed by the user via X-Caller-Id, X-Caller-Timestamp and "
            "X-Caller-Signature headers."
        ),
        tags=["Exchange API"],
        request=IssueTokensRequestSerializer,
        responses={200: BalanceSerializer, **_SIGNED_CALLER_RESPONSES},
    )
    def post(self, request: Request) -> Response:
        """Issue points to a user."""
        return async_to_sync(self._handle_issue_tokens)(request)

    async def _handle_issue_tokens(self, request: Request) -> Response:
        """Async handler for issue tokens."""
        with tracer.start_as_current_span("issue_tokens") as span:
            span.set_attribute("operation", "issue_tokens")

            serializer = IssueTokensRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return _validation_error(serializer)

            data = serializer.validated_data
            span.set_attribute("brand.id", data["brand_id"])

            handler = IssueTokensHandler(
                store=_store,
                brand_repository=_brand_repo,
                balance_ledger=_balance_ledger,
                authenticator=_authenticator,
                retention=RetentionExtender(_store, retention_policy_from_settings()),
            )
            result = await handler.handle(
                IssueTokensCommand(
                    user=data["user"],
                    brand_id=data["brand_id"],
                    amount=data["amount"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(BalanceSerializer(result).data, status=status.HTTP_200_OK)


class ExchangeTokensView(APIView):
    """View for exchanging points between brands."""

    @extend_schema(
        operation_id="exchange_tokens",
        summary="Exchange Tokens",
        description=(
            "Move points 1:1 from one active brand to another for the signed "
            "caller. The debit and the credit commit together or not at all."
        ),
        tags=["Exchange API"],
        request=ExchangeTokensRequestSerializer,
        responses={
            200: ExchangeResultSerializer,
            **_SIGNED_CALLER_RESPONSES,
            409: {"description": "Conflict - Insufficient balance"},
        },
    )
    def post(self, request: Request) -> Response:
        """Exchange points between brands."""
        return async_to_sync(self._handle_exchange_tokens)(request)

    async def _handle_exchange_tokens(self, request: Request) -> Response:
        """Async handler for exchange tokens."""
        with tracer.start_as_current_span("exchange_tokens") as span:
            span.set_attribute("operation", "exchange_tokens")

            serializer = ExchangeTokensRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return _validation_error(serializer)

            data = serializer.validated_data
            span.set_attribute("exchange.from_brand", data["from_brand"])
            span.set_attribute("exchange.to_brand", data["to_brand"])

            handler = ExchangeTokensHandler(
                store=_store,
                brand_repository=_brand_repo,
                balance_ledger=_balance_ledger,
                authenticator=_authenticator,
                retention=RetentionExtender(_store, retention_policy_from_settings()),
            )
            result = await handler.handle(
                ExchangeTokensCommand(
                    user=data["user"],
                    from_brand=data["from_brand"],
                    to_brand=data["to_brand"],
                    amount=data["amount"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(ExchangeResultSerializer(result).data, status=status.HTTP_200_OK)


class UserBalanceView(APIView):
    """View for a user's balance at one brand."""

    @extend_schema(
        operation_id="view_user_balance",
        summary="View User Balance",
        description="Return the user's balance at the brand; 0 if never credited.",
        tags=["Exchange API"],
        parameters=[
            OpenApiParameter(
                name="user",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="User identity",
            ),
        ],
        responses={200: BalanceSerializer, 400: {"description": "Bad Request"}},
    )
    def get(self, request: Request, brand_id: int) -> Response:
        """View a balance."""
        return async_to_sync(self._handle_view_user_balance)(request, brand_id)

    async def _handle_view_user_balance(self, request: Request, brand_id: int) -> Response:
        with tracer.start_as_current_span("view_user_balance") as span:
            span.set_attribute("brand.id", brand_id)

            serializer = BalanceQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return _validation_error(serializer)

            result = await ViewUserBalanceHandler(balance_ledger=_balance_ledger).handle(
                ViewUserBalanceQuery(user=serializer.validated_data["user"], brand_id=brand_id)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(BalanceSerializer(result).data, status=status.HTTP_200_OK)
