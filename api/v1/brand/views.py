"""
Brand API views.

These endpoints are used to:
- Register brands
- Look up a brand by id
- Read the brand count and the brand list
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from opentelemetry.trace import Status, StatusCode
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brand.serializers import (
    BrandCountSerializer,
    BrandListSerializer,
    BrandSerializer,
    RegisterBrandRequestSerializer,
)
from brands.application.commands.register_brand import RegisterBrandCommand
from brands.application.handlers.brand_query_handlers import (
    GetBrandCountHandler,
    ListBrandsHandler,
    ViewBrandHandler,
)
from brands.application.handlers.register_brand_handler import RegisterBrandHandler
from brands.application.queries.brand_queries import (
    GetBrandCountQuery,
    ListBrandsQuery,
    ViewBrandQuery,
)
from brands.infrastructure.repositories.kv_brand_repository import KeyValueBrandRepository
from core.infrastructure.django_key_value_store import DjangoKeyValueStore
from core.infrastructure.retention import RetentionExtender, retention_policy_from_settings
from core.instrumentation import get_tracer

# Initialize repositories (in production, use DI container)
_store = DjangoKeyValueStore()
_brand_repo = KeyValueBrandRepository(_store)

tracer = get_tracer(__name__)


class BrandListCreateView(APIView):
    """View for listing and registering brands."""

    @extend_schema(
        operation_id="list_brands",
        summary="List Brands",
        description="List every registered brand in id order.",
        tags=["Brand API"],
        responses={200: BrandListSerializer},
    )
    def get(self, request: Request) -> Response:
        """List all brands."""
        return async_to_sync(self._handle_list_brands)(request)

    async def _handle_list_brands(self, request: Request) -> Response:
        with tracer.start_as_current_span("list_brands") as span:
            result = await ListBrandsHandler(brand_repository=_brand_repo).handle(
                ListBrandsQuery()
            )
            span.set_attribute("brands.count", result.count)
            span.set_status(Status(StatusCode.OK))
            return Response(BrandListSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="register_brand",
        summary="Register Brand",
        description=(
            "Register a new brand. The brand receives the next sequential id "
            "and is active immediately. Names are not required to be unique."
        ),
        tags=["Brand API"],
        request=RegisterBrandRequestSerializer,
        responses={
            201: BrandSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Register a brand."""
        return async_to_sync(self._handle_register_brand)(request)

    async def _handle_register_brand(self, request: Request) -> Response:
        """Async handler for register brand."""
        with tracer.start_as_current_span("register_brand") as span:
            span.set_attribute("operation", "register_brand")

            serializer = RegisterBrandRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response(
                    {"error": {"code": "VALIDATION_ERROR", "message": serializer.errors}},
                    status=status.HTTP_400_BAD_REQUEST,
                )

            handler = RegisterBrandHandler(
                store=_store,
                brand_repository=_brand_repo,
                retention=RetentionExtender(_store, retention_policy_from_settings()),
            )
            result = await handler.handle(
                RegisterBrandCommand(brand_name=serializer.validated_data["brand_name"])
            )

            span.set_attribute("brand.id", result.brand_id)
            span.set_status(Status(StatusCode.OK))

            return Response(BrandSerializer(result).data, status=status.HTTP_201_CREATED)


class BrandCountView(APIView):
    """View for the number of registered brands."""

    @extend_schema(
        operation_id="get_brand_count",
        summary="Get Brand Count",
        description="Return the number of brands registered so far.",
        tags=["Brand API"],
        responses={200: BrandCountSerializer},
    )
    def get(self, request: Request) -> Response:
        """Get the brand count."""
        return async_to_sync(self._handle_get_brand_count)(request)

    async def _handle_get_brand_count(self, request: Request) -> Response:
        with tracer.start_as_current_span("get_brand_count") as span:
            result = await GetBrandCountHandler(brand_repository=_brand_repo).handle(
                GetBrandCountQuery()
            )
            span.set_status(Status(StatusCode.OK))
            return Response(BrandCountSerializer(result).data, status=status.HTTP_200_OK)


class BrandDetailView(APIView):
    """View for a single brand."""

    @extend_schema(
        operation_id="view_brand",
        summary="View Brand",
        description=(
            "Return the brand with the given id. Unknown ids return the "
            "not-found brand (id 0, name 'Not_Found', inactive) with status 200."
        ),
        tags=["Brand API"],
        responses={200: BrandSerializer},
    )
    def get(self, request: Request, brand_id: int) -> Response:
        """View a brand by id."""
        return async_to_sync(self._handle_view_brand)(request, brand_id)

    async def _handle_view_brand(self, request: Request, brand_id: int) -> Response:
        with tracer.start_as_current_span("view_brand") as span:
            span.set_attribute("brand.id", brand_id)
            result = await ViewBrandHandler(brand_repository=_brand_repo).handle(
                ViewBrandQuery(brand_id=brand_id)
            )
            span.set_attribute("brand.exists", result.is_active)
            span.set_status(Status(StatusCode.OK))
            return Response(BrandSerializer(result).data, status=status.HTTP_200_OK)
