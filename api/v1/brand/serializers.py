"""
Serializers for Brand API endpoints.
"""

from rest_framework import serializers

MAX_BRAND_NAME_LENGTH = 255


class RegisterBrandRequestSerializer(serializers.Serializer):
    """Serializer for register brand request."""

    # Names are stored verbatim: blank is allowed and nothing is trimmed.
    brand_name = serializers.CharField(
        required=True,
        allow_blank=True,
        trim_whitespace=False,
        max_length=MAX_BRAND_NAME_LENGTH,
    )


class BrandSerializer(serializers.Serializer):
    """Serializer for BrandDTO."""

    brand_id = serializers.IntegerField()
    brand_name = serializers.CharField()
    is_active = serializers.BooleanField()


class BrandCountSerializer(serializers.Serializer):
    """Serializer for BrandCountDTO."""

    brand_count = serializers.IntegerField()


class BrandListSerializer(serializers.Serializer):
    """Serializer for BrandListDTO."""

    count = serializers.IntegerField()
    brands = BrandSerializer(many=True)
