"""
Serializers for Exchange API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import MAX_IDENTITY_LENGTH, UserIdentity
from ledger.domain.balance import BALANCE_MAX, BALANCE_MIN


def _validate_identity(value: str) -> str:
    try:
        UserIdentity(value)
    except ValueError as e:
        raise serializers.ValidationError(str(e)) from e
    return value


class UserField(serializers.CharField):
    """User identity field."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", MAX_IDENTITY_LENGTH)
        kwargs.setdefault("trim_whitespace", False)
        kwargs.setdefault("validators", [_validate_identity])
        super().__init__(**kwargs)


class BrandIdField(serializers.IntegerField):
    """Brand id field; 0 is accepted and resolves to no brand."""

    def __init__(self, **kwargs):
        kwargs.setdefault("min_value", 0)
        kwargs.setdefault("max_value", BALANCE_MAX)
        super().__init__(**kwargs)


class AmountField(serializers.IntegerField):
    """
    Point amount field.

    Only the integer range is checked here; non-positive amounts are
    rejected by the exchange engine as INVALID_AMOUNT.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("min_value", BALANCE_MIN)
        kwargs.setdefault("max_value", BALANCE_MAX)
        super().__init__(**kwargs)


class IssueTokensRequestSerializer(serializers.Serializer):
    """Serializer for issue tokens request."""

    user = UserField()
    brand_id = BrandIdField()
    amount = AmountField()


class ExchangeTokensRequestSerializer(serializers.Serializer):
    """Serializer for exchange tokens request."""

    user = UserField()
    from_brand = BrandIdField()
    to_brand = BrandIdField()
    amount = AmountField()


class BalanceQuerySerializer(serializers.Serializer):
    """Serializer for balance query parameters."""

    user = UserField()


class BalanceSerializer(serializers.Serializer):
    """Serializer for BalanceDTO."""

    user = serializers.CharField()
    brand_id = serializers.IntegerField()
    balance = serializers.IntegerField()


class ExchangeResultSerializer(serializers.Serializer):
    """Serializer for ExchangeResultDTO."""

    user = serializers.CharField()
    from_brand = serializers.IntegerField()
    to_brand = serializers.IntegerField()
    amount = serializers.IntegerField()
    from_balance = serializers.IntegerField()
    to_balance = serializers.IntegerField()
