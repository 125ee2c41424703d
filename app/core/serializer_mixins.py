"""
Serializer mixins providing reusable functionality for DRF serializers.

Available Mixins:
    StrictFieldsMixin: Reject request bodies carrying undeclared keys

Usage:
    from core.serializer_mixins import StrictFieldsMixin

    class RenameChatSerializer(StrictFieldsMixin, serializers.Serializer):
        chatId = serializers.IntegerField(source="chat_id")
        newTitle = serializers.CharField(source="new_title")

Note:
    - These are generic infrastructure patterns, not domain-specific
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import serializers

if TYPE_CHECKING:
    from typing import Any


class StrictFieldsMixin:
    """
    Fail validation when the payload contains keys the serializer does not declare.

    DRF silently drops unknown keys by default. Request schemas in this
    project are closed, so a typo in a field name is reported to the caller
    instead of being ignored.
    """

    unknown_field_message = "Unknown field."

    def to_internal_value(self, data: Any) -> Any:
        if hasattr(data, "keys"):
            unknown = sorted(set(data.keys()) - set(self.fields.keys()))
            if unknown:
                raise serializers.ValidationError(
                    {key: [self.unknown_field_message] for key in unknown}
                )
        return super().to_internal_value(data)
