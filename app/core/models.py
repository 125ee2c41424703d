"""
Abstract base model shared by the domain apps.

Base Classes:
    BaseModel: created_at / updated_at timestamps and touch()

Usage:
    from core.models import BaseModel

    class Chat(BaseModel):
        title = models.CharField(max_length=255)

    chat.touch()  # move chat to the top of updated_at orderings
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """
    Abstract model with creation and modification timestamps.

    Fields:
        created_at: Set once on insert; indexed for time-ordered listings
        updated_at: Set on every save, including update_fields saves that
            name it

    Ties on either timestamp are broken by primary key in every ordering
    built on them.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When the record was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the record was last modified",
    )

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self.pk})"

    def touch(self) -> None:
        """Bump updated_at without writing any other column."""
        self.save(update_fields=["updated_at"])
