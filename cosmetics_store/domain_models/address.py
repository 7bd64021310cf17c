# ==============================================================================
# ADDRESS BOOK MODEL
# ==============================================================================
# One book per user; entries are stored as a JSON list and addressed by
# their position in it
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from cosmetics_store.domain_models.base import SQLBase, SoftDeleteMixin, TimestampMixin


class AddressBook(SQLBase, TimestampMixin, SoftDeleteMixin):
    """``addresses`` holds ``{name, phone, address_detail, is_default}`` entries."""

    __tablename__ = "addresses"

    user_id: Mapped[str] = mapped_column(
        String(64),
        index=True,
        nullable=False,
    )
    addresses: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
