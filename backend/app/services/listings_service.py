from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from ..models import Listing
from .publishing import PublishableService


class ListingsService(PublishableService[Listing]):
    model = Listing
    label = "Listing"
    required_fields = frozenset({"title", "slug", "status"})

    def list_by_status(self, status: Optional[str], *, published_only: bool = True) -> List[Listing]:
        stmt = select(Listing)
        if published_only:
            stmt = stmt.where(Listing.is_published.is_(True))
        if status:
            stmt = stmt.where(Listing.status == status)
        stmt = stmt.order_by(Listing.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())
