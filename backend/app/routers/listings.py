from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..auth import get_current_user, require_editor
from ..db import get_db
from ..models import Profile
from ..schemas.listing import ListingCreate, ListingOut, ListingStatus, ListingUpdate
from ..schemas.settings import PublishIn
from ..services.listings_service import ListingsService


router = APIRouter(prefix="/api/listings", tags=["listings"])


@router.get("")
def list_listings(
    listing_status: Optional[ListingStatus] = Query(None, alias="status"),
    user: Profile | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    items = ListingsService(db).list_by_status(listing_status, published_only=user is None)
    return {"success": True, "listings": [ListingOut.model_validate(x) for x in items]}


@router.get("/slug/{slug}")
def get_listing_by_slug(slug: str, db: Session = Depends(get_db)):
    listing = ListingsService(db).get_by_slug(slug)
    return {"success": True, "listing": ListingOut.model_validate(listing)}


@router.get("/{listing_id}")
def get_listing(listing_id: UUID, user: Profile | None = Depends(get_current_user), db: Session = Depends(get_db)):
    listing = ListingsService(db).get(listing_id)
    if user is None and not listing.is_published:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return {"success": True, "listing": ListingOut.model_validate(listing)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_listing(payload: ListingCreate, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    listing = ListingsService(db).create(payload.model_dump())
    return {"success": True, "listing": ListingOut.model_validate(listing)}


@router.put("/{listing_id}")
def update_listing(
    listing_id: UUID,
    payload: ListingUpdate,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    listing = ListingsService(db).update(listing_id, payload.model_dump(exclude_unset=True))
    return {"success": True, "listing": ListingOut.model_validate(listing)}


@router.patch("/{listing_id}")
def set_listing_published(
    listing_id: UUID,
    payload: PublishIn,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    if not isinstance(payload.is_published, bool):
        raise HTTPException(status_code=400, detail="is_published must be provided as a boolean value")
    listing = ListingsService(db).set_published(listing_id, payload.is_published)
    return {"success": True, "listing": ListingOut.model_validate(listing)}


@router.delete("/{listing_id}")
def delete_listing(listing_id: UUID, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    ListingsService(db).delete(listing_id)
    return {"success": True, "message": "Listing deleted successfully"}
