"""Profile routes: read and multipart update with optional photo."""
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from gamerverse.core.config import Settings
from gamerverse.db.session import get_db
from gamerverse.routers.deps import get_app_settings, require_user_id
from gamerverse.schemas.profile import ProfileOutSchema, ProfileSchema
from gamerverse.services.profile import get_profile, update_profile
from gamerverse.services.uploads import discard_upload, store_upload

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=ProfileOutSchema)
def read_profile(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    user = get_profile(db, user_id)
    return ProfileOutSchema(profile=ProfileSchema.model_validate(user))


@router.post("/update")
def update_profile_route(
    user_id: Annotated[int, Depends(require_user_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    bio: Annotated[str | None, Form()] = None,
    photo: Annotated[UploadFile | None, File()] = None,
):
    """Update name/email/bio; a new photo replaces the old one, no photo keeps it."""
    photo_ref = store_upload(settings.resolved_upload_dir, photo)
    try:
        update_profile(db, user_id, name=name, email=email, bio=bio, photo=photo_ref)
    except Exception:
        # nothing references the new file if the update did not land
        discard_upload(settings.resolved_upload_dir, photo_ref)
        raise
    return {"ok": True}
