from fastapi import APIRouter, Depends
from pymongo.database import Database

from ..db import USER_PREFERENCES, get_database
from ..schemas import UserPreferenceIn
from ..services.auth_service import ensure_owner, get_current_user

router = APIRouter(prefix="/api/user-preference", tags=["preferences"])

DEFAULT_THEME = "dark"


@router.post("")
def upsert_preference(
    data: UserPreferenceIn,
    user=Depends(get_current_user),
    db: Database = Depends(get_database),
):
    ensure_owner(user, data.uid)
    fields = data.model_dump(exclude_none=True)
    result = db[USER_PREFERENCES].update_one(
        {"_id": data.uid},
        {"$set": fields},
        upsert=True,
    )
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": result.upserted_id,
    }


@router.get("/{uid}")
def get_preference(uid: str, db: Database = Depends(get_database)):
    col = db[USER_PREFERENCES]
    pref = col.find_one({"_id": uid})
    if not pref:
        # a concurrent first read may have seeded it already
        col.update_one(
            {"_id": uid},
            {"$setOnInsert": {"uid": uid, "theme": DEFAULT_THEME}},
            upsert=True,
        )
        pref = col.find_one({"_id": uid})
    return pref
