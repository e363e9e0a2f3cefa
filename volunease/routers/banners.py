from fastapi import APIRouter, Depends
from pymongo.database import Database

from ..db import BANNER_IMAGES, get_database
from ..utils import serialize_docs

router = APIRouter(prefix="/api", tags=["banners"])


@router.get("/banner-images")
def banner_images(db: Database = Depends(get_database)):
    return serialize_docs(db[BANNER_IMAGES].find())
