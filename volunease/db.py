from pymongo import MongoClient
from pymongo.database import Database

from .config import settings

client = MongoClient(settings.MONGO_URI)

db = client[settings.MONGO_DB_NAME]

POSTS = "posts"
REQUESTS = "requests"
USER_PREFERENCES = "userPreferences"
BANNER_IMAGES = "bannerImages"


def get_database() -> Database:
    """FastAPI dependency returning the shared database handle."""
    return db
