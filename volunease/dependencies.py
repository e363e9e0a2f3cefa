from fastapi import Depends
from pymongo.database import Database

from .db import get_database
from .services.lifecycle import LifecycleCoordinator
from .services.stores import PostStore, RequestStore


def get_post_store(db: Database = Depends(get_database)) -> PostStore:
    return PostStore.from_db(db)


def get_request_store(db: Database = Depends(get_database)) -> RequestStore:
    return RequestStore.from_db(db)


def get_coordinator(
    posts: PostStore = Depends(get_post_store),
    requests: RequestStore = Depends(get_request_store),
) -> LifecycleCoordinator:
    return LifecycleCoordinator(posts, requests)
