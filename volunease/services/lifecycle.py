"""Post/request lifecycle.

Keeps each post's ``volunNumber`` equal to its original capacity minus the
number of requests that reference it. Slots are taken and released with
single-document atomic updates; the only two-document path (take slot, then
insert request) releases the slot again if the insert fails.
"""

import logging
from typing import Any, Mapping

from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import CapacityExhausted, Conflict
from .auth_service import ensure_owner
from .stores import CAPACITY_FIELD, PostStore, RequestStore

logger = logging.getLogger(__name__)

OPEN = "open"
EXHAUSTED = "exhausted"

# capacity only moves through requests; edits cannot touch these
PROTECTED_POST_FIELDS = frozenset({"_id", "uid", CAPACITY_FIELD})


def post_state(post: Mapping[str, Any]) -> str:
    remaining = post.get(CAPACITY_FIELD) or 0
    return OPEN if remaining > 0 else EXHAUSTED


class LifecycleCoordinator:
    def __init__(self, posts: PostStore, requests: RequestStore):
        self.posts = posts
        self.requests = requests

    def create_request(self, caller: Mapping[str, Any], payload: Mapping[str, Any]) -> str:
        post_id = payload["postId"]
        volunteer_id = payload["volunteerId"]
        ensure_owner(caller, volunteer_id)

        post = self.posts.find_by_id(post_id)
        if self.requests.find_match(post_id, volunteer_id):
            raise Conflict("You already requested to volunteer for this post")
        if post_state(post) == EXHAUSTED or not self.posts.take_slot(post_id):
            raise CapacityExhausted()

        try:
            request_id = self.requests.insert(payload)
        except DuplicateKeyError:
            # lost the race against a concurrent identical request
            self.posts.release_slot(post_id)
            raise Conflict("You already requested to volunteer for this post")
        except PyMongoError:
            logger.warning("Insert failed, releasing slot on post %s", post_id)
            self.posts.release_slot(post_id)
            raise
        logger.info("Volunteer %s requested post %s (request %s)", volunteer_id, post_id, request_id)
        return request_id

    def check_existing_request(self, post_id: str, volunteer_id: str) -> bool:
        return self.requests.find_match(post_id, volunteer_id) is not None

    def cancel_request(self, caller: Mapping[str, Any], request_id: str) -> dict:
        request = self.requests.find_by_id(request_id)
        ensure_owner(caller, request.get("volunteerId"))

        result = self.requests.delete_by_id(request_id)
        restored = self.posts.release_slot(request["postId"])
        logger.info(
            "Request %s cancelled, slot %s on post %s",
            request_id,
            "restored" if restored else "not restored",
            request["postId"],
        )
        return {
            "acknowledged": result.acknowledged,
            "deletedCount": result.deleted_count,
            "capacityRestored": restored,
        }

    def delete_post(self, caller: Mapping[str, Any], post_id: str) -> dict:
        post = self.posts.find_by_id(post_id)
        ensure_owner(caller, post.get("uid"))

        result = self.posts.delete_by_id(post_id)
        removed = self.requests.delete_for_post(post_id)
        logger.info("Post %s deleted with %d request(s)", post_id, removed)
        return {
            "acknowledged": result.acknowledged,
            "deletedCount": result.deleted_count,
            "requestsDeleted": removed,
        }

    def update_post(self, caller: Mapping[str, Any], post_id: str, fields: Mapping[str, Any]) -> dict:
        post = self.posts.find_by_id(post_id)
        ensure_owner(caller, post.get("uid"))

        changes = {k: v for k, v in fields.items() if k not in PROTECTED_POST_FIELDS}
        if not changes:
            return {"acknowledged": True, "matchedCount": 1, "modifiedCount": 0}
        result = self.posts.update_by_id(post_id, changes)
        return {
            "acknowledged": result.acknowledged,
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
        }

