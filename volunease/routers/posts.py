from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_coordinator, get_post_store
from ..schemas import PostCreate, PostUpdate
from ..services.auth_service import ensure_owner, get_current_user
from ..services.lifecycle import LifecycleCoordinator
from ..services.stores import PostStore
from ..utils import serialize_doc, serialize_docs

router = APIRouter(prefix="/api", tags=["posts"])

LATEST_POSTS = 6


@router.post("/add-post", status_code=status.HTTP_201_CREATED)
def add_post(
    data: PostCreate,
    user=Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
):
    ensure_owner(user, data.uid)
    post_id = posts.insert(data.model_dump())
    return {"message": "Volunteer Post added successfully", "insertedId": post_id}


@router.get("/posts")
def latest_posts(posts: PostStore = Depends(get_post_store)):
    return serialize_docs(posts.latest(LATEST_POSTS))


@router.get("/pagination-posts")
def paginated_posts(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    posts: PostStore = Depends(get_post_store),
):
    return serialize_docs(posts.page(page, size))


@router.get("/post-number")
def post_number(posts: PostStore = Depends(get_post_store)):
    return {"response": posts.count()}


@router.get("/post/{post_id}")
def get_post(post_id: str, posts: PostStore = Depends(get_post_store)):
    return serialize_doc(posts.find_by_id(post_id))


@router.patch("/post/{post_id}")
def update_post(
    post_id: str,
    data: PostUpdate,
    user=Depends(get_current_user),
    coordinator: LifecycleCoordinator = Depends(get_coordinator),
):
    return coordinator.update_post(user, post_id, data.model_dump())


@router.delete("/post/{post_id}")
def delete_post(
    post_id: str,
    user=Depends(get_current_user),
    coordinator: LifecycleCoordinator = Depends(get_coordinator),
):
    return coordinator.delete_post(user, post_id)


@router.get("/organizer-posts/{uid}")
def organizer_posts(uid: str, posts: PostStore = Depends(get_post_store)):
    return serialize_docs(posts.by_owner(uid))
