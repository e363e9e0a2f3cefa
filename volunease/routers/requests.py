from fastapi import APIRouter, Depends, status

from ..dependencies import get_coordinator, get_request_store
from ..schemas import RequestCheck, VolunteerRequestCreate
from ..services.auth_service import get_current_user
from ..services.lifecycle import LifecycleCoordinator
from ..services.stores import RequestStore
from ..utils import serialize_docs

router = APIRouter(prefix="/api", tags=["requests"])


@router.post("/request-to-volunteer", status_code=status.HTTP_201_CREATED)
def request_to_volunteer(
    data: VolunteerRequestCreate,
    user=Depends(get_current_user),
    coordinator: LifecycleCoordinator = Depends(get_coordinator),
):
    request_id = coordinator.create_request(user, data.model_dump())
    return {"message": "Volunteer request submitted successfully", "insertedId": request_id}


@router.post("/request-check")
def request_check(
    data: RequestCheck,
    user=Depends(get_current_user),
    coordinator: LifecycleCoordinator = Depends(get_coordinator),
):
    return {"success": coordinator.check_existing_request(data.postId, data.volunteerId)}


@router.delete("/delete-request/{request_id}")
def delete_request(
    request_id: str,
    user=Depends(get_current_user),
    coordinator: LifecycleCoordinator = Depends(get_coordinator),
):
    return coordinator.cancel_request(user, request_id)


@router.get("/volunteer-requests/{volunteer_id}")
def volunteer_requests(volunteer_id: str, requests: RequestStore = Depends(get_request_store)):
    return serialize_docs(requests.by_volunteer(volunteer_id))
