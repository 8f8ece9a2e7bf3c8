# External package imports
from fastapi import APIRouter, Depends, HTTPException, Response, status

# Local application imports
from ...application.dto.auth_dto import AuthenticatedUser
from ...application.dto.photo_dto import FacesResponse, LatestPhotoResponse
from ...application.use_cases.photo.errors import FaceDataPendingError, PhotoNotFoundError
from ...application.use_cases.photo.get_faces import GetFacesUseCase
from ...application.use_cases.photo.get_latest_photo import GetLatestPhotoUseCase
from ...application.use_cases.photo.get_photo import GetPhotoUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["photos"])


@router.get("/latest-photo", response_model=LatestPhotoResponse)
async def get_latest_photo(
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> LatestPhotoResponse:
    """
    Describe the current user's newest photo

    The webview polls this endpoint and loads the photo when the
    request ID changes.

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        LatestPhotoResponse with requestId and timestamp (epoch ms)
    """
    container = get_container()
    get_latest_photo_use_case = container.get(GetLatestPhotoUseCase)

    try:
        return await get_latest_photo_use_case.execute(user_id=current_user.id)
    except PhotoNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.get("/photo/{request_id}")
async def get_photo(
    request_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> Response:
    """
    Get the raw bytes of the current user's photo

    Args:
        request_id: Photo request ID; must be the user's current photo
        current_user: Current authenticated user (from dependency)

    Returns:
        Image bytes with the photo's content type, never cached by the browser
    """
    container = get_container()
    get_photo_use_case = container.get(GetPhotoUseCase)

    try:
        capture = await get_photo_use_case.execute(
            user_id=current_user.id,
            request_id=request_id,
        )
    except PhotoNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )

    return Response(
        content=capture.buffer,
        media_type=capture.mime_type,
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/faces/{request_id}", response_model=FacesResponse)
async def get_faces(
    request_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
) -> FacesResponse:
    """
    Get face detection results for the current user's photo

    Both "not your current photo" and "still processing" answer 404; only
    the detail text tells them apart. Clients keep retrying either way.

    Args:
        request_id: Photo request ID
        current_user: Current authenticated user (from dependency)

    Returns:
        FacesResponse with faces, count and requestId
    """
    container = get_container()
    get_faces_use_case = container.get(GetFacesUseCase)

    try:
        return await get_faces_use_case.execute(
            user_id=current_user.id,
            request_id=request_id,
        )
    except (PhotoNotFoundError, FaceDataPendingError) as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
