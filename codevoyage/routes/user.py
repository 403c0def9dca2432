from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from codevoyage.database import get_db
from codevoyage.models import SaveRoadmapRequest, NoteCreate, RoadmapResponse, RoadmapSummary
from codevoyage.services.auth_service import get_current_user
from codevoyage.services.flowchart_service import build_flowchart_svg, flowchart_response
from codevoyage.services.roadmap_service import (
    save_roadmap, get_user_roadmaps, get_roadmap_by_id, delete_roadmap, add_milestone_note
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User Dashboard"])

ROADMAP_NOT_FOUND = "Roadmap not found"

async def _load_roadmap(db: Session, roadmap_id: str, user_id: str):
    roadmap = await get_roadmap_by_id(db, roadmap_id, user_id)
    if not roadmap:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ROADMAP_NOT_FOUND
        )
    return roadmap

@router.post("/roadmaps", status_code=status.HTTP_201_CREATED)
async def create_user_roadmap(
    request: SaveRoadmapRequest,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Save a generated roadmap to the current user's account"""
    roadmap_id = await save_roadmap(
        db,
        current_user,
        request.title,
        request.language,
        request.content.model_dump(),
        topic=request.topic,
        description=request.description
    )

    if not roadmap_id:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="There was an error saving your roadmap"
        )

    return {
        "roadmap_id": roadmap_id,
        "message": "Your roadmap has been saved to your account"
    }

@router.get("/roadmaps")
async def list_user_roadmaps(
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all roadmaps for the current user, newest first"""
    roadmaps = await get_user_roadmaps(db, current_user)
    return {
        "roadmaps": [RoadmapSummary.model_validate(roadmap) for roadmap in roadmaps]
    }

@router.get("/roadmaps/{roadmap_id}", response_model=RoadmapResponse)
async def get_roadmap_details(
    roadmap_id: str,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return await _load_roadmap(db, roadmap_id, current_user)

@router.get("/roadmaps/{roadmap_id}/flowchart")
async def download_saved_flowchart(
    roadmap_id: str,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    roadmap = await _load_roadmap(db, roadmap_id, current_user)
    return flowchart_response(build_flowchart_svg(roadmap.content), roadmap.language)

@router.delete("/roadmaps/{roadmap_id}")
async def remove_user_roadmap(
    roadmap_id: str,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if not await delete_roadmap(db, roadmap_id, current_user):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ROADMAP_NOT_FOUND
        )

    return {"message": "The roadmap has been removed from your account"}

@router.post("/roadmaps/{roadmap_id}/milestones/{milestone_index}/notes",
             status_code=status.HTTP_201_CREATED)
async def create_milestone_note(
    roadmap_id: str,
    milestone_index: int,
    note: NoteCreate,
    current_user: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Attach a personal note to one milestone of a saved roadmap"""
    result = await add_milestone_note(db, roadmap_id, current_user, milestone_index, note.content)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Roadmap or milestone not found"
        )

    return result
