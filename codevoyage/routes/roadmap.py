from fastapi import APIRouter, HTTPException
from codevoyage.models import RoadmapRequest, FlowchartRequest
from codevoyage.services.roadmap_service import generate_roadmap, build_greeting
from codevoyage.services.flowchart_service import build_flowchart_svg, flowchart_response
from codevoyage.utils.form_options import form_options
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Roadmap Generator"])

GENERATION_FAILED = "There was an error generating your roadmap. Please try again."

@router.get("/options")
async def list_form_options():
    """Choices offered by the learner profile form"""
    return form_options()

# Generate a personalized learning roadmap
@router.post("/generate_roadmap")
async def create_roadmap(request: RoadmapRequest):
    logger.info(f"Received roadmap request: {request.language}, skill {request.current_skill}, "
                f"{request.learning_style}, {request.time_commitment}")

    try:
        roadmap = await generate_roadmap(request)
        flowchart = build_flowchart_svg(roadmap)
    except Exception as e:
        logger.error(f"Error generating roadmap: {str(e)}")
        raise HTTPException(status_code=500, detail=GENERATION_FAILED)

    return {
        "roadmap": roadmap,
        "flowchart_svg": flowchart,
        "greeting": build_greeting(request.name, request.language),
        "message": f"Your personalized {request.language} learning path is ready!"
    }

# Render an unsaved roadmap as a downloadable flowchart
@router.post("/flowchart")
async def download_flowchart(request: FlowchartRequest):
    return flowchart_response(build_flowchart_svg(request.roadmap), request.language)
