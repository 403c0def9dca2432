from codevoyage.utils import milestone_templates as templates
from codevoyage.utils.form_options import is_beginner
from codevoyage.models import Roadmap, RoadmapRequest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv
from datetime import datetime, timezone
import os
import copy
import uuid
import logging
import asyncio

load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(os.getenv("LOG_FILE", "codevoyage.log")),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

MIN_MILESTONES = 4

def generation_delay() -> float:
    """Seconds to wait before returning a generated roadmap."""
    return float(os.getenv("GENERATION_DELAY_SECONDS", "3"))

async def generate_roadmap(form: RoadmapRequest) -> Dict[str, Any]:
    """Build the roadmap for a learner profile.

    Content comes from the static catalogue, so the same profile always yields
    the same roadmap. The delay stands in for a call to a generation backend.
    """
    logger.info(f"Generating roadmap for: {form.language}, skill {form.current_skill}, "
                f"{form.learning_style}, {form.time_commitment}")

    delay = generation_delay()
    if delay > 0:
        await asyncio.sleep(delay)

    roadmap = {
        "title": f"{form.language} Learning Roadmap",
        "overview": generate_overview(form),
        "milestones": generate_milestones(form.language, form.current_skill),
    }

    logger.info(f"Roadmap generation complete with {len(roadmap['milestones'])} milestones")
    return roadmap

def generate_overview(form: RoadmapRequest) -> str:
    beginner = is_beginner(form.current_skill)

    if form.language == "JavaScript":
        return templates.javascript_overview(form.goal, form.learning_style, beginner)
    elif form.language == "Python":
        return templates.python_overview(form.goal, form.learning_style, beginner)
    return templates.generic_overview(form.language, form.goal, form.learning_style, beginner)

def generate_milestones(language: str, current_skill: int) -> List[Dict[str, Any]]:
    beginner = is_beginner(current_skill)

    if language == "JavaScript":
        if beginner:
            milestones = templates.javascript_beginner_milestones()
        else:
            milestones = templates.javascript_advanced_milestones()
    elif language == "Python":
        milestones = templates.python_beginner_milestones() if beginner else []
    else:
        milestones = templates.generic_beginner_milestones(language) if beginner else []

    # Pad short tracks so every roadmap has at least MIN_MILESTONES stages
    while len(milestones) < MIN_MILESTONES:
        milestones.append(templates.advanced_topic_milestone(language, len(milestones) + 1))

    return milestones

def build_greeting(name: str, language: str) -> str:
    name = (name or "").strip()
    prefix = f"{name}, here's" if name else "Here's"
    return f"{prefix} your customized path to mastering {language}"

# Save roadmap to database
async def save_roadmap(db: Session, user_id: str, title: str, language: str,
                       content: dict, topic: Optional[str] = None,
                       description: Optional[str] = None) -> Optional[str]:
    if not user_id:
        logger.error("Error saving roadmap: User is not authenticated")
        return None

    try:
        db_roadmap = Roadmap(
            user_id=user_id,
            title=title,
            language=language,
            topic=topic,
            description=description,
            content=content
        )

        db.add(db_roadmap)
        db.commit()
        db.refresh(db_roadmap)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving roadmap: {str(e)}")
        return None

    logger.info(f"Saved roadmap to database: {db_roadmap.id}")
    return db_roadmap.id

# Get user roadmaps, newest first
async def get_user_roadmaps(db: Session, user_id: str) -> List[Roadmap]:
    try:
        return (
            db.query(Roadmap)
            .filter(Roadmap.user_id == user_id)
            .order_by(Roadmap.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching roadmaps: {str(e)}")
        return []

async def get_roadmap_by_id(db: Session, roadmap_id: str, user_id: str) -> Optional[Roadmap]:
    try:
        roadmap = db.query(Roadmap).filter(
            Roadmap.id == roadmap_id,
            Roadmap.user_id == user_id
        ).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching roadmap: {str(e)}")
        return None

    if not roadmap:
        logger.warning(f"Roadmap {roadmap_id} not found or doesn't belong to user {user_id}")
    return roadmap

async def delete_roadmap(db: Session, roadmap_id: str, user_id: str) -> bool:
    try:
        deleted = db.query(Roadmap).filter(
            Roadmap.id == roadmap_id,
            Roadmap.user_id == user_id
        ).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting roadmap: {str(e)}")
        return False

    if deleted:
        logger.info(f"Deleted roadmap {roadmap_id}")
    return deleted > 0

async def add_milestone_note(db: Session, roadmap_id: str, user_id: str,
                             milestone_index: int, content: str) -> Optional[Dict[str, str]]:
    roadmap = await get_roadmap_by_id(db, roadmap_id, user_id)
    if not roadmap:
        return None

    # JSON columns don't track in-place edits, so write back a modified copy
    updated = copy.deepcopy(roadmap.content or {})
    milestones = updated.get("milestones", [])
    if milestone_index < 0 or milestone_index >= len(milestones):
        logger.warning(f"Milestone {milestone_index} out of range for roadmap {roadmap_id}")
        return None

    note = {
        "id": str(uuid.uuid4()),
        "content": content,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    milestones[milestone_index].setdefault("notes", []).append(note)

    try:
        roadmap.content = updated
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving milestone note: {str(e)}")
        return None

    logger.info(f"Added note {note['id']} to milestone {milestone_index} of roadmap {roadmap_id}")
    return note
