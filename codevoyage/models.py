from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import Column, String, JSON, DateTime, Text
from sqlalchemy.sql import func
from codevoyage.database import Base
from typing import List, Optional
import uuid
from datetime import datetime, timezone

REQUIRED_FIELDS_MESSAGE = "Please fill out all required fields"
PROFILE_REQUIRED_FIELDS = ("goal", "language", "learning_style", "time_commitment")

# Pydantic models for request validation
class RoadmapRequest(BaseModel):
    name: str = ""
    goal: str
    language: str
    current_skill: int = Field(default=1, ge=1, le=5)
    learning_style: str
    time_commitment: str
    additional_info: str = ""

    @field_validator(*PROFILE_REQUIRED_FIELDS)
    @classmethod
    def required_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return value.strip()

class Resource(BaseModel):
    title: str
    url: str
    type: str
    description: str

class VideoSuggestion(BaseModel):
    title: str
    url: str
    thumbnail: str = ""
    duration: str = ""
    source: str = ""

class Exercise(BaseModel):
    title: str
    description: str
    difficulty: str

class MilestoneNote(BaseModel):
    id: str
    content: str
    created_at: str

class Milestone(BaseModel):
    title: str
    description: str
    skills: List[str]
    resources: List[Resource]
    video_suggestions: List[VideoSuggestion] = []
    exercises: List[Exercise]
    notes: List[MilestoneNote] = []
    estimated_time: str

class RoadmapData(BaseModel):
    title: str
    overview: str
    milestones: List[Milestone]

class SaveRoadmapRequest(BaseModel):
    title: str
    language: str
    topic: Optional[str] = None
    description: Optional[str] = None
    content: RoadmapData

class FlowchartRequest(BaseModel):
    language: str
    roadmap: RoadmapData

class NoteCreate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Note content cannot be empty")
        return value

# SQLAlchemy models for database
class Roadmap(Base):
    __tablename__ = "roadmaps"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    language = Column(String, nullable=False)
    topic = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    content = Column(JSON)  # Stores the entire roadmap JSON
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), server_default=func.now())

# Pydantic models for responses
class RoadmapSummary(BaseModel):
    id: str
    title: str
    language: str
    topic: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class RoadmapResponse(BaseModel):
    id: str
    title: str
    language: str
    topic: Optional[str] = None
    description: Optional[str] = None
    content: RoadmapData
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
