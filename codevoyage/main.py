from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from codevoyage.routes.roadmap import router as roadmap_router
from codevoyage.routes.user import router as user_router
from codevoyage.database import engine, Base
from codevoyage.models import REQUIRED_FIELDS_MESSAGE, PROFILE_REQUIRED_FIELDS
from dotenv import load_dotenv
import logging
load_dotenv()

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="CodeVoyage AI Roadmap Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _missing_profile_field(request: Request, errors) -> bool:
    if not request.url.path.endswith("/generate_roadmap"):
        return False
    return any(
        len(error.get("loc", ())) == 2 and error["loc"][1] in PROFILE_REQUIRED_FIELDS
        for error in errors
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"Rejected invalid request to {request.url.path}: {errors}")

    # Blank or absent profile fields get the form's message; everything else keeps pydantic's
    if _missing_profile_field(request, errors):
        return JSONResponse(status_code=422, content={"detail": REQUIRED_FIELDS_MESSAGE, "errors": errors})
    return JSONResponse(status_code=422, content={"detail": errors})

# Include routers
app.include_router(roadmap_router, prefix="/api")
app.include_router(user_router, prefix="/api/user")

@app.get("/")
async def root():
    return {"message": "Welcome to CodeVoyage AI - Your personalized learning roadmap generator"}
