from fastapi import APIRouter, Depends, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_service, get_profile_repository
from config import settings
from models.requests import JobMatchRequest, QuickMatchRequest
from models.responses import JobMatchRecord, MatchResult
from models.schemas.resume_profile import ResumeProfile
from services import job_matcher
from services.match_service import MatchService
from services.match_store import InMemoryProfileRepository

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/match/quick", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match_quick(request: Request, body: QuickMatchRequest):
    return job_matcher.compute_match(body.resume_text, body.job_description)


@router.post("/profiles", response_model=ResumeProfile, status_code=status.HTTP_201_CREATED)
async def create_profile(
    profile: ResumeProfile,
    profiles: InMemoryProfileRepository = Depends(get_profile_repository),
):
    profiles.add(profile)
    return profile


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match_profile(
    request: Request,
    body: JobMatchRequest,
    service: MatchService = Depends(get_match_service),
):
    if service.find_profile(body.user_id, body.resume_id) is None:
        raise HTTPException(status_code=404, detail="Resume profile not found")

    result, error = service.analyze_job_match(body.user_id, body.resume_id, body.job_description)
    if error:
        raise HTTPException(status_code=400, detail=error)
    return result


@router.get("/matches/{user_id}", response_model=list[JobMatchRecord])
async def list_matches(user_id: str, service: MatchService = Depends(get_match_service)):
    matches, error = service.get_user_matches(user_id)
    if error:
        raise HTTPException(status_code=500, detail=error)
    return matches
