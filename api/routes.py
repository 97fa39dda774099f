"""
REST API routes — profile, report generation and the protected app pages.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request

from api.dependencies import get_user_repository
from api.schemas import ProfileEditRequest, ReportRequest, ReportResponse
from auth.dependencies import get_current_user
from core.report_generator import ReportGenerator
from database.models import User
from database.users import UserRepository
from utils.errors import PersistenceError, UserNotFoundError, ValidationError
from utils.profile import project_profile, public_user

logger = logging.getLogger(__name__)

router = APIRouter()


def get_report_generator(request: Request) -> ReportGenerator:
    return request.app.state.report_generator


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


# ── Profile ────────────────────────────────────────────────────────────


@router.get("/profile")
async def get_profile(user: User = Depends(get_current_user)) -> Dict[str, Any]:
    return {"message": "Acesso permitido", **project_profile(user)}


@router.put("/profile/edit")
async def edit_profile(
    req: Optional[ProfileEditRequest] = Body(None),
    user: User = Depends(get_current_user),
    repo: UserRepository = Depends(get_user_repository),
) -> Dict[str, Any]:
    """Update name, phone and city/state. Email, password and tier are not editable here."""
    req = req or ProfileEditRequest()
    if req.missing_fields(*ProfileEditRequest.REQUIRED):
        raise ValidationError("Todos os campos são obrigatórios.")

    try:
        updated = await repo.update_profile(
            user.user_id,
            req.stripped(*ProfileEditRequest.REQUIRED),
        )
    except PersistenceError as exc:
        raise PersistenceError("Erro ao atualizar os dados do usuário.") from exc

    if updated is None:
        raise UserNotFoundError()

    logger.info("Profile updated for %s", user.user_id)
    return {"message": "Dados atualizados com sucesso.", "user": public_user(updated)}


# ── Protected pages ────────────────────────────────────────────────────


@router.get("/editor")
async def editor(user: User = Depends(get_current_user)) -> Dict[str, Any]:
    return {"message": "Acesso permitido", **project_profile(user)}


@router.get("/csvUploader")
async def csv_uploader(user: User = Depends(get_current_user)) -> Dict[str, Any]:
    return {"message": "Acesso ao CSV Uploader permitido", "userId": str(user.user_id)}


# ── Reports ────────────────────────────────────────────────────────────


@router.post("/generate-report", response_model=ReportResponse)
async def generate_report(
    req: Optional[ReportRequest] = Body(None),
    generator: ReportGenerator = Depends(get_report_generator),
) -> Dict[str, Any]:
    report = await generator.generate(req.prompt if req else None)
    return {"report": report}
