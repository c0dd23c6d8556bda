from fastapi import APIRouter

from app.config import HF_ACCESS_TOKEN
from app.models.health_models import HealthResponse

router = APIRouter()


@router.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check():
    """
    서버 상태와 추론 제공자 토큰 설정 여부를 반환합니다.
    토큰이 없으면 레시피 요청은 모두 500으로 실패합니다.
    """
    return HealthResponse(status="ok", provider_configured=bool(HF_ACCESS_TOKEN))
