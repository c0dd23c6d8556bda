from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette.responses import FileResponse

from app.config import STATIC_DIR

router = APIRouter()


@router.get("/{full_path:path}", include_in_schema=False)
async def root(full_path: str):
    """
    프론트엔드 정적 파일을 제공하고, 없는 경로는 index.html로 넘깁니다.
    """
    static_dir = STATIC_DIR.resolve()

    if full_path:
        try:
            requested = (static_dir / full_path).resolve()
            if requested.is_relative_to(static_dir) and requested.is_file():
                return FileResponse(requested)
        except (OSError, ValueError):
            # 너무 긴 파일명, NUL 문자 등 파일시스템이 거부하는 경로
            pass

    index_file = static_dir / "index.html"
    if index_file.is_file():
        return FileResponse(index_file)
    return JSONResponse(status_code=404, content={"error": "Not found"})
