from fastapi import APIRouter

from infinite_wiki.config import APP_NAME

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok", "app": APP_NAME}
