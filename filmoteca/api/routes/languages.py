"""Language Routes — read-only listing of the languages movies can reference."""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteca.infrastructure.database import get_db, guard_store
from filmoteca.models.language import Language
from filmoteca.schemas.language import LanguageResponse

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[LanguageResponse])
async def list_languages(db: AsyncSession = Depends(get_db)):
    """All languages ordered by name."""
    async with guard_store(db, "list languages"):
        result = await db.execute(select(Language).order_by(Language.name.asc()))
        return list(result.scalars().all())
