from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from statsapi.core import models, schemas


class StatisticsStore:
    """Persistence of statistics documents, keyed by path."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(
        self, statistics: schemas.StatisticsResponse
    ) -> schemas.StatisticsResponse:
        """
        Insert or overwrite the document stored under the same path.
        Sets last_modified to now (UTC).
        """
        last_modified = datetime.now(timezone.utc)

        row = models.Statistics(
            path=statistics.path,
            title=statistics.title,
            explanation=statistics.explanation,
            display_mode=statistics.display_mode.value,
            group_name=statistics.group_name,
            statistics=[
                group.model_dump(mode="json") for group in statistics.statistics
            ],
            last_modified=last_modified,
        )

        try:
            # merge = update when the path exists, insert otherwise (last write wins)
            await self.db.merge(row)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return statistics.model_copy(update={"last_modified": last_modified})

    async def find_by_path(self, path: str) -> Optional[schemas.StatisticsResponse]:
        row = await self.db.get(models.Statistics, path)
        if row is None:
            return None
        return schemas.StatisticsResponse.model_validate(row)

    async def list_by_term(self, term: Optional[str] = None) -> List[schemas.ControlItem]:
        """Entries whose title or group name contains the term (case insensitive)."""
        query = select(
            models.Statistics.title,
            models.Statistics.path,
            models.Statistics.group_name,
        )

        if term:
            pattern = f"%{term}%"
            query = query.where(
                or_(
                    models.Statistics.title.ilike(pattern),
                    models.Statistics.group_name.ilike(pattern),
                )
            )

        result = await self.db.execute(query)
        return [schemas.ControlItem.model_validate(row) for row in result.all()]

    async def delete_all(self) -> int:
        result = await self.db.execute(delete(models.Statistics))
        await self.db.commit()
        return result.rowcount
