import logging
from pathlib import Path
from typing import List, Optional

from statsapi.core import schemas
from statsapi.core.config import settings
from statsapi.core.exceptions import NotFoundError
from statsapi.core.stats import batch, listing
from statsapi.core.stats.assembler import assemble
from statsapi.core.stats.executor import QueryExecutor
from statsapi.core.stats.paths import finalize
from statsapi.core.stats.store import StatisticsStore


# -----------------------------------------------------------------------------
# SERVICE MODULE - Orchestration
# Purpose: query → shape → finalize → save, plus reading, listing and batch generation
# Collaborators (executor, store) are passed in, nothing is looked up globally
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)


class StatisticsService:
    def __init__(
        self,
        executor: QueryExecutor,
        store: StatisticsStore,
        request_dir: Optional[Path] = None,
    ):
        self.executor = executor
        self.store = store
        self.request_dir = request_dir or settings.STATISTICS_REQUEST_DIR

    async def sql_to_statistics(
        self, request: schemas.StatisticsRequest
    ) -> schemas.StatisticsResponse:
        """Execute the queries of a request and save the resulting document."""
        logger.info(f"SQL to statistics for '{request.title}'")

        document = await assemble(request, self.executor)
        return await self.create(document)

    async def create(
        self, document: schemas.StatisticsDocument
    ) -> schemas.StatisticsResponse:
        """Finalize (path, display mode, encoded SQL) and save a document."""
        logger.info(f"Create statistics '{document.title}'")

        statistics = finalize(document)
        saved = await self.store.save(statistics)

        logger.info(f"Saved statistics at path '{saved.path}'")
        return saved

    async def get_statistic(self, path: str) -> schemas.StatisticsResponse:
        statistics = await self.store.find_by_path(path)
        if statistics is None:
            raise NotFoundError(f"Statistic {path} does not exists")
        return statistics

    async def list(self, term: Optional[str] = None) -> schemas.StatisticsList:
        entries = await self.store.list_by_term(term)
        return schemas.StatisticsList(list=listing.group(entries))

    async def generate_all_from_sql(self) -> List[schemas.StatisticsResponse]:
        logger.info("Generate all statistics")

        generated = await self._generate(batch.list_request_files(self.request_dir))

        logger.info(f"Generated {len(generated)} statistics")
        return generated

    async def generate_from_sql(self, filename: str) -> schemas.StatisticsResponse:
        logger.info(f"Generate statistics from the file {filename}")

        request_file = batch.find_request_file(self.request_dir, filename)
        generated = await self._generate([request_file])
        return generated[0]

    async def delete_all(self) -> int:
        logger.info("Delete all statistics")

        deleted = await self.store.delete_all()

        logger.info(f"Deleted {deleted} statistics")
        return deleted

    async def _generate(
        self, request_files: List[Path]
    ) -> List[schemas.StatisticsResponse]:
        # Stops at the first failing file, the ones before it stay saved
        generated = []
        for request_file in request_files:
            logger.info(f"Statistic {request_file.name}")
            request = batch.load_request(request_file)
            generated.append(await self.sql_to_statistics(request))
        return generated
