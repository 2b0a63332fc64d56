"""
Showcase runner: structure the database, truncate it, load the sample data
and print the ten query results.

Each stage reports its own failure and the run carries on with the next one.
"""
import logging
from typing import Iterable, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from evenue.services.party_queries import PartyQueryService, format_result
from evenue.services.sample_loader import SampleDataLoader
from evenue.services.schema_manager import SchemaManager


STAGES = ("structure", "truncate", "seed", "query")


def error_message(error: Exception) -> str:
    """The driver's message when there is one, without SQLAlchemy's decoration."""
    original = getattr(error, "orig", None)
    return str(original if original is not None else error).strip()


class ShowcaseRunner:
    """Runs the showcase stages in order."""

    def __init__(self, engine: Engine, session_factory: sessionmaker, year: Optional[int] = None):
        self.engine = engine
        self.session_factory = session_factory
        self.year = year
        self.schema = SchemaManager(engine)
        self.logger = logging.getLogger(self.__class__.__name__)

    def structure(self):
        self.schema.structure_database()

    def truncate(self):
        self.schema.truncate_tables()

    def seed(self):
        db = self.session_factory()
        try:
            SampleDataLoader(db, self.year).load_all()
        finally:
            db.close()

    def query(self, numbers: Optional[Sequence[int]] = None):
        db = self.session_factory()
        try:
            service = PartyQueryService(db)
            for result in service.run_all(numbers, year=self.year):
                print(format_result(result))
        finally:
            db.close()

    def run(self, stages: Iterable[str] = STAGES, numbers: Optional[Sequence[int]] = None) -> bool:
        """Run ``stages`` in order; False if any of them failed."""
        succeeded = True
        for stage in stages:
            if stage not in STAGES:
                raise ValueError(f"Unknown stage: {stage}")
            self.logger.info(f"Running stage: {stage}")
            try:
                if stage == "query":
                    self.query(numbers)
                else:
                    getattr(self, stage)()
            except Exception as e:
                self.logger.error(f"Stage {stage} failed: {e}")
                print(f"Exception: {error_message(e)}")
                succeeded = False
        return succeeded


def create_showcase_runner(year: Optional[int] = None) -> ShowcaseRunner:
    """Factory function to create a runner on the configured database."""
    from evenue.database import SessionLocal, engine

    return ShowcaseRunner(engine, SessionLocal, year)
