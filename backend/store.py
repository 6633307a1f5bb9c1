from typing import Callable, List, Optional
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine, select

from config import logger
from errors import StorageError
from models import Goal


def create_database_engine(database_url: str):
    """Create an engine for the given URL. SQLite connections are shared across request threads."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url)
    if url.database in (None, "", ":memory:"):
        # One connection, otherwise every thread sees its own empty in-memory database
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    return create_engine(url, connect_args={"check_same_thread": False})


class GoalStore:
    """
    Persistence for goal records.

    Each call opens its own session, so a store can be shared by concurrent
    requests. Ids are uuid-based and insertion order comes from the
    autoincrement `seq` column.
    """

    def __init__(self, engine):
        self.engine = engine

    def create_tables(self) -> None:
        logger.info("Creating database and tables...")
        try:
            SQLModel.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Error creating database and tables: {e}")
            raise StorageError("Could not create database tables") from e
        logger.info("Database and tables created successfully")

    def insert(self, goal: Goal) -> Goal:
        try:
            with Session(self.engine) as session:
                session.add(goal)
                session.commit()
                session.refresh(goal)
                return goal
        except SQLAlchemyError as e:
            logger.error(f"Error inserting goal: {e}")
            raise StorageError("Could not store goal") from e

    def list(self) -> List[Goal]:
        return self._select(select(Goal))

    def find_matching(self, predicate: Callable[[Goal], bool]) -> List[Goal]:
        """Goals for which `predicate` holds, in insertion order."""
        return [goal for goal in self.list() if predicate(goal)]

    def get(self, goal_id: str) -> Optional[Goal]:
        try:
            with Session(self.engine) as session:
                return session.exec(select(Goal).where(Goal.id == goal_id)).first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading goal {goal_id}: {e}")
            raise StorageError("Could not read goal") from e

    def ping(self) -> None:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Database ping failed: {e}")
            raise StorageError("Database connection failed") from e

    def dispose(self) -> None:
        self.engine.dispose()

    def _select(self, query) -> List[Goal]:
        try:
            with Session(self.engine) as session:
                return list(session.exec(query.order_by(Goal.seq)).all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing goals: {e}")
            raise StorageError("Could not list goals") from e
