"""Base repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import UnaryExpression
from sqlmodel import SQLModel

from blogger.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the persistence operations the services use.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: int) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record ID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_page(
        self,
        conditions: Sequence[ColumnElement[bool]],
        order_by: Sequence[UnaryExpression],
        offset: int,
        limit: int,
    ) -> tuple[list[ModelT], int]:
        """
        Get one ordered page of records matching ``conditions``.

        Args:
            conditions: WHERE clauses, combined with AND
            order_by: ORDER BY clauses
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            tuple[list[ModelT], int]: The page and the total number of matches
        """
        count_statement = select(func.count()).select_from(self.model).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar() or 0

        statement = (
            select(self.model).where(*conditions).order_by(*order_by).offset(offset).limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: When the database cannot be reached
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e
        return record
