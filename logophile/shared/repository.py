"""Base repository pattern with async CRUD operations."""

import builtins
import uuid
from abc import ABC
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Type variable for SQLAlchemy models
ModelT = TypeVar("ModelT")

# Type variable for create schema
CreateSchemaT = TypeVar("CreateSchemaT")

# Type variable for update schema
UpdateSchemaT = TypeVar("UpdateSchemaT")


class BaseRepository(Generic[ModelT, CreateSchemaT, UpdateSchemaT], ABC):
    """Abstract base repository providing async CRUD operations.

    Type Parameters:
        ModelT: The SQLAlchemy model class.
        CreateSchemaT: The Pydantic schema for create operations.
        UpdateSchemaT: The Pydantic schema for update operations.

    Example:
        class SavedWordRepository(BaseRepository[SavedWord, SavedWordCreate, ReviewUpdate]):
            def __init__(self, session: AsyncSession):
                super().__init__(session, SavedWord)

        repo = SavedWordRepository(session)
        word = await repo.create(SavedWordCreate(term="ephemeral", ...))
        due = await repo.list(filters={"due_date__lte": now})
    """

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        """Initialize the repository.

        Args:
            session: The async SQLAlchemy session.
            model: The SQLAlchemy model class.
        """
        self._session = session
        self._model = model

    @property
    def session(self) -> AsyncSession:
        """Get the current database session."""
        return self._session

    @property
    def model(self) -> type[ModelT]:
        """Get the model class."""
        return self._model

    async def create(self, data: CreateSchemaT) -> ModelT:
        """Create a new record.

        Args:
            data: The data for creating the record.

        Returns:
            The created model instance with its generated identifier.
        """
        if hasattr(data, "model_dump"):
            create_data = data.model_dump(exclude_unset=True)
        else:
            create_data = dict(data)  # type: ignore[call-overload]

        instance = self._model(**create_data)
        self._session.add(instance)
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def get(self, **filters: Any) -> ModelT | None:
        """Get a single record by filters.

        Args:
            **filters: Keyword arguments for filtering.

        Returns:
            The model instance if found, None otherwise.
        """
        query = select(self._model)
        query = self._apply_filters(query, filters)
        result = await self._session.execute(query.limit(1))
        return result.scalars().first()

    async def get_by_id(self, id: uuid.UUID) -> ModelT | None:
        """Get a record by its ID."""
        return await self.get(id=id)

    async def list(
        self,
        *,
        filters: dict[str, Any] | None = None,
        order_by: builtins.list[Any] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        """List records with optional filtering, ordering, and pagination.

        Without an explicit order, models with ``created_at`` are returned
        newest first.

        Args:
            filters: Dictionary of filter conditions.
            order_by: List of columns to order by.
            offset: Number of records to skip.
            limit: Maximum number of records to return.

        Returns:
            Sequence of model instances.
        """
        query = select(self._model)

        if filters:
            query = self._apply_filters(query, filters)

        if order_by:
            query = query.order_by(*order_by)
        elif hasattr(self._model, "created_at"):
            query = query.order_by(self._model.created_at.desc())  # type: ignore[attr-defined]

        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self._session.execute(query)
        return result.scalars().all()

    async def count(self, *, filters: dict[str, Any] | None = None) -> int:
        """Count records matching the filters."""
        query = select(func.count()).select_from(self._model)

        if filters:
            query = self._apply_filters(query, filters)

        result = await self._session.execute(query)
        return result.scalar_one()

    async def exists(self, *, filters: dict[str, Any] | None = None) -> bool:
        """Check if any records match the filters."""
        count = await self.count(filters=filters)
        return count > 0

    async def update(
        self,
        instance: ModelT,
        data: UpdateSchemaT,
        *,
        exclude_unset: bool = True,
    ) -> ModelT:
        """Apply a partial update to an existing record.

        All fields are assigned before a single flush, so the change is
        written as one statement.

        Args:
            instance: The model instance to update.
            data: The update data.
            exclude_unset: Whether to exclude unset fields from the update.

        Returns:
            The updated model instance.
        """
        if hasattr(data, "model_dump"):
            update_data = data.model_dump(exclude_unset=exclude_unset)
        else:
            update_data = dict(data)  # type: ignore[call-overload]

        for field, value in update_data.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def update_by_id(
        self,
        id: uuid.UUID,
        data: UpdateSchemaT,
        *,
        exclude_unset: bool = True,
    ) -> ModelT | None:
        """Update a record by its ID.

        Returns:
            The updated model instance if found, None otherwise.
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return None
        return await self.update(instance, data, exclude_unset=exclude_unset)

    async def delete(self, instance: ModelT) -> None:
        """Permanently delete a record."""
        await self._session.delete(instance)
        await self._session.flush()

    async def delete_by_id(self, id: uuid.UUID) -> bool:
        """Permanently delete a record by its ID.

        Returns:
            True if the record was deleted, False if not found.
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return False
        await self.delete(instance)
        return True

    def _apply_filters(
        self,
        query: Select,
        filters: dict[str, Any],
    ) -> Select:
        """Apply filters to a query.

        Supports filter operations through special suffixes:
            - field__eq: Equal (default)
            - field__ne: Not equal
            - field__gt: Greater than
            - field__gte: Greater than or equal
            - field__lt: Less than
            - field__lte: Less than or equal
            - field__in: In list

        Args:
            query: The SQLAlchemy query to filter.
            filters: Dictionary of filter conditions.

        Returns:
            The filtered query.
        """
        for key, value in filters.items():
            if value is None:
                continue

            if "__" in key:
                field_name, operation = key.rsplit("__", 1)
            else:
                field_name = key
                operation = "eq"

            if not hasattr(self._model, field_name):
                continue

            column = getattr(self._model, field_name)

            match operation:
                case "ne":
                    query = query.where(column != value)
                case "gt":
                    query = query.where(column > value)
                case "gte":
                    query = query.where(column >= value)
                case "lt":
                    query = query.where(column < value)
                case "lte":
                    query = query.where(column <= value)
                case "in":
                    query = query.where(column.in_(value))
                case _:
                    query = query.where(column == value)

        return query
