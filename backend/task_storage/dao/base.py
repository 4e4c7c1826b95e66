"""
Base Data Access Object (DAO) class.

WHY: The DAO pattern separates database operations from business logic,
so services only validate and delegate while queries live here.
"""

from typing import Generic, TypeVar, Type, Optional, List, Any, Tuple
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_storage.models.base import Base

# Type variable for model class
ModelType = TypeVar("ModelType", bound=Base)


class BaseDAO(Generic[ModelType]):
    """
    Base Data Access Object providing CRUD operations for all models.

    Type Parameters:
        ModelType: The SQLAlchemy model class this DAO manages
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize DAO with model class and database session.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with database-generated fields populated

        Raises:
            IntegrityError: If unique constraints are violated
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()  # Flush to get auto-generated fields
        return instance

    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by: Any = None,
        **filters: Any,
    ) -> List[ModelType]:
        """
        Retrieve multiple records with optional pagination and filtering.

        Args:
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return, None for all
            order_by: Column expression(s) to order by; defaults to the primary key
            **filters: Field name to value filters (e.g., name="Apollo")

        Returns:
            List of model instances matching the filters
        """
        query = self._filtered(select(self.model), filters)

        if order_by is None:
            order_by = (self.model.id.asc(),)
        elif not isinstance(order_by, (list, tuple)):
            order_by = (order_by,)
        query = query.order_by(*order_by)

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_page(
        self,
        skip: int,
        limit: int,
        order_by: Any = None,
        **filters: Any,
    ) -> Tuple[List[ModelType], int]:
        """
        Retrieve one page of records together with the total match count.

        Args:
            skip: Number of records to skip
            limit: Page size
            order_by: Column expression(s) to order by
            **filters: Field name to value filters

        Returns:
            Tuple of (records on the page, total number of matching records)
        """
        items = await self.get_all(skip=skip, limit=limit, order_by=order_by, **filters)
        total = await self.count(**filters)
        return items, total

    async def delete_instance(self, instance: ModelType) -> None:
        """
        Delete a loaded record through the ORM.

        WHY: Unlike a bulk DELETE statement, ``session.delete`` applies
        relationship cascades (e.g. a project's tasks).

        Args:
            instance: Persistent model instance to delete
        """
        await self.session.delete(instance)
        await self.session.flush()

    async def count(self, **filters: Any) -> int:
        """
        Count records matching filters.

        Args:
            **filters: Field name to value filters

        Returns:
            Number of records matching the filters
        """
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def exists(self, **filters: Any) -> bool:
        """
        Check if any records matching filters exist.

        Args:
            **filters: Field name to value filters

        Returns:
            True if at least one matching record exists
        """
        query = self._filtered(select(self.model.id), filters).limit(1)
        result = await self.session.execute(query)
        return result.first() is not None

    def _filtered(self, query: Any, filters: dict) -> Any:
        """Apply equality filters for fields that exist on the model."""
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        return query
