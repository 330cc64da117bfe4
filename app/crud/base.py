# app/crud/base.py
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import ConflictError, InternalError, InventoryError, NotFoundError, ValidationError
from app.crud.errors import ConstraintKind, constraint_kind
from app.services.store_logger import log_store_error

T = TypeVar("T")

class AbstractRepository(ABC, Generic[T]):
    @abstractmethod
    async def get_all(self) -> list[T]: ...

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> T: ...

    @abstractmethod
    async def create(self, instance: T) -> T: ...

    @abstractmethod
    async def update(self, instance: T) -> T: ...

    @abstractmethod
    async def delete(self, entity_id: UUID) -> None: ...


class SQLAlchemyRepository(AbstractRepository[T]):
    """Shared CRUD over one mapped class.

    Subclasses declare which columns carry unique constraints and which hold
    foreign keys; both are only used to label a failed write, the store's
    constraints decide whether it fails.
    """

    model: type
    entity_name: str
    unique_fields: tuple[str, ...] = ()
    case_insensitive_fields: tuple[str, ...] = ()
    reference_fields: dict[str, type] = {}

    def __init__(self, db: AsyncSession, case_insensitive_names: bool = False):
        self.db = db
        self.case_insensitive_names = case_insensitive_names

    def _select(self):
        return select(self.model)

    async def _execute(self, stmt, operation: str):
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            log_store_error(self.entity_name, operation, exc)
            raise InternalError(f"Failed to fetch {self.entity_name.lower()}") from exc

    async def get_all(self) -> list[T]:
        result = await self._execute(self._select(), "list")
        return result.unique().scalars().all()

    async def get_by_id(self, entity_id: UUID) -> T:
        stmt = (
            self._select()
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(stmt, "get")
        instance = result.unique().scalars().first()
        if instance is None:
            raise NotFoundError(f"{self.entity_name} not found")
        return instance

    async def create(self, instance: T) -> T:
        self.db.add(instance)
        await self._commit(instance, "create")
        return instance

    async def update(self, instance: T) -> T:
        if not self.db.is_modified(instance):
            # No UPDATE is emitted, so re-read to notice a concurrent delete
            return await self.get_by_id(instance.id)
        await self._commit(instance, "update")
        return instance

    async def delete(self, entity_id: UUID) -> None:
        try:
            result = await self.db.execute(delete(self.model).where(self.model.id == entity_id))
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            log_store_error(self.entity_name, "delete", exc, entity_id)
            if constraint_kind(exc) is ConstraintKind.FOREIGN_KEY:
                raise ConflictError(
                    "Resource in use",
                    details=f"{self.entity_name} is still referenced by existing products",
                ) from exc
            raise InternalError(f"Failed to delete {self.entity_name.lower()}") from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            log_store_error(self.entity_name, "delete", exc, entity_id)
            raise InternalError(f"Failed to delete {self.entity_name.lower()}") from exc

        if result.rowcount == 0:
            raise NotFoundError(f"{self.entity_name} not found")

    def _snapshot(self, instance: T) -> dict[str, Any]:
        # Taken before commit: a rollback expires the instance's attributes
        fields = ("id", *self.unique_fields, *self.reference_fields)
        return {field: getattr(instance, field) for field in fields}

    async def _commit(self, instance: T, operation: str):
        snapshot = self._snapshot(instance)
        try:
            await self.db.commit()
        except StaleDataError as exc:
            # Row deleted between the existence check and the write
            await self.db.rollback()
            raise NotFoundError(f"{self.entity_name} not found") from exc
        except IntegrityError as exc:
            await self.db.rollback()
            log_store_error(self.entity_name, operation, exc, snapshot["id"])
            raise await self._translate_integrity_error(exc, snapshot) from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            log_store_error(self.entity_name, operation, exc, snapshot["id"])
            raise InternalError(f"Failed to {operation} {self.entity_name.lower()}") from exc

    async def _translate_integrity_error(self, exc: IntegrityError, snapshot: dict[str, Any]) -> InventoryError:
        kind = constraint_kind(exc)
        entity = self.entity_name.lower()

        if kind is ConstraintKind.UNIQUE:
            field = await self._colliding_field(snapshot)
            return ConflictError(
                "Duplicate entry",
                details=f"A {entity} with this {field} already exists",
                field=field,
            )

        if kind is ConstraintKind.FOREIGN_KEY:
            field = await self._dangling_reference(snapshot)
            label = field.removesuffix("_id") if field else "referenced record"
            return ConflictError(
                "Invalid reference",
                details=f"The {label} referenced by this {entity} does not exist",
                field=field,
            )

        if kind is ConstraintKind.NOT_NULL:
            return ValidationError(details=f"{self.entity_name} is missing a required field")

        return InternalError(f"Failed to save {entity}")

    async def _colliding_field(self, snapshot: dict[str, Any]) -> str | None:
        for field in self.unique_fields:
            value = snapshot.get(field)
            if value is None:
                continue

            column = getattr(self.model, field)
            if self.case_insensitive_names and field in self.case_insensitive_fields:
                condition = func.lower(column) == value.lower()
            else:
                condition = column == value

            stmt = select(self.model.id).where(condition)
            if snapshot.get("id") is not None:
                stmt = stmt.where(self.model.id != snapshot["id"])

            if await self.db.scalar(stmt.limit(1)) is not None:
                return field

        return self.unique_fields[0] if self.unique_fields else None

    async def _dangling_reference(self, snapshot: dict[str, Any]) -> str | None:
        for field, target in self.reference_fields.items():
            value = snapshot.get(field)
            if value is None:
                continue
            if await self.db.scalar(select(target.id).where(target.id == value)) is None:
                return field
        return None
