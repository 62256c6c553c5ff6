from typing import Any, List, Mapping, Optional, Sequence, Type
from django.core.management.color import no_style
from django.db import connection
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
    ) -> QuerySet:
        """Return a filtered, optionally ordered queryset."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        return self._apply_ordering(qs, order_by)

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching the lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        """Return True if any object matches the lookup."""
        return self.model.objects.filter(**lookup).exists()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def bulk_create(self, objs: Sequence[Model], *, batch_size: int = 500) -> List[Model]:
        """Insert many unsaved objects in batches; return them."""
        return self.model.objects.bulk_create(objs, batch_size=batch_size)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count

    def delete_all(self) -> int:
        """Delete every row of the model; return count deleted."""
        count, _ = self.model.objects.all().delete()
        return count

    def reset_ids(self) -> None:
        """Restart primary key numbering at 1. Only call on an empty table."""
        meta = self.model._meta
        sequences = [{"table": meta.db_table, "column": meta.pk.column}]
        with connection.cursor() as cursor:
            for sql in connection.ops.sequence_reset_by_name_sql(no_style(), sequences):
                cursor.execute(sql)
