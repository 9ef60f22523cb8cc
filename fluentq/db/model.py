# =============================================================================
# File:        fluentq/db/model.py
# Purpose:     Bazni Model: vezivanje tabele/PK-a, hidratacija reda, QueryBuilder
# Author:      Aleksandar Popović
# Created:     2026-10-06
# Updated:     2026-10-17
# =============================================================================

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from fluentq.db.base_driver import BaseDBDriver
from fluentq.db.query import ModelBindingError
from fluentq.db.query_builder import QueryBuilder


class Model:
    """
    Bazna Model klasa:
    - table / pk_field / searchable_fields se zadaju u child klasi,
    - from_row() pravi instancu iz sirovog reda (uz opcione casts),
    - query(driver) vraća QueryBuilder sa već vezanim PK-om i poljima za pretragu.

    Primer:
        class User(Model):
            table = "users"
            searchable_fields = ["name", "email"]
            casts = {"age": int}
    """

    table: Optional[str] = None
    pk_field: str = "id"
    searchable_fields: List[str] = []

    # Opciono pretvaranje tipova pri hidrataciji: { "age": int, "active": bool }
    casts: Dict[str, Callable[[Any], Any]] = {}

    def __init__(self, **attrs):
        # direktno u __dict__: kolona "pk" ne sme da udari u property ispod
        self.__dict__.update(attrs)

    # --------------------------------------------------------------------- #
    # Vezivanje
    # --------------------------------------------------------------------- #

    @classmethod
    def table_name(cls) -> str:
        if not cls.table:
            raise ModelBindingError(f"Model {cls.__name__} nema definisan 'table'.")
        return cls.table

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Model":
        data = dict(row)
        for key, cast in cls.casts.items():
            if data.get(key) is not None:
                data[key] = cast(data[key])
        return cls(**data)

    # --------------------------------------------------------------------- #
    # QueryBuilder / Read helpers
    # --------------------------------------------------------------------- #

    @classmethod
    def query(cls, driver: BaseDBDriver) -> QueryBuilder:
        builder = QueryBuilder(cls, driver)
        builder.bind_searchable_fields(cls.searchable_fields)
        builder.bind_primary_key(cls.pk_field)
        return builder

    @classmethod
    def all(cls, driver: BaseDBDriver) -> List["Model"]:
        return cls.query(driver).find()

    @classmethod
    def count(cls, driver: BaseDBDriver) -> int:
        return cls.query(driver).total_count()

    # --------------------------------------------------------------------- #
    # Instanca
    # --------------------------------------------------------------------- #

    @property
    def pk(self):
        return self.__dict__.get(self.pk_field)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)

    def __eq__(self, other):
        if not isinstance(other, Model) or type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((type(self), self.pk))

    def __repr__(self):
        return f"<{type(self).__name__} {self.pk_field}={self.pk!r}>"
