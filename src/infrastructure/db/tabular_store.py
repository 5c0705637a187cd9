"""
Adapter: SQLAlchemy Tabular Store.

Implementação do contrato ITabularStore sobre uma tabela SQL.
A tabela é localizada por nome (configurável) e refletida a cada
chamada, nada fica em cache entre requisições.
"""

import logging

from sqlalchemy import MetaData, Table, func, inspect, insert, select
from sqlalchemy.engine import Engine

from src.core.entities.registration import REGISTRATION_COLUMNS
from src.core.errors import PersistenceTargetMissing
from src.core.interfaces.tabular_store import ITabularStore
from src.infrastructure.db.database import get_db, get_engine

logger = logging.getLogger(__name__)


class SqlAlchemyTabularStore(ITabularStore):
    """Tabela de inscrições (append + leitura de coluna)."""

    def __init__(self, table_name: str, engine: Engine | None = None):
        self._table_name = table_name
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine or get_engine()

    def resolve_target(self) -> str:
        if not inspect(self.engine).has_table(self._table_name):
            raise PersistenceTargetMissing(
                f"Tabela '{self._table_name}' não encontrada. Verifique REGISTRATIONS_TABLE."
            )
        return self._table_name

    def _table(self) -> Table:
        self.resolve_target()
        return Table(self._table_name, MetaData(), autoload_with=self.engine)

    def list_column(self, column: str) -> list[str]:
        table = self._table()
        if column not in table.c:
            raise KeyError(f"Coluna '{column}' não existe em '{self._table_name}'")
        with get_db(self.engine) as db:
            values = db.execute(select(table.c[column])).scalars().all()
        return [str(v) for v in values if v is not None]

    def append_row(self, row: list) -> int:
        if len(row) != len(REGISTRATION_COLUMNS):
            raise ValueError(
                f"Linha com {len(row)} valores; esperado {len(REGISTRATION_COLUMNS)}"
            )
        table = self._table()
        values = dict(zip(REGISTRATION_COLUMNS, row))
        with get_db(self.engine) as db:
            result = db.execute(insert(table).values(**values))
            position = result.inserted_primary_key[0] if result.inserted_primary_key else None
        logger.debug(f"Appended row {position} to {self._table_name}")
        return position

    def count_rows(self) -> int:
        table = self._table()
        with get_db(self.engine) as db:
            return db.execute(select(func.count()).select_from(table)).scalar_one()
