"""
Contract: Tabular Store

Store durável de inscrições, tratado como uma tabela com colunas
em ordem fixa. Só anexa e lê, nunca altera nem remove linhas.
"""

from abc import ABC, abstractmethod


class ITabularStore(ABC):
    """
    Port: Tabular Store

    Implementação pode ser SQL (SQLAlchemy), planilha, etc.
    O append é atômico do lado do store; não há controle de concorrência.
    """

    @abstractmethod
    def resolve_target(self) -> str:
        """
        Localiza a tabela de destino.

        Returns:
            Nome da tabela resolvida.

        Raises:
            PersistenceTargetMissing: tabela não existe.
        """
        ...

    @abstractmethod
    def list_column(self, column: str) -> list[str]:
        """Lê todos os valores de uma coluna (scan completo)."""
        ...

    @abstractmethod
    def append_row(self, row: list) -> int:
        """
        Anexa uma linha na ordem contratual de colunas.

        Returns:
            Posição implícita da linha (id autoincremental).
        """
        ...

    @abstractmethod
    def count_rows(self) -> int:
        ...
