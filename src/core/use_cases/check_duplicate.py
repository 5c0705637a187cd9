"""
Use Case: Check Duplicate

Verifica se um CPF já tem inscrição. Gate pré-submissão, best-effort:
lê a coluna inteira a cada chamada (sem cache nem índice).
"""

import logging

from src.core.entities.registration import only_digits, mask_cpf
from src.core.interfaces.tabular_store import ITabularStore

logger = logging.getLogger(__name__)


class CheckDuplicateUseCase:
    """
    Use Case: CPF → já inscrito?

    fail_open=True (padrão): falha de leitura responde False, nunca
    bloqueia a inscrição, ao custo de deixar passar uma duplicata.
    Não é garantia de unicidade: check e append não são atômicos.
    """

    CPF_COLUMN = "cpf"

    def __init__(self, store: ITabularStore, fail_open: bool = True):
        self._store = store
        self._fail_open = fail_open

    def execute(self, cpf: str) -> bool:
        target = only_digits(cpf)
        if not target:
            return False

        try:
            existing = self._store.list_column(self.CPF_COLUMN)
        except Exception as e:
            if not self._fail_open:
                raise
            logger.warning(f"Duplicate check read failed, allowing submission ({mask_cpf(target)}): {e}")
            return False

        return any(only_digits(value) == target for value in existing)
