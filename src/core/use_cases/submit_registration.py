"""
Use Case: Submit Registration — Intake Orchestrator.

Orquestra: Anexo (opcional) → Tabela de destino → Registro → Append
Qualquer falha aborta a submissão inteira; nada é desfeito (um anexo
já gravado pode ficar órfão se o append falhar).
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

from src.core.entities.attachment import AttachmentPayload
from src.core.entities.registration import RegistrationRecord, mask_cpf
from src.core.errors import (
    SubmissionError,
    StorageError,
    PersistenceTargetMissing,
    AppendFailure,
)
from src.core.interfaces.tabular_store import ITabularStore
from src.core.use_cases.store_attachment import StoreAttachmentUseCase

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Inscrição realizada com sucesso!"


class SubmissionState(str, Enum):
    RECEIVED = "RECEIVED"
    ATTACHMENT_STORED = "ATTACHMENT_STORED"
    ATTACHMENT_SKIPPED = "ATTACHMENT_SKIPPED"
    VALIDATED = "VALIDATED"
    APPENDED = "APPENDED"
    FAILED = "FAILED"


@dataclass
class SubmissionResult:
    """Resultado de uma submissão bem-sucedida."""
    state: SubmissionState
    message: str
    record: RegistrationRecord
    row_position: int | None = None
    state_trail: list[str] = field(default_factory=list)

    @property
    def documento_url(self) -> str:
        return self.record.documento_url


class SubmitRegistrationUseCase:
    """
    Use Case: formulário bruto → registro anexado na tabela.

    Dependency Injection: store, anexos e relógio vêm pelo construtor.
    """

    ATTACHMENT_FIELD = "arquivo"

    def __init__(
        self,
        store: ITabularStore,
        attachments: StoreAttachmentUseCase,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._attachments = attachments
        self._clock = clock

    def execute(self, form: dict) -> SubmissionResult:
        """
        Executa a submissão.

        1. Anexo — se presente, grava no storage (falha → aborta, sem append)
        2. Resolve a tabela de destino (ausente → erro de configuração)
        3. Monta o registro na ordem contratual + timestamp do servidor
        4. Append (falha → erro com a causa original na mensagem)
        """
        trail = [SubmissionState.RECEIVED.value]

        def fail(error: SubmissionError) -> SubmissionError:
            trail.append(SubmissionState.FAILED.value)
            error.state_trail = trail
            logger.error(f"Submission failed ({mask_cpf(form.get('cpf', ''))}) after {trail[-2]}: {error.message}")
            return error

        # ── 1. Anexo ───────────────────────────────────────
        documento_url = ""
        payload = AttachmentPayload.from_form(form.get(self.ATTACHMENT_FIELD))
        if payload is not None:
            try:
                documento_url = self._attachments.execute(payload).url
            except StorageError as e:
                raise fail(e)
            trail.append(SubmissionState.ATTACHMENT_STORED.value)
        else:
            trail.append(SubmissionState.ATTACHMENT_SKIPPED.value)

        # ── 2. Tabela de destino ───────────────────────────
        try:
            self._store.resolve_target()
        except PersistenceTargetMissing as e:
            raise fail(e)
        except Exception as e:
            raise fail(SubmissionError(f"Erro ao acessar a tabela de inscrições: {e}")) from e

        # ── 3. Registro ────────────────────────────────────
        record = RegistrationRecord.from_form(form, documento_url, self._clock())
        trail.append(SubmissionState.VALIDATED.value)

        # ── 4. Append ──────────────────────────────────────
        try:
            position = self._store.append_row(record.to_row())
        except Exception as e:
            raise fail(AppendFailure(f"Erro ao salvar a inscrição: {e}")) from e
        trail.append(SubmissionState.APPENDED.value)

        logger.info(f"Registration appended for {mask_cpf(record.cpf)} at row {position}")
        return SubmissionResult(
            state=SubmissionState.APPENDED,
            message=SUCCESS_MESSAGE,
            record=record,
            row_position=position,
            state_trail=trail,
        )
