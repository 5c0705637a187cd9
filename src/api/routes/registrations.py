"""
Routes: inscrições.

  GET  /registrations/duplicate?cpf=...  — gate pré-submissão
  POST /registrations                    — submissão completa (+ anexo opcional)

Erros de submissão (SubmissionError) sobem para o handler em main.py.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_duplicate_use_case, get_submit_use_case
from src.api.schemas.requests import RegistrationRequest
from src.api.schemas.responses import DuplicateResponse, SubmissionResponse
from src.core.entities.registration import only_digits
from src.core.use_cases.check_duplicate import CheckDuplicateUseCase
from src.core.use_cases.submit_registration import SubmitRegistrationUseCase

router = APIRouter()


@router.get("/registrations/duplicate", response_model=DuplicateResponse)
def check_duplicate(cpf: str, use_case: CheckDuplicateUseCase = Depends(get_duplicate_use_case)):
    """CPF já inscrito? Falha de leitura responde False (fail-open)."""
    return DuplicateResponse(cpf=only_digits(cpf), duplicate=use_case.execute(cpf))


@router.post("/registrations", response_model=SubmissionResponse, status_code=201)
def submit_registration(
    req: RegistrationRequest,
    use_case: SubmitRegistrationUseCase = Depends(get_submit_use_case),
):
    """
    Submete uma inscrição.

    - Grava o anexo (se houver) antes do registro
    - Anexa a linha na tabela de inscrições
    """
    result = use_case.execute(req.model_dump())
    return SubmissionResponse(
        success=True,
        message=result.message,
        documento_url=result.documento_url,
    )
