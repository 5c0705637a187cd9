"""
Route: GET /address/{cep} — consulta interativa de endereço.

Sempre 200: o corpo é o endereço normalizado ou {"error": mensagem},
e o formulário decide se oferece preenchimento manual. CEP vazio
(/address/) ou com barras também chega ao resolver e vira "CEP inválido".
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_address_use_case
from src.core.use_cases.resolve_address import ResolveAddressUseCase

router = APIRouter()


@router.get("/address/")
@router.get("/address/{cep:path}")
def resolve_address(cep: str = "", use_case: ResolveAddressUseCase = Depends(get_address_use_case)) -> dict:
    return use_case.execute(cep).to_dict()
