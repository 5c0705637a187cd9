"""
Adapter: BrasilAPI — provedor secundário.

Resposta: {"cep", "state", "city", "neighborhood", "street", "service"}
CEP inexistente volta com HTTP 404.
"""

from src.core.entities.address import AddressResult
from src.infrastructure.cep.base import HttpCepProvider


class BrasilApiProvider(HttpCepProvider):

    name = "brasilapi"

    def normalize(self, payload: dict) -> AddressResult | None:
        return AddressResult(
            endereco=payload.get("street") or "",
            bairro=payload.get("neighborhood") or "",
            cidade=payload.get("city") or "",
            estado=payload.get("state") or "",
        )
