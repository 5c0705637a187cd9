"""
Adapter: ViaCEP — provedor primário.

Resposta: {"cep", "logradouro", "complemento", "bairro", "localidade", "uf", ...}
CEP inexistente volta com HTTP 200 e {"erro": true}.
"""

from src.core.entities.address import AddressResult
from src.infrastructure.cep.base import HttpCepProvider


class ViaCepProvider(HttpCepProvider):

    name = "viacep"

    def normalize(self, payload: dict) -> AddressResult | None:
        # "erro" pode vir como bool ou como string "true"
        if str(payload.get("erro", "")).lower() == "true":
            return None
        return AddressResult(
            endereco=payload.get("logradouro") or "",
            bairro=payload.get("bairro") or "",
            cidade=payload.get("localidade") or "",
            estado=payload.get("uf") or "",
        )
