"""
Entity: Address Result

Resultado transitório de uma consulta de CEP. Não é persistido:
o cliente mescla os campos no formulário e descarta o resultado.
"""

from dataclasses import dataclass


@dataclass
class AddressResult:
    """Endereço normalizado (schema canônico) ou falha estruturada."""
    endereco: str = ""
    bairro: str = ""
    cidade: str = ""
    estado: str = ""
    provider: str = ""                  # ex: "viacep", "brasilapi"
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "AddressResult":
        return cls(error=message)

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"error": self.error}
        return {
            "endereco": self.endereco,
            "bairro": self.bairro,
            "cidade": self.cidade,
            "estado": self.estado,
        }
