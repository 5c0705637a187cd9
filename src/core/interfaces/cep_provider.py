"""
Contract: CEP Provider

Cada provedor externo de CEP responde num schema próprio. O adapter
isola o parsing e devolve o AddressResult canônico. Qualquer falha
(exceção de rede, status != 200, payload malformado, "não encontrado")
vira None e o resolver decide o fallback.
"""

from abc import ABC, abstractmethod

from src.core.entities.address import AddressResult


class ICepProvider(ABC):
    """Port: provedor de endereço por CEP (uma tentativa, sem retry)."""

    name: str = ""

    @abstractmethod
    def lookup(self, cep: str) -> AddressResult | None:
        """
        Consulta um CEP já normalizado (8 dígitos).

        Returns:
            AddressResult normalizado, ou None em qualquer falha.
            Nunca levanta exceção.
        """
        ...
