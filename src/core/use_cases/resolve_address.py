"""
Use Case: Resolve Address — CEP → endereço com fallback.

Orquestra: validação → provedor 1 → provedor 2 → ... → erro estruturado.
Provedores são chamados em sequência, na ordem recebida no construtor.
"""

import logging

from src.core.entities.address import AddressResult
from src.core.entities.registration import only_digits
from src.core.errors import ValidationError, LookupUnavailable
from src.core.interfaces.cep_provider import ICepProvider

logger = logging.getLogger(__name__)

INVALID_CEP_MESSAGE = "CEP inválido"
LOOKUP_UNAVAILABLE_MESSAGE = "Serviço de consulta de CEP indisponível"


class ResolveAddressUseCase:
    """
    Use Case: recebe CEP → tenta provedores em ordem → AddressResult.

    Adicionar um terceiro provedor = acrescentar um item à lista.
    """

    CEP_LENGTH = 8

    def __init__(self, providers: list[ICepProvider]):
        self._providers = list(providers)

    def lookup(self, cep: str) -> AddressResult:
        """
        Versão que levanta exceção.

        Raises:
            ValidationError: CEP não tem 8 dígitos (nenhuma chamada de rede).
            LookupUnavailable: todos os provedores falharam.
        """
        digits = only_digits(cep)
        if len(digits) != self.CEP_LENGTH:
            raise ValidationError(INVALID_CEP_MESSAGE)

        for provider in self._providers:
            result = provider.lookup(digits)
            if result is not None:
                return result
            logger.info(f"CEP {digits}: provider '{provider.name}' failed, trying next")

        logger.warning(f"CEP {digits}: all {len(self._providers)} providers failed")
        raise LookupUnavailable(LOOKUP_UNAVAILABLE_MESSAGE)

    def execute(self, cep: str) -> AddressResult:
        """Nunca levanta: falhas viram AddressResult com error preenchido."""
        try:
            return self.lookup(cep)
        except (ValidationError, LookupUnavailable) as e:
            return AddressResult.failure(e.message)
