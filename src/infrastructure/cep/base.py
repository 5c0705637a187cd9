"""
Adapter base: HTTP CEP Provider.

Uma tentativa por chamada, sem retry, timeout padrão do httpx.
O cliente não usa raise_for_status: status != 200 é inspecionado
e vira falha (None), assim como exceção de rede e JSON malformado.
"""

import logging
from abc import abstractmethod

import httpx

from src.core.entities.address import AddressResult
from src.core.interfaces.cep_provider import ICepProvider

logger = logging.getLogger(__name__)


class HttpCepProvider(ICepProvider):
    """Template: GET url_template.format(cep=...) → normalize(payload)."""

    name = "http"

    def __init__(self, url_template: str, transport: httpx.BaseTransport | None = None):
        self._url_template = url_template
        self._transport = transport

    def lookup(self, cep: str) -> AddressResult | None:
        url = self._url_template.format(cep=cep)
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.get(url)
                if response.status_code != 200:
                    logger.info(f"{self.name}: HTTP {response.status_code} for CEP {cep}")
                    return None
                payload = response.json()
        except Exception as e:
            logger.warning(f"{self.name}: lookup failed for CEP {cep}: {e}")
            return None

        if not isinstance(payload, dict):
            logger.warning(f"{self.name}: unexpected payload for CEP {cep}")
            return None

        result = self.normalize(payload)
        if result is not None:
            result.provider = self.name
        return result

    @abstractmethod
    def normalize(self, payload: dict) -> AddressResult | None:
        """Mapeia o schema do provedor para o AddressResult canônico."""
        ...
