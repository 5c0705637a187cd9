from .base import HttpCepProvider
from .viacep_provider import ViaCepProvider
from .brasilapi_provider import BrasilApiProvider

__all__ = [
    "HttpCepProvider",
    "ViaCepProvider",
    "BrasilApiProvider",
]
