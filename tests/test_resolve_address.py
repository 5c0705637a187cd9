"""Tests for ResolveAddressUseCase (validation + ordered provider fallback)."""

import pytest

from src.core.entities.address import AddressResult
from src.core.errors import LookupUnavailable, ValidationError
from src.core.use_cases.resolve_address import (
    INVALID_CEP_MESSAGE,
    LOOKUP_UNAVAILABLE_MESSAGE,
    ResolveAddressUseCase,
)
from tests.helpers import FakeCepProvider

PAULISTA = AddressResult(
    endereco="Avenida Paulista", bairro="Bela Vista",
    cidade="São Paulo", estado="SP", provider="primary",
)
PAULISTA_SECONDARY = AddressResult(
    endereco="Av. Paulista", bairro="Bela Vista",
    cidade="São Paulo", estado="SP", provider="secondary",
)


@pytest.mark.parametrize("cep", ["", "0131010", "013101000", "abc", "0131-010", "01.310.10"])
def test_invalid_cep_makes_no_network_call(cep):
    primary = FakeCepProvider("primary", PAULISTA)
    secondary = FakeCepProvider("secondary", PAULISTA)

    result = ResolveAddressUseCase([primary, secondary]).execute(cep)

    assert result.to_dict() == {"error": INVALID_CEP_MESSAGE}
    assert primary.calls == [] and secondary.calls == []


def test_formatted_cep_is_normalized_before_lookup():
    primary = FakeCepProvider("primary", PAULISTA)
    ResolveAddressUseCase([primary]).execute("01310-100")
    assert primary.calls == ["01310100"]


def test_primary_success_skips_secondary():
    primary = FakeCepProvider("primary", PAULISTA)
    secondary = FakeCepProvider("secondary", PAULISTA_SECONDARY)

    result = ResolveAddressUseCase([primary, secondary]).execute("01310100")

    assert result.to_dict() == {
        "endereco": "Avenida Paulista",
        "bairro": "Bela Vista",
        "cidade": "São Paulo",
        "estado": "SP",
    }
    assert secondary.calls == []


def test_primary_failure_falls_back_to_secondary():
    primary = FakeCepProvider("primary", None)
    secondary = FakeCepProvider("secondary", PAULISTA_SECONDARY)

    result = ResolveAddressUseCase([primary, secondary]).execute("01310100")

    assert result.ok
    assert result.endereco == "Av. Paulista"
    assert result.provider == "secondary"
    assert primary.calls == ["01310100"] and secondary.calls == ["01310100"]


def test_all_providers_failing_returns_unavailable():
    providers = [FakeCepProvider("primary", None), FakeCepProvider("secondary", None)]
    result = ResolveAddressUseCase(providers).execute("01310100")
    assert result.to_dict() == {"error": LOOKUP_UNAVAILABLE_MESSAGE}


def test_third_provider_is_just_another_list_item():
    third = FakeCepProvider("third", PAULISTA)
    providers = [FakeCepProvider("a", None), FakeCepProvider("b", None), third]
    assert ResolveAddressUseCase(providers).execute("01310100").ok
    assert third.calls == ["01310100"]


def test_lookup_raises_typed_errors():
    use_case = ResolveAddressUseCase([FakeCepProvider("primary", None)])
    with pytest.raises(ValidationError):
        use_case.lookup("123")
    with pytest.raises(LookupUnavailable):
        use_case.lookup("01310100")
