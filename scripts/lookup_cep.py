"""
CEP lookup check — consulta um ou mais CEPs em cada provedor e no resolver.

Útil para ver qual provedor está respondendo antes de abrir as inscrições.

Usage:
    python -m scripts.lookup_cep 01310100 [70040010 ...]
"""
import argparse
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from src.config.settings import get_settings
from src.core.use_cases.resolve_address import ResolveAddressUseCase
from src.infrastructure.cep import ViaCepProvider, BrasilApiProvider


def main():
    parser = argparse.ArgumentParser(description="Consulta CEPs nos provedores configurados")
    parser.add_argument("ceps", nargs="+")
    args = parser.parse_args()

    settings = get_settings()
    providers = [
        ViaCepProvider(settings.cep_primary_url),
        BrasilApiProvider(settings.cep_secondary_url),
    ]
    resolver = ResolveAddressUseCase(providers)

    print("=" * 60)
    print("  CEP Lookup")
    print("=" * 60)

    for cep in args.ceps:
        print(f"\n[{cep}]")
        for provider in providers:
            t0 = time.perf_counter()
            result = provider.lookup(cep)
            ms = (time.perf_counter() - t0) * 1000
            status = result.to_dict() if result else "FAIL"
            print(f"  {provider.name:<10} {ms:7.0f}ms  {status}")

        result = resolver.execute(cep)
        print(f"  {'resolver':<10}            {result.to_dict()} ({result.provider or '-'})")


if __name__ == "__main__":
    main()
