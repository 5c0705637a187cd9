"""
Cria a tabela de inscrições no banco configurado (DATABASE_URL).

Usage:
    python -m scripts.init_db [--table inscricoes]
"""
import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from src.config.settings import get_settings
from src.infrastructure.db.database import init_db
from src.infrastructure.db.tabular_store import SqlAlchemyTabularStore


def main():
    parser = argparse.ArgumentParser(description="Inicializa a tabela de inscrições")
    parser.add_argument("--table", default=None, help="Nome da tabela (default: REGISTRATIONS_TABLE)")
    args = parser.parse_args()

    table = args.table or get_settings().registrations_table
    init_db(table_name=table)

    store = SqlAlchemyTabularStore(table)
    print(f"Tabela '{store.resolve_target()}' pronta: {store.count_rows()} inscrições")


if __name__ == "__main__":
    main()
