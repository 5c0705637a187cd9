"""
Pydantic schemas — Response models para a API.
"""

from pydantic import BaseModel


class DuplicateResponse(BaseModel):
    cpf: str
    duplicate: bool


class SubmissionResponse(BaseModel):
    success: bool
    message: str
    documento_url: str = ""


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    registrations_table: str
    table_present: bool
    registrations_stored: int = 0
    storage_backend: str
