"""
Entity: Attachment Payload

Arquivo enviado pelo cliente junto com a inscrição, codificado em base64.
Consumido uma única vez pelo StoreAttachmentUseCase.
"""

from dataclasses import dataclass


@dataclass
class AttachmentPayload:
    """Anexo codificado vindo do formulário."""
    content_base64: str
    mime_type: str = "application/octet-stream"
    filename: str = "documento"

    @classmethod
    def from_form(cls, data: dict | None) -> "AttachmentPayload | None":
        """Extrai o anexo do formulário; None quando o cliente não enviou arquivo."""
        if not data or not data.get("content_base64"):
            return None
        return cls(
            content_base64=data["content_base64"],
            mime_type=data.get("mime_type") or "application/octet-stream",
            filename=data.get("filename") or "documento",
        )
