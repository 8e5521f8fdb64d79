"""
Datos principales de un comprobante en un solo nivel.

No incluye datos que ocupan mucho espacio o que rara vez se usan
(sellos, certificados, etc.)
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import Concept, Document


@dataclass(frozen=True)
class Summary:
    """Copia plana e inmutable de los datos principales de un CFDI"""

    total: float
    subtotal: float
    issue_date: str
    issuer_name: str
    issuer_tax_id: str
    recipient_name: str
    recipient_tax_id: str
    uuid: Optional[str] = None
    stamp_date: Optional[str] = None
    concepts: Tuple[Concept, ...] = ()

    def to_dict(self) -> dict:
        """Convertir a diccionario para reportes"""
        return {
            'total': self.total,
            'subtotal': self.subtotal,
            'issue_date': self.issue_date,
            'issuer_name': self.issuer_name,
            'issuer_tax_id': self.issuer_tax_id,
            'recipient_name': self.recipient_name,
            'recipient_tax_id': self.recipient_tax_id,
            'uuid': self.uuid,
            'stamp_date': self.stamp_date,
            'concepts': [c.to_dict() for c in self.concepts],
        }

    def __str__(self) -> str:
        return f"{self.uuid or 'sin timbrar'} - {self.issuer_name} ({self.issuer_tax_id}) - ${self.total:,.2f}"


def to_summary(document: Document) -> Summary:
    """
    Generar un Summary a partir de un comprobante

    Args:
        document: Comprobante ya parseado

    Returns:
        Summary independiente del comprobante original
    """
    return Summary(
        total=document.total,
        subtotal=document.subtotal,
        issue_date=document.issue_date,
        issuer_name=document.issuer.legal_name,
        issuer_tax_id=document.issuer.tax_id,
        recipient_name=document.recipient.legal_name,
        recipient_tax_id=document.recipient.tax_id,
        uuid=document.uuid(),
        stamp_date=document.stamp_date(),
        concepts=tuple(document.concepts()),
    )
