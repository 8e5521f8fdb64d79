"""
Modelos de datos para comprobantes CFDI 4.0
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .summary import Summary


class VoucherType(Enum):
    """Tipos de comprobante CFDI"""
    INGRESO = "I"
    EGRESO = "E"
    TRASLADO = "T"
    NOMINA = "N"
    PAGO = "P"


@dataclass(frozen=True)
class Issuer:
    """Contribuyente emisor del comprobante"""

    tax_id: str  # RFC, no se valida
    legal_name: str
    tax_regime: str  # Clave del catálogo de regímenes del SAT

    def to_dict(self) -> dict:
        return {
            'tax_id': self.tax_id,
            'legal_name': self.legal_name,
            'tax_regime': self.tax_regime,
        }


@dataclass(frozen=True)
class Recipient:
    """Contribuyente receptor del comprobante"""

    tax_id: str
    legal_name: str
    tax_regime: str
    cfdi_use: str  # Clave de UsoCFDI del catálogo del SAT

    def to_dict(self) -> dict:
        return {
            'tax_id': self.tax_id,
            'legal_name': self.legal_name,
            'tax_regime': self.tax_regime,
            'cfdi_use': self.cfdi_use,
        }


@dataclass(frozen=True)
class Concept:
    """Representa un concepto/producto en la factura"""

    product_service_code: str  # Clave del catálogo SAT
    quantity: float
    unit_code: str  # Clave de unidad SAT
    description: str
    unit_value: str  # Texto tal cual viene en ValorUnitario
    amount: float
    unit_description: Optional[str] = None
    discount: Optional[float] = None

    @property
    def net_amount(self) -> float:
        """Importe menos descuento"""
        return self.amount - (self.discount or 0.0)

    def to_dict(self) -> dict:
        """Convertir a diccionario"""
        return {
            'product_service_code': self.product_service_code,
            'quantity': self.quantity,
            'unit_code': self.unit_code,
            'unit_description': self.unit_description,
            'description': self.description,
            'unit_value': self.unit_value,
            'amount': self.amount,
            'discount': self.discount,
        }


@dataclass(frozen=True)
class ConceptList:
    """Conceptos del comprobante en el orden del XML"""

    items: Tuple[Concept, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class FiscalStamp:
    """Timbre fiscal digital: UUID, fecha de timbrado y certificado SAT"""

    schema_version: str
    uuid: str
    stamp_date: str
    authority_certificate_serial: str

    def to_dict(self) -> dict:
        return {
            'schema_version': self.schema_version,
            'uuid': self.uuid,
            'stamp_date': self.stamp_date,
            'authority_certificate_serial': self.authority_certificate_serial,
        }


@dataclass(frozen=True)
class Supplement:
    """Complemento del comprobante. Incluye el timbre fiscal si existe"""

    fiscal_stamp: Optional[FiscalStamp] = None

    def to_dict(self) -> dict:
        return {
            'fiscal_stamp': self.fiscal_stamp.to_dict() if self.fiscal_stamp else None,
        }


@dataclass(frozen=True)
class Document:
    """
    Nodo principal del CFDI (Comprobante).

    Un comprobante sin complemento es una factura que aún no ha sido
    timbrada por el SAT.
    """

    # Montos
    total: float
    subtotal: float

    # Datos generales
    issue_date: str  # Fecha tal como viene en el XML
    voucher_type: str

    # Subnodos
    issuer: Issuer
    recipient: Recipient
    concept_list: ConceptList

    payment_method: Optional[str] = None
    discount: Optional[str] = None
    supplement: Optional[Supplement] = None

    def concepts(self) -> List[Concept]:
        """Regresa una copia de la lista de conceptos"""
        return list(self.concept_list.items)

    def _fiscal_stamp(self) -> Optional[FiscalStamp]:
        if self.supplement is None:
            return None
        return self.supplement.fiscal_stamp

    def uuid(self) -> Optional[str]:
        """UUID del timbre fiscal, None si el comprobante no está timbrado"""
        timbre = self._fiscal_stamp()
        return timbre.uuid if timbre else None

    def stamp_date(self) -> Optional[str]:
        """Fecha de timbrado, None si el comprobante no está timbrado"""
        timbre = self._fiscal_stamp()
        return timbre.stamp_date if timbre else None

    @property
    def is_stamped(self) -> bool:
        return self.uuid() is not None

    @property
    def voucher_kind(self) -> Optional[VoucherType]:
        """Tipo de comprobante como enum, None si la clave no es conocida"""
        try:
            return VoucherType(self.voucher_type)
        except ValueError:
            return None

    def to_summary(self) -> 'Summary':
        """Genera un Summary con los datos principales del comprobante"""
        from .summary import to_summary
        return to_summary(self)

    def to_dict(self) -> dict:
        """Convertir a diccionario"""
        return {
            'total': self.total,
            'subtotal': self.subtotal,
            'issue_date': self.issue_date,
            'payment_method': self.payment_method,
            'discount': self.discount,
            'voucher_type': self.voucher_type,
            'issuer': self.issuer.to_dict(),
            'recipient': self.recipient.to_dict(),
            'concepts': [c.to_dict() for c in self.concept_list],
            'supplement': self.supplement.to_dict() if self.supplement else None,
        }

    def __str__(self) -> str:
        folio = self.uuid() or "sin timbrar"
        return f"CFDI {folio} - {self.issuer.legal_name} - ${self.total:,.2f}"
