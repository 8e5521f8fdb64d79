"""
Esquema declarativo del CFDI 4.0 soportado.

Cada entidad tiene su nodo en el XML y una tabla de atributos:
(atributo XML, campo del modelo, requerido, numérico).
Los nombres de nodos y atributos solo se definen aquí.
"""
from typing import NamedTuple, Tuple


class Campo(NamedTuple):
    """Mapeo de un atributo XML a un campo del modelo"""

    atributo: str
    campo: str
    requerido: bool = True
    numerico: bool = False


class Nodo(NamedTuple):
    """Nodo del CFDI con su tabla de atributos"""

    tag: str
    campos: Tuple[Campo, ...] = ()


COMPROBANTE = Nodo('Comprobante', (
    Campo('Total', 'total', numerico=True),
    Campo('SubTotal', 'subtotal', numerico=True),
    Campo('Fecha', 'issue_date'),
    Campo('FormaPago', 'payment_method', requerido=False),
    # Se conserva como texto, a diferencia del descuento del concepto
    Campo('Descuento', 'discount', requerido=False),
    Campo('TipoDeComprobante', 'voucher_type'),
))

EMISOR = Nodo('Emisor', (
    Campo('Rfc', 'tax_id'),
    Campo('Nombre', 'legal_name'),
    Campo('RegimenFiscal', 'tax_regime'),
))

RECEPTOR = Nodo('Receptor', (
    Campo('Rfc', 'tax_id'),
    Campo('Nombre', 'legal_name'),
    Campo('RegimenFiscalReceptor', 'tax_regime'),
    Campo('UsoCFDI', 'cfdi_use'),
))

CONCEPTOS = Nodo('Conceptos')

CONCEPTO = Nodo('Concepto', (
    Campo('ClaveProdServ', 'product_service_code'),
    Campo('Cantidad', 'quantity', numerico=True),
    Campo('ClaveUnidad', 'unit_code'),
    Campo('Unidad', 'unit_description', requerido=False),
    Campo('Descripcion', 'description'),
    # Texto: preserva los decimales tal como vienen en el XML
    Campo('ValorUnitario', 'unit_value'),
    Campo('Importe', 'amount', numerico=True),
    Campo('Descuento', 'discount', requerido=False, numerico=True),
))

COMPLEMENTO = Nodo('Complemento')

TIMBRE_FISCAL_DIGITAL = Nodo('TimbreFiscalDigital', (
    Campo('Version', 'schema_version'),
    Campo('UUID', 'uuid'),
    Campo('FechaTimbrado', 'stamp_date'),
    Campo('NoCertificadoSAT', 'authority_certificate_serial'),
))
