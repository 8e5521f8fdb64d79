"""
Deserialización de CFDI 4.0 (subconjunto básico) a modelos de Python.

Modelo soportado:

    Comprobante
        Emisor
        Receptor
        Conceptos / Concepto*
        Complemento (opcional) / TimbreFiscalDigital (opcional)

Los demás nodos del estándar se ignoran.
"""
from loguru import logger

from .exceptions import CFDIError, InvalidNumberError, MalformedXMLError, MissingFieldError
from .logging_config import configurar_logging
from .models import (
    Concept,
    ConceptList,
    Document,
    FiscalStamp,
    Issuer,
    Recipient,
    Supplement,
    VoucherType,
)
from .summary import Summary, to_summary
from .xml_parser import CFDIParser, parse_cfdi

logger.disable("cfdi")

__version__ = "0.2.0"

__all__ = [
    'parse_cfdi',
    'CFDIParser',
    'to_summary',
    'Summary',
    'Document',
    'Issuer',
    'Recipient',
    'Concept',
    'ConceptList',
    'Supplement',
    'FiscalStamp',
    'VoucherType',
    'CFDIError',
    'MalformedXMLError',
    'MissingFieldError',
    'InvalidNumberError',
    'configurar_logging',
]
