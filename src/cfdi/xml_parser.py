"""
Parser de XML CFDI 4.0 del SAT
Convierte el texto de una factura electrónica en un Document tipado
"""
import re
from typing import Dict, Iterator, List, Optional, Union

from lxml import etree
from loguru import logger

from . import schema
from .exceptions import CFDIError, InvalidNumberError, MalformedXMLError, MissingFieldError
from .models import Concept, ConceptList, Document, FiscalStamp, Issuer, Recipient, Supplement
from .settings import get_settings

# Decimal con dígitos ASCII y exponente opcional, o inf/infinity/nan
NUMERO_RE = re.compile(
    r'[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)',
    re.ASCII | re.IGNORECASE,
)


def _local_name(elem: etree._Element) -> str:
    """Nombre del nodo sin namespace"""
    return etree.QName(elem).localname


def _hijos(elem: etree._Element, tag: str) -> Iterator[etree._Element]:
    """Hijos directos con el nombre local indicado (se ignoran comentarios y PIs)"""
    for child in elem:
        if isinstance(child.tag, str) and _local_name(child) == tag:
            yield child


def _hijo(elem: etree._Element, tag: str) -> Optional[etree._Element]:
    """Único hijo directo con el nombre local indicado; repetido es un error"""
    encontrados = list(_hijos(elem, tag))
    if len(encontrados) > 1:
        raise MalformedXMLError(
            f"{_local_name(elem)}: el nodo '{tag}' aparece {len(encontrados)} veces", tag
        )
    return encontrados[0] if encontrados else None


def _hijo_requerido(elem: etree._Element, tag: str) -> etree._Element:
    hijo = _hijo(elem, tag)
    if hijo is None:
        raise MissingFieldError(_local_name(elem), tag)
    return hijo


def _parse_float(nodo: str, atributo: str, valor: str) -> float:
    if not NUMERO_RE.fullmatch(valor):
        raise InvalidNumberError(nodo, atributo, valor)
    return float(valor)


def _extraer_atributos(elem: etree._Element, nodo: schema.Nodo) -> Dict[str, object]:
    """
    Leer los atributos de un nodo según su tabla del esquema

    Args:
        elem: Elemento XML
        nodo: Definición del nodo en el esquema

    Returns:
        Diccionario campo -> valor listo para construir el modelo
    """
    valores = {}
    for campo in nodo.campos:
        valor = elem.get(campo.atributo)
        if valor is None:
            if campo.requerido:
                raise MissingFieldError(nodo.tag, campo.atributo)
            valores[campo.campo] = None
        elif campo.numerico:
            valores[campo.campo] = _parse_float(nodo.tag, campo.atributo, valor)
        else:
            valores[campo.campo] = valor
    return valores


class CFDIParser:
    """Parser para comprobantes CFDI 4.0 del SAT"""

    def __init__(self, huge_tree: Optional[bool] = None):
        self.errores: List[str] = []
        if huge_tree is None:
            huge_tree = get_settings().huge_tree

        opciones = dict(
            huge_tree=huge_tree,
            resolve_entities=False,
            no_network=True,
        )
        # Para texto ya decodificado se ignora la codificación declarada en el XML
        self._parser_texto = etree.XMLParser(encoding='utf-8', **opciones)
        self._parser_bytes = etree.XMLParser(**opciones)

    def parse_string(self, xml_content: Union[str, bytes]) -> Document:
        """
        Parsear contenido XML de un CFDI

        Args:
            xml_content: Contenido XML como string o bytes

        Returns:
            Document con los datos extraídos

        Raises:
            MalformedXMLError: Si el XML no está bien formado
            MissingFieldError: Si falta un atributo o nodo requerido
            InvalidNumberError: Si un campo numérico no es un número
        """
        try:
            root = self._leer_xml(xml_content)
            document = self._parse_comprobante(root)
        except CFDIError as e:
            logger.error(f"Error al parsear CFDI: {e}")
            self.errores.append(str(e))
            raise

        logger.info(f"CFDI parseado: {document.uuid() or 'sin timbrar'}")
        return document

    def _leer_xml(self, xml_content: Union[str, bytes]) -> etree._Element:
        if isinstance(xml_content, str):
            data, parser = xml_content.encode('utf-8'), self._parser_texto
        else:
            data, parser = xml_content, self._parser_bytes

        try:
            return etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise MalformedXMLError(f"Error de sintaxis XML: {e}") from e

    def _parse_comprobante(self, root: etree._Element) -> Document:
        """Parsear el nodo principal del comprobante"""
        if _local_name(root) != schema.COMPROBANTE.tag:
            raise MissingFieldError('(raíz)', schema.COMPROBANTE.tag)

        atributos = _extraer_atributos(root, schema.COMPROBANTE)

        issuer = Issuer(**_extraer_atributos(
            _hijo_requerido(root, schema.EMISOR.tag), schema.EMISOR
        ))
        recipient = Recipient(**_extraer_atributos(
            _hijo_requerido(root, schema.RECEPTOR.tag), schema.RECEPTOR
        ))
        concept_list = self._parse_conceptos(_hijo_requerido(root, schema.CONCEPTOS.tag))
        supplement = self._parse_complemento(_hijo(root, schema.COMPLEMENTO.tag))

        return Document(
            issuer=issuer,
            recipient=recipient,
            concept_list=concept_list,
            supplement=supplement,
            **atributos,
        )

    def _parse_conceptos(self, conceptos_node: etree._Element) -> ConceptList:
        """Parsear todos los conceptos de la factura"""
        conceptos = [
            Concept(**_extraer_atributos(elem, schema.CONCEPTO))
            for elem in _hijos(conceptos_node, schema.CONCEPTO.tag)
        ]
        if not conceptos:
            logger.warning("El comprobante no tiene conceptos")
        else:
            logger.debug(f"{len(conceptos)} concepto(s) encontrados")
        return ConceptList(tuple(conceptos))

    def _parse_complemento(self, complemento: Optional[etree._Element]) -> Optional[Supplement]:
        """Parsear el complemento; solo se interpreta el TimbreFiscalDigital"""
        if complemento is None:
            logger.debug("Comprobante sin Complemento (no timbrado)")
            return None

        timbre = _hijo(complemento, schema.TIMBRE_FISCAL_DIGITAL.tag)
        if timbre is None:
            logger.debug("Complemento sin TimbreFiscalDigital")
            return Supplement()

        return Supplement(FiscalStamp(**_extraer_atributos(timbre, schema.TIMBRE_FISCAL_DIGITAL)))


def parse_cfdi(xml_content: Union[str, bytes]) -> Document:
    """Intenta generar un Document a partir del texto de un CFDI"""
    return CFDIParser().parse_string(xml_content)
