"""
XMLs de prueba compartidos (CFDI 4.0 simplificados)
"""
import pytest


XML_TIMBRADO = """<?xml version="1.0" encoding="UTF-8"?>
<cfdi:Comprobante xmlns:cfdi="http://www.sat.gob.mx/cfd/4"
    xmlns:tfd="http://www.sat.gob.mx/TimbreFiscalDigital"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    Version="4.0"
    Serie="A"
    Folio="12345"
    Fecha="2024-01-15T10:30:00"
    FormaPago="03"
    SubTotal="10000.00"
    Descuento="150.00"
    Moneda="MXN"
    Total="11600.00"
    TipoDeComprobante="I"
    MetodoPago="PUE"
    LugarExpedicion="06600">

    <cfdi:InformacionGlobal Periodicidad="01" Meses="01" Año="2024"/>

    <cfdi:Emisor
        Rfc="XAXX010101000"
        Nombre="PROVEEDOR DE PRUEBA SA DE CV"
        RegimenFiscal="601"/>

    <cfdi:Receptor
        Rfc="CACX7605101P8"
        Nombre="CARNICERIA MARIA CRISTINA"
        UsoCFDI="G03"
        DomicilioFiscalReceptor="06600"
        RegimenFiscalReceptor="612"/>

    <cfdi:Conceptos>
        <cfdi:Concepto
            ClaveProdServ="10101500"
            Cantidad="100"
            ClaveUnidad="KGM"
            Unidad="Kilogramo"
            Descripcion="CARNE DE RES PRIMERA"
            ValorUnitario="90.500"
            Importe="9050.00"
            Descuento="150.00"
            ObjetoImp="02">
            <cfdi:Impuestos>
                <cfdi:Traslados>
                    <cfdi:Traslado
                        Base="9050.00"
                        Impuesto="002"
                        TipoFactor="Tasa"
                        TasaOCuota="0.160000"
                        Importe="1448.00"/>
                </cfdi:Traslados>
            </cfdi:Impuestos>
        </cfdi:Concepto>
        <cfdi:Concepto
            ClaveProdServ="10101501"
            Cantidad="10.5"
            ClaveUnidad="KGM"
            Descripcion="CARNE DE CERDO"
            ValorUnitario="80"
            Importe="840.00"
            ObjetoImp="02"/>
        <cfdi:Concepto
            ClaveProdServ="50112000"
            Cantidad="1"
            ClaveUnidad="H87"
            Unidad="Pieza"
            Descripcion="CHORIZO"
            ValorUnitario="110.00"
            Importe="110.00"
            ObjetoImp="01"/>
    </cfdi:Conceptos>

    <cfdi:Impuestos TotalImpuestosTrasladados="1600.00">
        <cfdi:Traslados>
            <cfdi:Traslado
                Base="10000.00"
                Impuesto="002"
                TipoFactor="Tasa"
                TasaOCuota="0.160000"
                Importe="1600.00"/>
        </cfdi:Traslados>
    </cfdi:Impuestos>

    <cfdi:Complemento>
        <tfd:TimbreFiscalDigital
            Version="1.1"
            UUID="ABC12345-6789-0ABC-DEF0-123456789ABC"
            FechaTimbrado="2024-01-15T10:35:00"
            SelloCFD="..."
            NoCertificadoSAT="00001000000504465028"
            SelloSAT="..."/>
    </cfdi:Complemento>

</cfdi:Comprobante>
"""


XML_MINIMO = """<?xml version="1.0" encoding="UTF-8"?>
<cfdi:Comprobante xmlns:cfdi="http://www.sat.gob.mx/cfd/4"
    Total="100.00" SubTotal="100.00" Fecha="2024-01-01T12:00:00" TipoDeComprobante="I">
    <cfdi:Emisor Rfc="XAXX010101000" Nombre="EMISOR" RegimenFiscal="601"/>
    <cfdi:Receptor Rfc="XEXX010101000" Nombre="RECEPTOR" RegimenFiscalReceptor="616" UsoCFDI="S01"/>
    <cfdi:Conceptos>
        <cfdi:Concepto ClaveProdServ="01010101" Cantidad="1" ClaveUnidad="ACT"
            Descripcion="VENTA" ValorUnitario="100.00" Importe="100.00"/>
    </cfdi:Conceptos>
</cfdi:Comprobante>
"""


@pytest.fixture
def xml_timbrado() -> str:
    return XML_TIMBRADO


@pytest.fixture
def xml_minimo() -> str:
    return XML_MINIMO
