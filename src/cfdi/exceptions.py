"""
Errores del parser de CFDI
"""
from typing import Optional


class CFDIError(Exception):
    """Error base al deserializar un CFDI"""

    def __init__(self, mensaje: str, entity: Optional[str] = None):
        super().__init__(mensaje)
        self.entity = entity


class MalformedXMLError(CFDIError):
    """El contenido no es XML bien formado"""


class MissingFieldError(CFDIError):
    """Falta un atributo o nodo requerido"""

    def __init__(self, entity: str, field: str):
        super().__init__(f"{entity}: falta el campo requerido '{field}'", entity)
        self.field = field


class InvalidNumberError(CFDIError):
    """Un atributo numérico no se pudo convertir"""

    def __init__(self, entity: str, field: str, value: str):
        super().__init__(
            f"{entity}: el atributo '{field}' no es numérico ({value!r})", entity
        )
        self.field = field
        self.value = value
