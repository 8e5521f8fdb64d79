"""
Configuración de logging con loguru.

El paquete deshabilita sus logs al importarse; la aplicación que lo usa
los habilita llamando a configurar_logging().
"""
import sys
from typing import Optional

from loguru import logger

from .settings import get_settings


def configurar_logging(level: Optional[str] = None, sink=sys.stderr) -> int:
    """
    Habilitar los logs del paquete y agregar un handler

    Args:
        level: Nivel mínimo; por defecto el de la configuración
        sink: Destino de los logs (stream, ruta o callable)

    Returns:
        Id del handler agregado, para poder removerlo con logger.remove()
    """
    logger.enable("cfdi")
    return logger.add(
        sink,
        format=get_settings().log_format,
        level=(level or get_settings().log_level).upper(),
        filter="cfdi",
    )
