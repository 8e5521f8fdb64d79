"""
Configuración del parser de CFDI
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values


def _leer_entorno(base_dir: Path) -> Dict[str, Optional[str]]:
    """
    Variables de .env, entorno del proceso y .env.local, en ese orden de prioridad.

    .env.local sobreescribe todo (para desarrollo sin modificar el .env compartido).
    No se modifica os.environ.
    """
    return {
        **dotenv_values(base_dir / '.env'),
        **os.environ,
        **dotenv_values(base_dir / '.env.local'),
    }


def _env_bool(valor: Optional[str]) -> bool:
    return (valor or '').strip().lower() in ('1', 'true', 'yes', 'si')


@dataclass
class Settings:
    """Configuración principal del parser"""

    # Configuración de logging
    log_level: str = "INFO"
    log_format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"

    # Sin límites de tamaño/profundidad de lxml: las Addendas pueden traer PDFs en base64
    huge_tree: bool = True

    @classmethod
    def from_env(cls, base_dir: Union[str, Path, None] = None,
                 environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Crear configuración desde variables de entorno

        Args:
            base_dir: Directorio con los archivos .env (por defecto el directorio actual)
            environ: Variables a usar en lugar de .env + os.environ
        """
        if environ is None:
            environ = _leer_entorno(Path(base_dir) if base_dir else Path.cwd())

        return cls(
            log_level=(environ.get('CFDI_LOG_LEVEL') or 'INFO').upper(),
            log_format=environ.get('CFDI_LOG_FORMAT') or cls.log_format,
            huge_tree=_env_bool(environ.get('CFDI_XML_HUGE_TREE', 'true')),
        )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Configuración global, se lee la primera vez que se usa"""
    return Settings.from_env()
