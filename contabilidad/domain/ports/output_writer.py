"""
Puerto de salida: Escritor de informes.

El cuadro produce un InformeContable y se lo pasa a quien implemente
este puerto. Hoy hay un escritor de texto y otro de Excel; el dominio no
sabe cuál se está usando.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from contabilidad.domain.models.informe import InformeContable


class OutputWriter(ABC):
    """Interfaz para escribir informes contables."""

    extension: str = ""
    """Extensión (con punto) que el escritor fuerza en la ruta de salida."""

    @abstractmethod
    def write(self, informe: InformeContable, output_path: Path) -> Path:
        """Escribe el informe en un archivo.

        Args:
            informe: Diario, mayor y sumas y saldos a escribir.
            output_path: Ruta donde crear el archivo.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
