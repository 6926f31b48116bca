"""
Puerto de entrada: Lector de archivos contables.

Cada formato de archivo (definición de cuentas, asientos diarios, balance
inicial) tiene su adaptador. Todos devuelven un ResultadoLectura con los
registros entendidos y las líneas descartadas; ninguno toca el cuadro.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from contabilidad.domain.models.resultado_lectura import ResultadoLectura


class LectorContable(ABC):
    """Interfaz que todo lector de archivos contables debe implementar."""

    @property
    @abstractmethod
    def tipo(self) -> str:
        """Qué lee este lector. Ejemplo: 'asientos'."""
        ...

    @abstractmethod
    def leer(self, ruta: Path) -> ResultadoLectura:
        """Lee un archivo y devuelve lo que se pudo interpretar.

        Las líneas mal formadas no interrumpen la lectura: se devuelven en
        ResultadoLectura.descartes.

        Raises:
            LecturaError: Si el archivo no se puede abrir o decodificar.
            FormatoInvalidoError: Si el archivo entero es inválido (por
                                  ejemplo, un nombre sin fecha).
        """
        ...
