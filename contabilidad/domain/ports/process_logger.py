"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar lo que pasa mientras se cargan las
cuentas, el balance inicial y los archivos de asientos.

El puerto define EVENTOS de negocio ("se descartó la línea 12 de
cuentas.txt", "el asiento 20240105 sustituye a uno anterior"), no niveles
de log. La implementación decide cómo mostrarlos:
- En terminal: imprimir a consola (ConsoleLogger).
- En tests: acumular y comprobar get_summary().
"""

from abc import ABC, abstractmethod
from pathlib import Path

from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.masa import Masa


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se empieza a leer un archivo.

        Args:
            file_path: Ruta del archivo.
            file_type: Qué contiene: 'cuentas', 'asientos', 'balance inicial'.
        """
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo no se procesó.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "El nombre no empieza por una fecha"
        """
        ...

    @abstractmethod
    def log_file_processed(self, file_path: Path, num_registros: int) -> None:
        """Registra el fin de la lectura de un archivo y cuántos registros aportó."""
        ...

    @abstractmethod
    def log_line_discarded(self, file_path: Path, line_number: int, reason: str) -> None:
        """Registra una línea (o un asiento completo) que no se pudo interpretar.

        Args:
            file_path: Archivo de origen.
            line_number: Línea donde empieza lo descartado (desde 1).
            reason: Motivo. Ejemplo: "Importe inválido: 'veinte'"
        """
        ...

    # --- Cuadro ---

    @abstractmethod
    def log_cuenta_creada(self, codigo: str, nombre: str, masa: Masa) -> None:
        """Registra el alta de una cuenta leída de un archivo."""
        ...

    @abstractmethod
    def log_codigo_no_clasificable(self, codigo: str, origen: str) -> None:
        """Registra un código de cuenta sin masa patrimonial.

        Args:
            codigo: Código descartado.
            origen: De dónde venía: 'PGC' o el nombre del archivo.
        """
        ...

    @abstractmethod
    def log_asiento_registrado(self, asiento: Asiento) -> None:
        """Registra un asiento nuevo en el libro diario."""
        ...

    @abstractmethod
    def log_asiento_reemplazado(self, asiento: Asiento) -> None:
        """Registra un asiento que sustituyó a otro con el mismo código."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error que impidió procesar un archivo o un asiento."""
        ...

    @abstractmethod
    def log_carga_completa(self, num_cuentas: int, num_asientos: int) -> None:
        """Registra el estado del cuadro al terminar la carga."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'lineas_descartadas': int,
                'cuentas_creadas': int,
                'codigos_no_clasificables': int,
                'asientos_registrados': int,
                'asientos_reemplazados': int,
                'errores': list[dict],  # [{archivo, error}]
            }
        """
        ...
