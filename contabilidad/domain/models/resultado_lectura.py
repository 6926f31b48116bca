"""
Modelo de dominio: Resultado de leer un archivo contable.

Los lectores (cuentas, asientos, balance inicial) no tocan el cuadro:
devuelven los registros que han entendido y las líneas que han tenido
que descartar. El ProcesadorContable decide qué hacer con cada cosa.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class RegistroCuenta:
    """Una cuenta leída de un archivo de definición de cuentas."""

    codigo: str
    nombre: str
    linea: int
    """Número de línea (empezando en 1) en el archivo de origen."""


@dataclass(frozen=True)
class RegistroAsiento:
    """Un asiento leído de un archivo, todavía sin resolver las cuentas."""

    codigo: str
    """Código que tendrá el asiento en el libro diario."""

    fecha: date | None
    """Fecha del asiento. None = la decide el cuadro (hoy)."""

    concepto: str

    debe: tuple[tuple[str, Decimal], ...]
    """Pares (código de cuenta, importe) del debe."""

    haber: tuple[tuple[str, Decimal], ...]
    """Pares (código de cuenta, importe) del haber."""

    linea: int = 1
    """Línea del archivo donde empieza el asiento."""


@dataclass(frozen=True)
class LineaDescartada:
    """Una línea (o bloque) que el lector no pudo interpretar."""

    archivo: str
    linea: int
    motivo: str


@dataclass(frozen=True)
class ResultadoLectura:
    """Todo lo que un lector extrajo de un archivo."""

    archivo: str
    """Nombre del archivo leído."""

    cuentas: tuple[RegistroCuenta, ...] = field(default_factory=tuple)
    asientos: tuple[RegistroAsiento, ...] = field(default_factory=tuple)
    descartes: tuple[LineaDescartada, ...] = field(default_factory=tuple)

    @property
    def esta_vacio(self) -> bool:
        return not self.cuentas and not self.asientos
