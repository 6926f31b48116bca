"""
Modelos de dominio del presupuesto.

- RangoFechas: periodo al que se aplica un presupuesto. Por defecto, el
  mes natural siguiente a hoy.
- ItemPresupuesto: un gasto previsto, diario o puntual, contra una cuenta.
- ComparacionPartida: lo presupuestado frente a lo gastado en una cuenta.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from contabilidad.domain.exceptions import RangoFechasError

ANCHO_BARRA = 20
PORCENTAJE_POR_MARCA = Decimal("5")


@dataclass(frozen=True)
class RangoFechas:
    """Intervalo cerrado [inicio, fin]."""

    inicio: date
    fin: date

    def __post_init__(self) -> None:
        if self.fin < self.inicio:
            raise RangoFechasError(self.inicio, self.fin)

    @classmethod
    def crear(
        cls,
        inicio: date | None = None,
        fin: date | None = None,
        hoy: date | None = None,
    ) -> "RangoFechas":
        """Crea un rango; las fechas que falten se toman del mes siguiente.

        Args:
            inicio: Primer día incluido. Por defecto, el día 1 del mes siguiente.
            fin: Último día incluido. Por defecto, el último día del mes siguiente.
            hoy: Fecha de referencia para los valores por defecto.

        Raises:
            RangoFechasError: Si fin es anterior a inicio.
        """
        hoy = hoy or date.today()
        primero_siguiente = _primer_dia_mes_siguiente(hoy)
        ultimo_siguiente = _primer_dia_mes_siguiente(primero_siguiente) - timedelta(days=1)
        return cls(inicio=inicio or primero_siguiente, fin=fin or ultimo_siguiente)

    @property
    def dias(self) -> int:
        """Número de días del rango, contando los dos extremos."""
        return (self.fin - self.inicio).days + 1

    def contiene(self, fecha: date) -> bool:
        return self.inicio <= fecha <= self.fin


class TipoImporte(Enum):
    DIARIO = "diario"
    PUNTUAL = "puntual"


@dataclass(frozen=True)
class ItemPresupuesto:
    """Un gasto previsto contra una cuenta."""

    concepto: str
    codigo_cuenta: str
    importe: Decimal
    tipo: TipoImporte

    def importe_en(self, rango: RangoFechas) -> Decimal:
        """Importe total del item en el rango: los diarios se multiplican
        por el número de días."""
        if self.tipo is TipoImporte.DIARIO:
            return self.importe * rango.dias
        return self.importe


@dataclass(frozen=True)
class ComparacionPartida:
    """Lo presupuestado frente a lo gastado en una cuenta."""

    codigo_cuenta: str
    nombre: str
    gastado: Decimal
    presupuestado: Decimal

    @property
    def porcentaje(self) -> Decimal:
        """Porcentaje consumido del presupuesto. 0 si no hay presupuesto."""
        if self.presupuestado == 0:
            return Decimal("0")
        return self.gastado * 100 / self.presupuestado

    @property
    def barra(self) -> str:
        """Una marca '#' por cada 5 %, rellenado con '-' hasta 20 caracteres."""
        marcas = (self.porcentaje / PORCENTAJE_POR_MARCA).quantize(Decimal("1"), ROUND_HALF_UP)
        marcas = max(int(marcas), 0)
        return f"{'#' * marcas:-<{ANCHO_BARRA}}"


def _primer_dia_mes_siguiente(fecha: date) -> date:
    if fecha.month == 12:
        return date(fecha.year + 1, 1, 1)
    return date(fecha.year, fecha.month + 1, 1)
