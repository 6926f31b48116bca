"""
Modelo de dominio: Informe contable.

Es lo que el cuadro entrega a los escritores de salida (texto, Excel):
una foto del libro diario, del mayor de las cuentas pedidas y del
balance de sumas y saldos. Los escritores no consultan el cuadro; solo
leen este informe.
"""

from dataclasses import dataclass
from decimal import Decimal

from contabilidad.domain.models.apunte_mayor import ApunteMayor
from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.masa import Masa
from contabilidad.domain.models.sumas_y_saldos import SumasYSaldos


@dataclass(frozen=True)
class MayorCuenta:
    """Libro mayor de una cuenta."""

    codigo: str
    nombre: str
    masa: Masa
    apuntes: tuple[ApunteMayor, ...]

    @property
    def total_debe(self) -> Decimal:
        return sum((a.debe for a in self.apuntes), Decimal("0"))

    @property
    def total_haber(self) -> Decimal:
        return sum((a.haber for a in self.apuntes), Decimal("0"))

    @property
    def saldo(self) -> Decimal:
        return self.total_debe - self.total_haber


@dataclass(frozen=True)
class InformeContable:
    """Libro diario, libro mayor y sumas y saldos de un cuadro."""

    libro_diario: tuple[Asiento, ...]
    """Asientos en el orden del diario."""

    libro_mayor: tuple[MayorCuenta, ...]
    """Mayor de las cuentas incluidas, ordenado por código."""

    sumas_y_saldos: SumasYSaldos
