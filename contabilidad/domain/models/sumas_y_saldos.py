"""
Modelo de dominio: Balance de sumas y saldos.

Lista, para cada cuenta con movimientos, lo que ha sumado en el debe y en
el haber y su saldo. Si todos los asientos del diario están cuadrados,
el total del debe coincide con el del haber y el de saldos deudores con
el de saldos acreedores.
"""

from dataclasses import dataclass
from decimal import Decimal

from contabilidad.domain.models.masa import Masa


@dataclass(frozen=True)
class FilaSumasYSaldos:
    """Una cuenta del balance de sumas y saldos."""

    codigo: str
    nombre: str
    masa: Masa
    suma_debe: Decimal
    suma_haber: Decimal

    @property
    def saldo(self) -> Decimal:
        return self.suma_debe - self.suma_haber

    @property
    def saldo_deudor(self) -> Decimal:
        return self.saldo if self.saldo > 0 else Decimal("0")

    @property
    def saldo_acreedor(self) -> Decimal:
        return -self.saldo if self.saldo < 0 else Decimal("0")


@dataclass(frozen=True)
class SumasYSaldos:
    """Balance de sumas y saldos completo."""

    filas: tuple[FilaSumasYSaldos, ...]
    """Filas ordenadas por código de cuenta."""

    @property
    def total_debe(self) -> Decimal:
        return sum((f.suma_debe for f in self.filas), Decimal("0"))

    @property
    def total_haber(self) -> Decimal:
        return sum((f.suma_haber for f in self.filas), Decimal("0"))

    @property
    def total_saldo_deudor(self) -> Decimal:
        return sum((f.saldo_deudor for f in self.filas), Decimal("0"))

    @property
    def total_saldo_acreedor(self) -> Decimal:
        return sum((f.saldo_acreedor for f in self.filas), Decimal("0"))

    @property
    def cuadra(self) -> bool:
        """True si las sumas del debe y del haber coinciden."""
        return self.total_debe == self.total_haber
