"""
Modelo de dominio: Apunte del libro mayor.

Cada apunte es una línea del mayor de una cuenta: un movimiento del
libro diario que afecta a esa cuenta, con el saldo acumulado tras
aplicarlo. Los genera Cuadro.mayorizar_cuenta() al recorrer el diario.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Lado(Enum):
    """Lado del asiento en el que está un movimiento."""

    DEBE = "debe"
    HABER = "haber"


@dataclass(frozen=True)
class ApunteMayor:
    """Una línea del libro mayor de una cuenta."""

    fecha: date
    """Fecha del asiento de origen."""

    codigo_asiento: str
    """Código del asiento de origen en el libro diario."""

    concepto: str
    """Concepto del asiento de origen."""

    lado: Lado
    """DEBE o HABER."""

    importe: Decimal
    """Importe del movimiento."""

    saldo: Decimal
    """Saldo de la cuenta (debe - haber) después de este apunte."""

    @property
    def debe(self) -> Decimal:
        return self.importe if self.lado is Lado.DEBE else Decimal("0")

    @property
    def haber(self) -> Decimal:
        return self.importe if self.lado is Lado.HABER else Decimal("0")
