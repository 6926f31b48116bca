"""
Modelo de dominio: Movimiento contable.

Un Movimiento es una anotación en un lado (debe o haber) de un asiento:
un importe contra una cuenta. El lado no es un campo del movimiento; lo
determina la tupla del Asiento en la que está.

Decisiones de diseño:
- Se usa `Decimal` para importes. Si llega un int o un float se
  convierte (los float a través de str()) para que 20.0 + 0.1 no arrastre
  errores de redondeo.
- El nombre de la cuenta se copia en el movimiento al crearlo. Así el
  libro diario se puede imprimir sin consultar el cuadro.
"""

from dataclasses import dataclass
from decimal import Decimal

from contabilidad.domain.shared.money import to_importe


@dataclass(frozen=True)
class Movimiento:
    """Anotación inmutable de un importe contra una cuenta."""

    importe: Decimal
    """Importe de la anotación. Puede ser negativo (rectificaciones)."""

    codigo_cuenta: str
    """Código de la cuenta afectada. Ejemplo: "572"."""

    nombre_cuenta: str = ""
    """Nombre de la cuenta en el momento de crear el movimiento."""

    def __post_init__(self) -> None:
        if not isinstance(self.importe, Decimal):
            # frozen=True: la conversión se hace saltándose __setattr__
            object.__setattr__(self, "importe", to_importe(self.importe))
        if not self.codigo_cuenta or not self.codigo_cuenta.strip():
            raise ValueError("codigo_cuenta no puede estar vacío")
