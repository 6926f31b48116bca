"""
Modelo de dominio: Asiento contable.

Un Asiento agrupa los movimientos del debe y del haber de una operación,
con su fecha, su concepto y un código único dentro del libro diario.

Decisiones de diseño:
- Las tuplas debe/haber hacen el asiento inmutable de verdad: un asiento
  ya registrado no cambia. Para corregirlo se registra otro con el mismo
  código, que sustituye al anterior.
- El asiento NO se niega a existir si está descuadrado. Es
  Cuadro.crear_asiento() quien rechaza registrarlo; así el lector puede
  construir el asiento y el cuadro decide qué hacer con él.
- Los totales se comparan redondeados a céntimos.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from contabilidad.domain.models.apunte_mayor import Lado
from contabilidad.domain.models.movimiento import Movimiento
from contabilidad.domain.shared.money import redondear

ANCHO_CABECERA = 120


@dataclass(frozen=True)
class Asiento:
    """Asiento del libro diario."""

    concepto: str
    """Descripción de la operación. Puede tener varias líneas."""

    fecha: date
    """Fecha contable del asiento."""

    codigo: str
    """Código único dentro del libro diario. Ejemplo: "20240105-1"."""

    debe: tuple[Movimiento, ...]
    """Movimientos del debe, en el orden en que se anotaron."""

    haber: tuple[Movimiento, ...]
    """Movimientos del haber, en el orden en que se anotaron."""

    def __post_init__(self) -> None:
        # Se aceptan listas al construir; se guardan como tuplas
        object.__setattr__(self, "debe", tuple(self.debe))
        object.__setattr__(self, "haber", tuple(self.haber))

        if not self.codigo or not self.codigo.strip():
            raise ValueError("El código del asiento no puede estar vacío")
        if not self.debe:
            raise ValueError(f"El asiento '{self.codigo}' no tiene movimientos en el debe")
        if not self.haber:
            raise ValueError(f"El asiento '{self.codigo}' no tiene movimientos en el haber")

    # --- Propiedades derivadas ---

    @property
    def total_debe(self) -> Decimal:
        return sum((m.importe for m in self.debe), Decimal("0"))

    @property
    def total_haber(self) -> Decimal:
        return sum((m.importe for m in self.haber), Decimal("0"))

    @property
    def diferencia(self) -> Decimal:
        """total_debe - total_haber, redondeado a céntimos."""
        return redondear(self.total_debe) - redondear(self.total_haber)

    @property
    def esta_equilibrado(self) -> bool:
        """True si el debe y el haber suman lo mismo al redondear a céntimos."""
        return self.diferencia == Decimal("0")

    def movimientos(self) -> Iterator[tuple[Lado, Movimiento]]:
        """Recorre los movimientos del debe y luego los del haber."""
        for mov in self.debe:
            yield Lado.DEBE, mov
        for mov in self.haber:
            yield Lado.HABER, mov

    def cabecera(self, ancho: int = ANCHO_CABECERA) -> str:
        """Recuadro con el código, las líneas del concepto y la fecha.

        Ejemplo (ancho reducido):
            +--------------+
            |  N.º 0001    |
            |  Compra      |
            |  2024-01-05  |
            +--------------+
        """
        interior = ancho - 2
        lineas = [f"+{'-' * interior}+", f"|{'N.º ' + self.codigo:^{interior}}|"]
        for linea in self.concepto.split("\n"):
            lineas.append(f"|{linea:^{interior}}|")
        lineas.append(f"|{self.fecha.isoformat():^{interior}}|")
        lineas.append(f"+{'-' * interior}+")
        return "\n".join(lineas)

    def __str__(self) -> str:
        return self.cabecera()
