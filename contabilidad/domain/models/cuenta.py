"""
Modelo de dominio: Cuenta contable.

A diferencia del resto de modelos, Cuenta NO es inmutable: el cuadro
rehace sus totales cada vez que mayoriza. Solo Cuadro.mayorizar_cuenta()
debería llamar a reiniciar() y anotar(); el resto del código la trata
como de solo lectura.

Invariante: saldo == saldo_deudor - saldo_acreedor, donde saldo_deudor y
saldo_acreedor son las sumas del debe y del haber de los apuntes.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from contabilidad.domain.models.apunte_mayor import ApunteMayor, Lado
from contabilidad.domain.models.masa import Masa


@dataclass
class Cuenta:
    """Cuenta del cuadro con los totales de la última mayorización."""

    codigo: str
    """Código único dentro del cuadro. Ejemplo: "4300"."""

    nombre: str
    """Nombre de la cuenta. Ejemplo: "Clientes (euros)"."""

    masa: Masa
    """Masa patrimonial a la que pertenece."""

    saldo_deudor: Decimal = Decimal("0")
    """Suma de los importes anotados en el debe."""

    saldo_acreedor: Decimal = Decimal("0")
    """Suma de los importes anotados en el haber."""

    apuntes: list[ApunteMayor] = field(default_factory=list)
    """Apuntes del libro mayor, en el orden del libro diario."""

    def __post_init__(self) -> None:
        if not self.codigo or not self.codigo.strip():
            raise ValueError("El código de la cuenta no puede estar vacío")

    @property
    def saldo(self) -> Decimal:
        """Saldo de la cuenta: positivo si es deudor, negativo si es acreedor."""
        return self.saldo_deudor - self.saldo_acreedor

    @property
    def debe(self) -> list[ApunteMayor]:
        return [a for a in self.apuntes if a.lado is Lado.DEBE]

    @property
    def haber(self) -> list[ApunteMayor]:
        return [a for a in self.apuntes if a.lado is Lado.HABER]

    @property
    def tiene_movimientos(self) -> bool:
        return bool(self.apuntes)

    def reiniciar(self) -> None:
        """Borra los apuntes y pone los totales a cero."""
        self.apuntes = []
        self.saldo_deudor = Decimal("0")
        self.saldo_acreedor = Decimal("0")

    def anotar(
        self,
        lado: Lado,
        importe: Decimal,
        fecha: date,
        codigo_asiento: str,
        concepto: str,
    ) -> ApunteMayor:
        """Añade un apunte al mayor de la cuenta y actualiza los totales.

        Returns:
            El apunte creado, con el saldo acumulado tras aplicarlo.
        """
        if lado is Lado.DEBE:
            self.saldo_deudor += importe
        else:
            self.saldo_acreedor += importe

        apunte = ApunteMayor(
            fecha=fecha,
            codigo_asiento=codigo_asiento,
            concepto=concepto,
            lado=lado,
            importe=importe,
            saldo=self.saldo,
        )
        self.apuntes.append(apunte)
        return apunte

    def __str__(self) -> str:
        return f"({self.codigo}) {self.nombre}"
