"""
Servicio de dominio: Presupuesto.

Un presupuesto reparte una previsión de gastos entre cuentas del cuadro
para un periodo (por defecto, el mes que viene) y la compara con lo que
dice el libro diario para ese mismo periodo.
"""

from datetime import date
from decimal import Decimal

from contabilidad.domain.models.presupuesto import (
    ComparacionPartida,
    ItemPresupuesto,
    RangoFechas,
    TipoImporte,
)
from contabilidad.domain.services.cuadro import Cuadro
from contabilidad.domain.shared.money import to_importe


class Presupuesto:
    """Previsión de gastos por cuenta para un rango de fechas."""

    def __init__(
        self,
        cuadro: Cuadro,
        inicio: date | None = None,
        fin: date | None = None,
    ) -> None:
        """
        Args:
            cuadro: Cuadro contra el que se validan las cuentas y se compara.
            inicio: Primer día del periodo. Por defecto, el 1 del mes siguiente.
            fin: Último día del periodo. Por defecto, el último del mes siguiente.

        Raises:
            RangoFechasError: Si fin es anterior a inicio.
        """
        self._cuadro = cuadro
        self.fechas = RangoFechas.crear(inicio, fin)
        self._items: list[ItemPresupuesto] = []
        self._partidas: dict[str, Decimal] = {}

    @property
    def items(self) -> list[ItemPresupuesto]:
        return list(self._items)

    @property
    def partidas(self) -> dict[str, Decimal]:
        """Importe presupuestado por código de cuenta."""
        return dict(self._partidas)

    def insertar_gasto_diario(
        self, concepto: str, codigo_cuenta: str, importe: Decimal | int | float | str
    ) -> ItemPresupuesto:
        """Añade un gasto que se repite cada día del periodo.

        Raises:
            CuentaInexistenteError: Si la cuenta no está en el cuadro.
        """
        return self._insertar(concepto, codigo_cuenta, importe, TipoImporte.DIARIO)

    def insertar_gasto_puntual(
        self, concepto: str, codigo_cuenta: str, importe: Decimal | int | float | str
    ) -> ItemPresupuesto:
        """Añade un gasto que ocurre una sola vez en el periodo.

        Raises:
            CuentaInexistenteError: Si la cuenta no está en el cuadro.
        """
        return self._insertar(concepto, codigo_cuenta, importe, TipoImporte.PUNTUAL)

    def comparar(self) -> list[ComparacionPartida]:
        """Compara cada partida con lo anotado en el diario dentro del periodo.

        Lo gastado en una cuenta es la suma de sus movimientos del debe menos
        los del haber, solo de los asientos cuya fecha cae en el periodo.

        Returns:
            Una comparación por cuenta presupuestada, de mayor a menor
            importe presupuestado.
        """
        gastado = {codigo: Decimal("0") for codigo in self._partidas}
        for asiento in self._cuadro.libro_diario:
            if not self.fechas.contiene(asiento.fecha):
                continue
            for mov in asiento.debe:
                if mov.codigo_cuenta in gastado:
                    gastado[mov.codigo_cuenta] += mov.importe
            for mov in asiento.haber:
                if mov.codigo_cuenta in gastado:
                    gastado[mov.codigo_cuenta] -= mov.importe

        comparaciones = [
            ComparacionPartida(
                codigo_cuenta=codigo,
                nombre=self._cuadro.cuenta(codigo).nombre,
                gastado=gastado[codigo],
                presupuestado=presupuestado,
            )
            for codigo, presupuestado in self._partidas.items()
        ]
        comparaciones.sort(key=lambda c: c.presupuestado, reverse=True)
        return comparaciones

    def _insertar(
        self,
        concepto: str,
        codigo_cuenta: str,
        importe: Decimal | int | float | str,
        tipo: TipoImporte,
    ) -> ItemPresupuesto:
        cuenta = self._cuadro.cuenta(codigo_cuenta)
        item = ItemPresupuesto(
            concepto=concepto,
            codigo_cuenta=cuenta.codigo,
            importe=to_importe(importe),
            tipo=tipo,
        )
        self._partidas[cuenta.codigo] = (
            self._partidas.get(cuenta.codigo, Decimal("0")) + item.importe_en(self.fechas)
        )
        self._items.append(item)
        return item
