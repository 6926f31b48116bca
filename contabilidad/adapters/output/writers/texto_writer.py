"""
Adaptador de salida: Escritor de texto.

Genera los listados contables en texto plano, tal y como se imprimen en
la terminal:
- Libro diario: cada asiento con su recuadro de cabecera y sus
  movimientos, el debe a la izquierda y el haber a la derecha.
- Libro mayor: por cuenta, cada apunte con su saldo acumulado.
- Balance de sumas y saldos, con sus totales.

También da formato al informe de un presupuesto (render_presupuesto).
"""

from collections.abc import Iterable
from itertools import zip_longest
from pathlib import Path

from contabilidad.domain.exceptions import OutputError
from contabilidad.domain.models.asiento import ANCHO_CABECERA, Asiento
from contabilidad.domain.models.informe import InformeContable, MayorCuenta
from contabilidad.domain.models.movimiento import Movimiento
from contabilidad.domain.models.presupuesto import ComparacionPartida
from contabilidad.domain.models.sumas_y_saldos import SumasYSaldos
from contabilidad.domain.ports.output_writer import OutputWriter
from contabilidad.domain.shared.money import format_importe

# Ancho de cada mitad (debe / haber) en las líneas de movimientos
ANCHO_LADO = (ANCHO_CABECERA - 3) // 2


class TextoWriter(OutputWriter):
    """Genera el diario, el mayor y las sumas y saldos en texto plano."""

    extension = ".txt"

    def render(self, informe: InformeContable) -> str:
        """Devuelve el informe completo como texto."""
        secciones = [
            self.render_diario(informe.libro_diario),
            self.render_mayor(informe.libro_mayor),
            self.render_sumas_y_saldos(informe.sumas_y_saldos),
        ]
        return "\n\n".join(secciones) + "\n"

    def write(self, informe: InformeContable, output_path: Path) -> Path:
        """Escribe el informe en un archivo de texto UTF-8.

        Args:
            informe: Informe a escribir.
            output_path: Ruta del archivo. Si no termina en .txt, se le
                        agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(informe), encoding="utf-8")
        except OSError as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # Secciones
    # =================================================================

    def render_diario(self, asientos: Iterable[Asiento]) -> str:
        lineas = _titulo("LIBRO DIARIO")
        vacio = True
        for asiento in asientos:
            vacio = False
            lineas.append(asiento.cabecera())
            lineas.append(f"{'DEBE':<{ANCHO_LADO}} | {'HABER'}")
            for debe, haber in zip_longest(asiento.debe, asiento.haber):
                lineas.append(f"{_celda(debe):<{ANCHO_LADO}} | {_celda(haber)}".rstrip())
            lineas.append(
                f"{'Total ' + format_importe(asiento.total_debe):>{ANCHO_LADO}} | "
                f"{'Total ' + format_importe(asiento.total_haber):>{ANCHO_LADO}}"
            )
            lineas.append("")
        if vacio:
            lineas.append("  (sin asientos)")
        return "\n".join(lineas).rstrip()

    def render_mayor(self, mayores: Iterable[MayorCuenta]) -> str:
        lineas = _titulo("LIBRO MAYOR")
        vacio = True
        for mayor in mayores:
            vacio = False
            lineas.append(f"({mayor.codigo:>6}) {mayor.nombre} [{mayor.masa}]")
            lineas.append(
                f"  {'Fecha':<10}  {'Asiento':<14}  {'Concepto':<40}  "
                f"{'Debe':>16}  {'Haber':>16}  {'Saldo':>16}"
            )
            for apunte in mayor.apuntes:
                concepto = apunte.concepto.split("\n")[0]
                lineas.append(
                    f"  {apunte.fecha.isoformat():<10}  {apunte.codigo_asiento:<14.14}  "
                    f"{concepto:<40.40}  {_importe_o_vacio(apunte.debe):>16}  "
                    f"{_importe_o_vacio(apunte.haber):>16}  {format_importe(apunte.saldo):>16}"
                )
            lineas.append(
                f"  {'Totales':<70}  {format_importe(mayor.total_debe):>16}  "
                f"{format_importe(mayor.total_haber):>16}  {format_importe(mayor.saldo):>16}"
            )
            lineas.append("")
        if vacio:
            lineas.append("  (sin cuentas con movimientos)")
        return "\n".join(lineas).rstrip()

    def render_sumas_y_saldos(self, balance: SumasYSaldos) -> str:
        lineas = _titulo("BALANCE DE SUMAS Y SALDOS")
        lineas.append(
            f"  {'Cuenta':>8}  {'Nombre':<36}  {'Suma debe':>16}  {'Suma haber':>16}  "
            f"{'Saldo deudor':>16}  {'Saldo acreedor':>16}"
        )
        for fila in balance.filas:
            lineas.append(
                f"  {fila.codigo:>8}  {fila.nombre:<36.36}  {format_importe(fila.suma_debe):>16}  "
                f"{format_importe(fila.suma_haber):>16}  {format_importe(fila.saldo_deudor):>16}  "
                f"{format_importe(fila.saldo_acreedor):>16}"
            )
        lineas.append("  " + "-" * (ANCHO_CABECERA - 4))
        lineas.append(
            f"  {'TOTALES':>8}  {'':<36}  {format_importe(balance.total_debe):>16}  "
            f"{format_importe(balance.total_haber):>16}  "
            f"{format_importe(balance.total_saldo_deudor):>16}  "
            f"{format_importe(balance.total_saldo_acreedor):>16}"
        )
        if not balance.cuadra:
            lineas.append("  ⚠️  Las sumas del debe y del haber no coinciden")
        return "\n".join(lineas)

    def render_presupuesto(self, comparaciones: Iterable[ComparacionPartida]) -> str:
        """Una línea por cuenta: gastado, presupuestado, % consumido y barra.

        Ejemplo:
            Suministros         |    120.00 €|    300.00 €|     40.00 %|########------------
        """
        lineas = []
        for c in comparaciones:
            lineas.append(
                f"{c.nombre:<20}|{c.gastado:>10.2f} €|{c.presupuestado:>10.2f} €|"
                f"{c.porcentaje:>10.2f} %|{c.barra}"
            )
        return "\n".join(lineas)


def _titulo(texto: str) -> list[str]:
    return ["=" * ANCHO_CABECERA, texto, "=" * ANCHO_CABECERA]


def _celda(mov: Movimiento | None) -> str:
    if mov is None:
        return ""
    nombre = mov.nombre_cuenta[:30]
    return f"({mov.codigo_cuenta:>6}) {nombre:<30} {format_importe(mov.importe):>18}"


def _importe_o_vacio(importe) -> str:
    return format_importe(importe) if importe else ""
