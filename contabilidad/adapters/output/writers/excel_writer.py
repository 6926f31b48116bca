"""
Adaptador de salida: Escritor de Excel.

Genera un libro Excel con 3 hojas:
- Diario: una fila por movimiento de cada asiento.
- Mayor: una fila por apunte, con el saldo acumulado de la cuenta.
- Sumas y saldos: una fila por cuenta con movimientos.

Los importes se escriben como números (no como texto) para que se puedan
sumar en la hoja de cálculo; el formato de miles y decimales lo pone
xlsxwriter.
"""

from pathlib import Path

import pandas as pd

from contabilidad.domain.exceptions import OutputError
from contabilidad.domain.models.apunte_mayor import Lado
from contabilidad.domain.models.informe import InformeContable
from contabilidad.domain.ports.output_writer import OutputWriter

HOJA_DIARIO = "Diario"
HOJA_MAYOR = "Mayor"
HOJA_SUMAS_Y_SALDOS = "Sumas y saldos"

COLUMNAS_DIARIO = ["Asiento", "Fecha", "Concepto", "Cuenta", "Nombre", "Debe", "Haber"]
COLUMNAS_MAYOR = ["Cuenta", "Nombre", "Fecha", "Asiento", "Concepto", "Debe", "Haber", "Saldo"]
COLUMNAS_SUMAS_Y_SALDOS = [
    "Cuenta",
    "Nombre",
    "Masa",
    "Suma debe",
    "Suma haber",
    "Saldo deudor",
    "Saldo acreedor",
]


class ExcelWriter(OutputWriter):
    """Genera el informe contable en Excel con formato estandarizado."""

    extension = ".xlsx"

    def write(self, informe: InformeContable, output_path: Path) -> Path:
        """Escribe el informe a Excel.

        Args:
            informe: Diario, mayor y sumas y saldos.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(informe, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _filas_diario(self, informe: InformeContable) -> list[dict]:
        filas = []
        for asiento in informe.libro_diario:
            for lado, mov in asiento.movimientos():
                filas.append(
                    {
                        "Asiento": asiento.codigo,
                        "Fecha": asiento.fecha.strftime("%d/%m/%Y"),
                        "Concepto": asiento.concepto.replace("\n", " "),
                        "Cuenta": mov.codigo_cuenta,
                        "Nombre": mov.nombre_cuenta,
                        "Debe": float(mov.importe) if lado is Lado.DEBE else 0,
                        "Haber": float(mov.importe) if lado is Lado.HABER else 0,
                    }
                )
        return filas

    def _filas_mayor(self, informe: InformeContable) -> list[dict]:
        filas = []
        for mayor in informe.libro_mayor:
            for apunte in mayor.apuntes:
                filas.append(
                    {
                        "Cuenta": mayor.codigo,
                        "Nombre": mayor.nombre,
                        "Fecha": apunte.fecha.strftime("%d/%m/%Y"),
                        "Asiento": apunte.codigo_asiento,
                        "Concepto": apunte.concepto.replace("\n", " "),
                        "Debe": float(apunte.debe),
                        "Haber": float(apunte.haber),
                        "Saldo": float(apunte.saldo),
                    }
                )
        return filas

    def _filas_sumas_y_saldos(self, informe: InformeContable) -> list[dict]:
        return [
            {
                "Cuenta": fila.codigo,
                "Nombre": fila.nombre,
                "Masa": str(fila.masa),
                "Suma debe": float(fila.suma_debe),
                "Suma haber": float(fila.suma_haber),
                "Saldo deudor": float(fila.saldo_deudor),
                "Saldo acreedor": float(fila.saldo_acreedor),
            }
            for fila in informe.sumas_y_saldos.filas
        ]

    def _escribir_excel(self, informe: InformeContable, output_path: Path) -> None:
        """Genera el archivo Excel con las 3 hojas."""
        # Columnas explícitas: un diario vacío sigue teniendo cabeceras
        df_diario = pd.DataFrame(self._filas_diario(informe), columns=COLUMNAS_DIARIO)
        df_mayor = pd.DataFrame(self._filas_mayor(informe), columns=COLUMNAS_MAYOR)
        df_sumas = pd.DataFrame(
            self._filas_sumas_y_saldos(informe), columns=COLUMNAS_SUMAS_Y_SALDOS
        )

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_diario.to_excel(writer, index=False, sheet_name=HOJA_DIARIO)
            df_mayor.to_excel(writer, index=False, sheet_name=HOJA_MAYOR)
            df_sumas.to_excel(writer, index=False, sheet_name=HOJA_SUMAS_Y_SALDOS)

            # --- Aplicar formato ---
            workbook = writer.book
            ws_diario = writer.sheets[HOJA_DIARIO]
            ws_mayor = writer.sheets[HOJA_MAYOR]
            ws_sumas = writer.sheets[HOJA_SUMAS_Y_SALDOS]

            # Formato para texto (mantener ceros iniciales en códigos)
            text_format = workbook.add_format({"num_format": "@"})

            # Formato para importes (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Hoja Diario ---
            ws_diario.set_column("A:A", 16, text_format)  # Asiento
            ws_diario.set_column("B:B", 12)  # Fecha
            ws_diario.set_column("C:C", 50)  # Concepto
            ws_diario.set_column("D:D", 10, text_format)  # Cuenta
            ws_diario.set_column("E:E", 36)  # Nombre
            ws_diario.set_column("F:G", 15, money_format)  # Debe/Haber

            # --- Hoja Mayor ---
            ws_mayor.set_column("A:A", 10, text_format)  # Cuenta
            ws_mayor.set_column("B:B", 36)  # Nombre
            ws_mayor.set_column("C:C", 12)  # Fecha
            ws_mayor.set_column("D:D", 16, text_format)  # Asiento
            ws_mayor.set_column("E:E", 50)  # Concepto
            ws_mayor.set_column("F:H", 15, money_format)  # Debe/Haber/Saldo

            # --- Hoja Sumas y saldos ---
            ws_sumas.set_column("A:A", 10, text_format)  # Cuenta
            ws_sumas.set_column("B:B", 36)  # Nombre
            ws_sumas.set_column("C:C", 22)  # Masa
            ws_sumas.set_column("D:G", 16, money_format)  # Sumas y saldos
