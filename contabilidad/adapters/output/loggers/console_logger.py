"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger que imprime cada evento de la carga a
stdout y acumula contadores para el resumen final.

Con verbose=False solo se imprimen los errores y el resumen: es lo que
usa el modo --prueba del CLI.
"""

from pathlib import Path

from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.masa import Masa
from contabilidad.domain.ports.process_logger import ProcessLogger
from contabilidad.domain.shared.money import format_importe


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de carga a consola."""

    def __init__(self, verbose: bool = True) -> None:
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._lineas_descartadas: int = 0
        self._cuentas_creadas: int = 0
        self._codigos_no_clasificables: int = 0
        self._asientos_registrados: int = 0
        self._asientos_reemplazados: int = 0
        self._errores: list[dict] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        self._print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        self._print(f"  ⏭️  Descartado: {file_path.name} — {reason}")

    def log_file_processed(self, file_path: Path, num_registros: int) -> None:
        self._archivos_procesados += 1
        self._print(f"  ✅ Completado: {file_path.name} — {num_registros} registros")

    def log_line_discarded(self, file_path: Path, line_number: int, reason: str) -> None:
        self._lineas_descartadas += 1
        self._print(f"  ⚠️  Línea {line_number} de {file_path.name} descartada: {reason}")

    # --- Cuadro ---

    def log_cuenta_creada(self, codigo: str, nombre: str, masa: Masa) -> None:
        self._cuentas_creadas += 1
        self._print(f"  ➕ Cuenta ({codigo}) {nombre} — {masa}")

    def log_codigo_no_clasificable(self, codigo: str, origen: str) -> None:
        self._codigos_no_clasificables += 1
        self._print(f"  ⏭️  Código sin masa: {codigo} ({origen})")

    def log_asiento_registrado(self, asiento: Asiento) -> None:
        self._asientos_registrados += 1
        self._print(f"  📝 Asiento {asiento.codigo} — {format_importe(asiento.total_debe)}")

    def log_asiento_reemplazado(self, asiento: Asiento) -> None:
        self._asientos_reemplazados += 1
        self._print(f"  🔁 Asiento {asiento.codigo} sustituye al anterior")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        # Los errores se imprimen siempre
        print(f"  ❌ Error: {file_path.name} — {error}")

    def log_carga_completa(self, num_cuentas: int, num_asientos: int) -> None:
        self._print(f"\n📊 Cuadro cargado: {num_cuentas} cuentas, {num_asientos} asientos")

    # --- Resumen ---

    @property
    def tiene_errores(self) -> bool:
        return bool(self._errores)

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "lineas_descartadas": self._lineas_descartadas,
            "cuentas_creadas": self._cuentas_creadas,
            "codigos_no_clasificables": self._codigos_no_clasificables,
            "asientos_registrados": self._asientos_registrados,
            "asientos_reemplazados": self._asientos_reemplazados,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final de la carga."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:     {self._archivos_recibidos}")
        print(f"  Archivos procesados:    {self._archivos_procesados}")
        print(f"  Archivos descartados:   {self._archivos_descartados}")
        print(f"  Líneas descartadas:     {self._lineas_descartadas}")
        print(f"  Cuentas creadas:        {self._cuentas_creadas}")
        print(f"  Códigos sin masa:       {self._codigos_no_clasificables}")
        print(f"  Asientos registrados:   {self._asientos_registrados}")
        print(f"  Asientos sustituidos:   {self._asientos_reemplazados}")
        print(f"  Errores:                {len(self._errores)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)

    def _print(self, mensaje: str) -> None:
        if self._verbose:
            print(mensaje)
