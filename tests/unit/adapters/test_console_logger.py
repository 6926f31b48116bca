"""
Tests para ConsoleLogger: contadores del resumen y lo que se imprime.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from contabilidad.adapters.output.loggers.console_logger import ConsoleLogger
from contabilidad.domain.exceptions import CuentaInexistenteError
from contabilidad.domain.models import Asiento, Masa, Movimiento

ARCHIVO = Path("/datos/20240105.data")


@pytest.fixture
def asiento():
    return Asiento(
        concepto="Compra",
        fecha=date(2024, 1, 5),
        codigo="20240105",
        debe=[Movimiento(Decimal("10"), "600")],
        haber=[Movimiento(Decimal("10"), "400")],
    )


class TestConsoleLogger:
    def test_contadores(self, asiento):
        logger = ConsoleLogger()
        logger.log_file_received(ARCHIVO, "asientos")
        logger.log_line_discarded(ARCHIVO, 3, "Importe inválido: 'x'")
        logger.log_cuenta_creada("572", "Bancos", Masa.ACTIVO_CORRIENTE)
        logger.log_codigo_no_clasificable("190", "PGC")
        logger.log_asiento_registrado(asiento)
        logger.log_asiento_reemplazado(asiento)
        logger.log_file_processed(ARCHIVO, 1)
        logger.log_file_skipped(Path("notas.data"), "El nombre no empieza por una fecha")

        resumen = logger.get_summary()
        assert resumen["archivos_recibidos"] == 1
        assert resumen["archivos_procesados"] == 1
        assert resumen["archivos_descartados"] == 1
        assert resumen["lineas_descartadas"] == 1
        assert resumen["cuentas_creadas"] == 1
        assert resumen["codigos_no_clasificables"] == 1
        assert resumen["asientos_registrados"] == 1
        assert resumen["asientos_reemplazados"] == 1
        assert resumen["errores"] == []
        assert not logger.tiene_errores

    def test_imprime_eventos(self, capsys):
        logger = ConsoleLogger()
        logger.log_file_received(ARCHIVO, "asientos")
        logger.log_line_discarded(ARCHIVO, 3, "Importe inválido: 'x'")

        salida = capsys.readouterr().out
        assert "📄 Recibido: 20240105.data (asientos)" in salida
        assert "Línea 3 de 20240105.data descartada: Importe inválido: 'x'" in salida

    def test_error_se_acumula(self, capsys):
        logger = ConsoleLogger()
        logger.log_error(ARCHIVO, CuentaInexistenteError("629"))

        assert logger.tiene_errores
        assert logger.get_summary()["errores"] == [
            {"archivo": "20240105.data", "error": "El código de cuenta '629' no existe"}
        ]
        assert "❌ Error: 20240105.data" in capsys.readouterr().out

    def test_silencioso_solo_imprime_errores(self, capsys):
        logger = ConsoleLogger(verbose=False)
        logger.log_file_received(ARCHIVO, "asientos")
        logger.log_carga_completa(10, 3)
        assert capsys.readouterr().out == ""

        logger.log_error(ARCHIVO, ValueError("fallo"))
        assert "fallo" in capsys.readouterr().out

    def test_resumen(self, capsys):
        logger = ConsoleLogger(verbose=False)
        logger.log_error(ARCHIVO, ValueError("fallo"))
        capsys.readouterr()

        logger.print_summary()
        salida = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "ERRORES:" in salida
        assert "- 20240105.data: fallo" in salida
