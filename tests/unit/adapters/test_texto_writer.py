"""
Tests para el escritor de texto (diario, mayor, sumas y saldos y
presupuesto).
"""

from datetime import date
from decimal import Decimal

import pytest

from contabilidad.adapters.output.writers.texto_writer import TextoWriter
from contabilidad.domain.exceptions import OutputError
from contabilidad.domain.models import ComparacionPartida, Masa
from contabilidad.domain.services.cuadro import Cuadro


@pytest.fixture
def informe():
    cuadro = Cuadro()
    cuadro.crear_cuenta("Capital social", "100", Masa.PATRIMONIO)
    cuadro.crear_cuenta("Proveedores", "400", Masa.PASIVO_CORRIENTE)
    cuadro.crear_cuenta("Bancos", "572", Masa.ACTIVO_CORRIENTE)
    cuadro.crear_cuenta("Compras de mercaderías", "600", Masa.GASTO)
    cuadro.crear_asiento(
        "Aportación inicial", date(2024, 1, 1), [("572", 1000)], [("100", 1000)], "0001"
    )
    cuadro.crear_asiento(
        "Compra\nFactura 7", date(2024, 1, 2), [("600", "1234,5")], [("400", "1234,5")], "0002"
    )
    return cuadro.informe()


class TestTextoWriter:
    """Tests unitarios para TextoWriter."""

    @pytest.fixture
    def writer(self):
        return TextoWriter()

    def test_secciones(self, writer, informe):
        texto = writer.render(informe)
        assert texto.index("LIBRO DIARIO") < texto.index("LIBRO MAYOR")
        assert texto.index("LIBRO MAYOR") < texto.index("BALANCE DE SUMAS Y SALDOS")

    def test_diario_con_cabecera_y_movimientos(self, writer, informe):
        diario = writer.render_diario(informe.libro_diario)
        assert "N.º 0001" in diario
        assert "Factura 7" in diario
        assert "2024-01-02" in diario
        linea = next(x for x in diario.split("\n") if "(   600)" in x)
        # Debe a la izquierda, haber a la derecha
        assert linea.index("(   600)") < linea.index("|") < linea.index("(   400)")
        assert "1.234,50 €" in linea

    def test_mayor_con_saldo_acumulado(self, writer, informe):
        mayor = writer.render_mayor(informe.libro_mayor)
        assert "(   572) Bancos [Activo corriente]" in mayor
        assert "1.000,00 €" in mayor
        assert "-1.000,00 €" in mayor  # saldo del capital

    def test_sumas_y_saldos(self, writer, informe):
        texto = writer.render_sumas_y_saldos(informe.sumas_y_saldos)
        totales = next(x for x in texto.split("\n") if "TOTALES" in x)
        assert totales.count("2.234,50 €") == 4
        assert "no coinciden" not in texto

    def test_diario_vacio(self, writer):
        assert "(sin asientos)" in writer.render_diario(())

    def test_presupuesto(self, writer):
        comparaciones = [
            ComparacionPartida("628", "Suministros", Decimal("120"), Decimal("300")),
        ]
        texto = writer.render_presupuesto(comparaciones)
        assert texto == (
            "Suministros         |    120.00 €|    300.00 €|     40.00 %|########------------"
        )

    def test_write_crea_archivo(self, writer, informe, tmp_path):
        ruta = writer.write(informe, tmp_path / "salida" / "contabilidad")
        assert ruta == tmp_path / "salida" / "contabilidad.txt"
        assert "LIBRO DIARIO" in ruta.read_text(encoding="utf-8")

    def test_write_error_lanza_output_error(self, writer, informe, tmp_path):
        # Un directorio con el nombre del archivo impide escribirlo
        (tmp_path / "contabilidad.txt").mkdir()
        with pytest.raises(OutputError):
            writer.write(informe, tmp_path / "contabilidad.txt")
