"""
Tests para el lector de archivos de asientos (AAAAMMDD*.data).
"""

from datetime import date
from decimal import Decimal

import pytest

from contabilidad.adapters.input.lectores.asientos_reader import AsientosReader
from contabilidad.domain.exceptions import FormatoInvalidoError

COMPRA = """\
Compra de mercaderías
Factura 2024/001

DEBE
600 1.200,00
472 252,00

HABER
400 1452
///
"""

COBRO = """\
Cobro a cliente

DEBE
572 500

HABER
430 500
///
"""


class TestAsientosReader:
    """Tests unitarios para AsientosReader."""

    @pytest.fixture
    def reader(self):
        return AsientosReader()

    def _escribir(self, tmp_path, contenido: str, nombre: str = "20240105.data"):
        ruta = tmp_path / nombre
        ruta.write_text(contenido, encoding="utf-8")
        return ruta

    def test_tipo(self, reader):
        assert reader.tipo == "asientos"

    def test_asiento_completo(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, COMPRA))

        assert len(resultado.asientos) == 1
        asiento = resultado.asientos[0]
        assert asiento.codigo == "20240105"
        assert asiento.fecha == date(2024, 1, 5)
        assert asiento.concepto == "Compra de mercaderías\nFactura 2024/001"
        assert asiento.debe == (("600", Decimal("1200.00")), ("472", Decimal("252.00")))
        assert asiento.haber == (("400", Decimal("1452")),)
        assert asiento.linea == 1
        assert resultado.descartes == ()

    def test_varios_asientos_en_un_archivo(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, COMPRA + "\n" + COBRO, "20240105b.data"))

        assert [a.codigo for a in resultado.asientos] == ["20240105b", "20240105b-2"]
        assert resultado.asientos[1].concepto == "Cobro a cliente"

    def test_cabeceras_en_minusculas(self, reader, tmp_path):
        contenido = "Pago\n\ndebe\n400 10\n\nhaber\n572 10\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert len(resultado.asientos) == 1

    def test_nombre_sin_fecha_lanza_error(self, reader, tmp_path):
        with pytest.raises(FormatoInvalidoError, match="AAAAMMDD"):
            reader.leer(self._escribir(tmp_path, COMPRA, "compras.data"))

    # --- Asientos que se descartan ---

    def test_importe_invalido_descarta_el_asiento(self, reader, tmp_path):
        contenido = COMPRA.replace("472 252,00", "472 doscientos") + COBRO
        resultado = reader.leer(self._escribir(tmp_path, contenido))

        # El segundo asiento conserva su código aunque el primero se descarte
        assert [a.codigo for a in resultado.asientos] == ["20240105-2"]
        assert len(resultado.descartes) == 1
        assert resultado.descartes[0].linea == 6
        assert "doscientos" in resultado.descartes[0].motivo

    def test_partida_sin_importe(self, reader, tmp_path):
        contenido = "Pago\n\nDEBE\n400\n\nHABER\n572 10\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.asientos == ()
        assert "<código> <importe>" in resultado.descartes[0].motivo

    def test_sin_seccion_haber(self, reader, tmp_path):
        contenido = "Pago\n\nDEBE\n400 10\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.asientos == ()
        assert resultado.descartes[0].motivo == "Falta la sección HABER"

    def test_sin_seccion_debe(self, reader, tmp_path):
        contenido = "Pago\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.descartes[0].motivo == "Falta la sección DEBE"

    def test_haber_antes_que_debe(self, reader, tmp_path):
        contenido = "Pago\n\nHABER\n572 10\n\nDEBE\n400 10\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.descartes[0].motivo == "Cabecera HABER antes que DEBE"
        assert resultado.descartes[0].linea == 3

    def test_sin_concepto(self, reader, tmp_path):
        contenido = "DEBE\n400 10\nHABER\n572 10\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.descartes[0].motivo == "El asiento no tiene concepto"

    def test_haber_sin_partidas(self, reader, tmp_path):
        contenido = "Pago\n\nDEBE\n400 10\n\nHABER\n///\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        assert resultado.descartes[0].motivo == "El debe y el haber deben tener partidas"

    def test_sin_terminador(self, reader, tmp_path):
        contenido = COMPRA + COBRO.replace("///\n", "")
        resultado = reader.leer(self._escribir(tmp_path, contenido))

        assert len(resultado.asientos) == 1
        assert resultado.descartes[0].motivo == "Asiento sin terminador '///'"
        assert resultado.descartes[0].linea == 11

    def test_archivo_vacio(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "\n\n"))
        assert resultado.esta_vacio
        assert resultado.descartes == ()
