"""
Tests para el lector del balance inicial.
"""

from datetime import date
from decimal import Decimal

import pytest

from contabilidad.adapters.input.lectores.balance_inicial_reader import (
    CODIGO_APERTURA,
    CONCEPTO_APERTURA,
    BalanceInicialReader,
)

BALANCE = """\
FECHA 2024-01-01

ACTIVO NO CORRIENTE
216 3.000,00

ACTIVO CORRIENTE
572 12.000,00

PASIVO CORRIENTE
400 1000

PATRIMONIO NETO
100 14.000,00
"""


class TestBalanceInicialReader:
    """Tests unitarios para BalanceInicialReader."""

    @pytest.fixture
    def reader(self):
        return BalanceInicialReader()

    def _escribir(self, tmp_path, contenido: str):
        ruta = tmp_path / "balance_inicial.txt"
        ruta.write_text(contenido, encoding="utf-8")
        return ruta

    def test_tipo(self, reader):
        assert reader.tipo == "balance inicial"

    def test_asiento_de_apertura(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, BALANCE))

        assert len(resultado.asientos) == 1
        apertura = resultado.asientos[0]
        assert apertura.codigo == CODIGO_APERTURA
        assert apertura.concepto == CONCEPTO_APERTURA
        assert apertura.fecha == date(2024, 1, 1)
        assert apertura.debe == (("216", Decimal("3000.00")), ("572", Decimal("12000.00")))
        assert apertura.haber == (("400", Decimal("1000")), ("100", Decimal("14000.00")))

    def test_sin_fecha(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "ACTIVO\n572 10\nPASIVO\n400 10\n"))
        assert resultado.asientos[0].fecha is None

    def test_cabeceras_flexibles(self, reader, tmp_path):
        contenido = "Activo corriente:\n572 10\n  patrimonio   neto \n100 10\n"
        resultado = reader.leer(self._escribir(tmp_path, contenido))
        apertura = resultado.asientos[0]
        assert apertura.debe == (("572", Decimal("10")),)
        assert apertura.haber == (("100", Decimal("10")),)

    def test_partida_fuera_de_seccion(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "572 10\nACTIVO\n570 5\n"))
        assert resultado.asientos[0].debe == (("570", Decimal("5")),)
        assert resultado.descartes[0].linea == 1
        assert "fuera de una sección" in resultado.descartes[0].motivo

    def test_importe_invalido(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "ACTIVO\n572 mucho\n570 5\n"))
        assert resultado.asientos[0].debe == (("570", Decimal("5")),)
        assert "mucho" in resultado.descartes[0].motivo

    def test_linea_mal_formada(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "ACTIVO\nCaja 10\n"))
        assert resultado.asientos == ()
        assert resultado.descartes[0].linea == 2

    def test_fecha_invalida(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "FECHA 2024-02-31\nACTIVO\n572 1\n"))
        assert resultado.asientos[0].fecha is None
        assert "Fecha inválida" in resultado.descartes[0].motivo

    def test_sin_partidas(self, reader, tmp_path):
        resultado = reader.leer(self._escribir(tmp_path, "# vacío\nACTIVO\n"))
        assert resultado.esta_vacio
