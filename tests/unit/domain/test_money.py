"""
Tests para contabilidad.domain.shared.money

Los formatos vienen de cómo se escriben los importes a mano en los
archivos de asientos y del balance inicial:
- "1234.56"    → punto decimal
- "1234,56"    → coma decimal
- "1.234,56"   → formato español con miles
- "1.234,56 €" → con símbolo de euro
"""

from decimal import Decimal

import pytest

from contabilidad.domain.exceptions import ImporteInvalidoError
from contabilidad.domain.shared.money import (
    format_importe,
    parse_importe,
    redondear,
    to_importe,
)


class TestParseImporte:
    """Pruebas para parse_importe (versión estricta, lanza excepciones)."""

    def test_entero(self):
        assert parse_importe("20") == Decimal("20")

    def test_punto_decimal(self):
        assert parse_importe("1234.56") == Decimal("1234.56")

    def test_coma_decimal(self):
        assert parse_importe("1234,56") == Decimal("1234.56")

    def test_formato_espanol_con_miles(self):
        assert parse_importe("1.234,56") == Decimal("1234.56")

    def test_formato_ingles_con_miles(self):
        assert parse_importe("1,234.56") == Decimal("1234.56")

    def test_varios_puntos_de_miles(self):
        assert parse_importe("1.234.567,89") == Decimal("1234567.89")

    def test_con_simbolo_euro(self):
        assert parse_importe("1.234,56 €") == Decimal("1234.56")

    def test_con_eur(self):
        assert parse_importe("15,00 EUR") == Decimal("15.00")

    def test_negativo(self):
        assert parse_importe("-20") == Decimal("-20")

    def test_espacios_alrededor(self):
        assert parse_importe("  300,5  ") == Decimal("300.5")

    # --- Errores ---

    def test_vacio_lanza_error(self):
        with pytest.raises(ImporteInvalidoError, match="vacío"):
            parse_importe("   ")

    def test_texto_lanza_error(self):
        with pytest.raises(ImporteInvalidoError, match="veinte"):
            parse_importe("veinte")

    def test_dos_signos_lanza_error(self):
        with pytest.raises(ImporteInvalidoError):
            parse_importe("--20")

    def test_no_str_lanza_type_error(self):
        with pytest.raises(TypeError, match="str"):
            parse_importe(20)


class TestToImporte:
    def test_decimal_sin_cambios(self):
        assert to_importe(Decimal("1.50")) == Decimal("1.50")

    def test_int(self):
        assert to_importe(20) == Decimal("20")

    def test_float(self):
        assert to_importe(0.1) == Decimal("0.1")

    def test_float_en_notacion_exponencial(self):
        assert to_importe(1e16) == Decimal("1E+16")
        assert to_importe(0.00001) == Decimal("0.00001")

    def test_float_no_finito_lanza_error(self):
        with pytest.raises(ImporteInvalidoError, match="finito"):
            to_importe(float("nan"))

    def test_str(self):
        assert to_importe("20,5") == Decimal("20.5")

    def test_bool_lanza_error(self):
        with pytest.raises(ImporteInvalidoError):
            to_importe(True)

    def test_infinito_lanza_error(self):
        with pytest.raises(ImporteInvalidoError, match="finito"):
            to_importe(Decimal("Infinity"))

    def test_tipo_no_soportado(self):
        with pytest.raises(ImporteInvalidoError, match="tipo no soportado"):
            to_importe([20])


class TestRedondear:
    def test_a_centimos(self):
        assert redondear(Decimal("10.004")) == Decimal("10.00")
        assert redondear(Decimal("20")) == Decimal("20.00")


class TestFormatImporte:
    def test_con_miles(self):
        assert format_importe(Decimal("1234567.891")) == "1.234.567,89 €"

    def test_negativo(self):
        assert format_importe(Decimal("-20")) == "-20,00 €"

    def test_cero(self):
        assert format_importe(Decimal("0")) == "0,00 €"

