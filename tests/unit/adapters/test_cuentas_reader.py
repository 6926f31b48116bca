"""
Tests para el lector del archivo de definición de cuentas.
"""

import pytest

from contabilidad.adapters.input.lectores.cuentas_reader import CuentasReader
from contabilidad.domain.exceptions import LecturaError


class TestCuentasReader:
    """Tests unitarios para CuentasReader."""

    @pytest.fixture
    def reader(self):
        return CuentasReader()

    def _escribir(self, tmp_path, contenido: str, nombre: str = "cuentas.txt"):
        ruta = tmp_path / nombre
        ruta.write_text(contenido, encoding="utf-8")
        return ruta

    def test_tipo(self, reader):
        assert reader.tipo == "cuentas"

    def test_lee_codigo_y_nombre(self, reader, tmp_path):
        ruta = self._escribir(tmp_path, "570 Caja, euros\n5720   Banco   Santander c/c\n")
        resultado = reader.leer(ruta)

        assert [(c.codigo, c.nombre) for c in resultado.cuentas] == [
            ("570", "Caja, euros"),
            ("5720", "Banco Santander c/c"),
        ]
        assert resultado.archivo == "cuentas.txt"
        assert resultado.descartes == ()

    def test_ignora_vacias_y_comentarios(self, reader, tmp_path):
        ruta = self._escribir(tmp_path, "# Cuentas\n\n   \n600 Compras\n")
        resultado = reader.leer(ruta)
        assert [c.codigo for c in resultado.cuentas] == ["600"]
        assert resultado.cuentas[0].linea == 4

    def test_linea_mal_formada_se_descarta(self, reader, tmp_path):
        ruta = self._escribir(tmp_path, "600 Compras\nCaja sin código\n572\n")
        resultado = reader.leer(ruta)

        assert [c.codigo for c in resultado.cuentas] == ["600"]
        assert [d.linea for d in resultado.descartes] == [2, 3]
        assert "Caja sin código" in resultado.descartes[0].motivo

    def test_finales_de_linea_windows_y_bom(self, reader, tmp_path):
        ruta = tmp_path / "cuentas.txt"
        ruta.write_bytes("\ufeff570 Caja\r\n572 Bancos\r\n".encode("utf-8"))
        resultado = reader.leer(ruta)
        assert [(c.codigo, c.nombre) for c in resultado.cuentas] == [
            ("570", "Caja"),
            ("572", "Bancos"),
        ]

    def test_no_clasifica_ni_valida_duplicados(self, reader, tmp_path):
        """El lector devuelve todo lo que entiende; el procesador decide."""
        ruta = self._escribir(tmp_path, "190 Acciones emitidas\n572 Bancos\n572 Otra\n")
        assert len(reader.leer(ruta).cuentas) == 3

    def test_archivo_inexistente(self, reader, tmp_path):
        with pytest.raises(LecturaError, match="No se pudo leer"):
            reader.leer(tmp_path / "no_existe.txt")

    def test_archivo_no_utf8(self, reader, tmp_path):
        ruta = tmp_path / "cuentas.txt"
        ruta.write_bytes(b"600 Compras de mercader\xedas\n")
        with pytest.raises(LecturaError):
            reader.leer(ruta)
