"""
Tests para el CLI: argumentos, modo prueba, listados y códigos de salida.
"""

import pytest

from contabilidad.cli.main import _parse_args, main

CUENTAS = "100 Capital social\n572 Bancos\n600 Compras de mercaderías\n"

APORTACION = "Aportación\n\nDEBE\n572 1000\n\nHABER\n100 1000\n///\n"
COMPRA = "Compra\n\nDEBE\n600 250\n\nHABER\n572 250\n///\n"
DESCUADRADO = "Descuadrado\n\nDEBE\n600 20\n\nHABER\n572 22\n///\n"


@pytest.fixture
def directorio(tmp_path):
    (tmp_path / "cuentas.txt").write_text(CUENTAS, encoding="utf-8")
    (tmp_path / "20240101.data").write_text(APORTACION, encoding="utf-8")
    (tmp_path / "20240102.data").write_text(COMPRA, encoding="utf-8")
    return tmp_path


class TestParseArgs:
    def test_valores_por_defecto(self):
        args = _parse_args(["/ruta"])
        assert args.ruta == "/ruta"
        assert not args.prueba
        assert not args.pgc
        assert args.cuentas is None
        assert args.balance_inicial is None
        assert args.cuenta is None
        assert args.output_dir is None

    def test_cuenta_repetible(self):
        args = _parse_args(["/ruta", "--cuenta", "572", "--cuenta", "600"])
        assert args.cuenta == ["572", "600"]

    def test_ayuda(self, capsys):
        with pytest.raises(SystemExit) as exc:
            _parse_args(["--ayuda"])
        assert exc.value.code == 0
        assert "--prueba" in capsys.readouterr().out

    def test_h_no_existe(self):
        with pytest.raises(SystemExit) as exc:
            _parse_args(["/ruta", "-h"])
        assert exc.value.code == 2


class TestMain:
    def test_listados(self, directorio, capsys):
        main([str(directorio)])
        salida = capsys.readouterr().out
        assert "LIBRO DIARIO" in salida
        assert "LIBRO MAYOR" in salida
        assert "BALANCE DE SUMAS Y SALDOS" in salida
        assert "RESUMEN DE PROCESAMIENTO" in salida

    def test_prueba_sin_listados(self, directorio, capsys):
        main([str(directorio), "--prueba"])
        salida = capsys.readouterr().out
        assert "LIBRO DIARIO" not in salida
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "Asientos registrados:   2" in salida

    def test_prueba_con_errores_sale_con_1(self, directorio, capsys):
        (directorio / "20240103.data").write_text(DESCUADRADO, encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(directorio), "--prueba"])
        assert exc.value.code == 1
        assert "no coinciden" in capsys.readouterr().out

    def test_balance_inicial_de_un_solo_lado_se_registra_como_error(self, directorio, capsys):
        (directorio / "balance_inicial.txt").write_text("ACTIVO\n572 0\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(directorio), "--prueba"])
        assert exc.value.code == 1
        assert "APERTURA" in capsys.readouterr().out

    def test_mayor_de_una_cuenta(self, directorio, capsys):
        main([str(directorio), "--cuenta", "600"])
        salida = capsys.readouterr().out
        mayor = salida[salida.index("LIBRO MAYOR"):salida.index("BALANCE DE SUMAS")]
        assert "(   600) Compras de mercaderías" in mayor
        assert "(   572) Bancos" not in mayor

    def test_cuenta_inexistente_sale_con_1(self, directorio):
        with pytest.raises(SystemExit) as exc:
            main([str(directorio), "--cuenta", "999"])
        assert exc.value.code == 1

    def test_directorio_inexistente_sale_con_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "no_existe")])
        assert exc.value.code == 1
        assert "no es un directorio" in capsys.readouterr().out

    def test_balance_inicial_explicito_inexistente(self, directorio):
        with pytest.raises(SystemExit) as exc:
            main([str(directorio), "--balance-inicial", str(directorio / "no.txt")])
        assert exc.value.code == 1

    def test_cuentas_explicitas_inexistentes(self, directorio):
        with pytest.raises(SystemExit) as exc:
            main([str(directorio), "--cuentas", str(directorio / "no.txt")])
        assert exc.value.code == 1

    def test_pgc_mas_cuentas_propias(self, directorio, capsys):
        main([str(directorio), "--pgc", "--prueba"])
        salida = capsys.readouterr().out
        # Las tres cuentas del archivo ya vienen en el PGC
        assert "Cuentas creadas:        0" in salida
        assert "Asientos registrados:   2" in salida

    def test_output_dir(self, directorio, tmp_path, capsys):
        salida_dir = tmp_path / "salida"
        main([str(directorio), "-o", str(salida_dir)])
        assert (salida_dir / "contabilidad.xlsx").exists()
        assert "LIBRO DIARIO" in (salida_dir / "contabilidad.txt").read_text(encoding="utf-8")
