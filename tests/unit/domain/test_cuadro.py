"""
Tests para el servicio Cuadro: registro de cuentas, libro diario,
mayorización e informes.
"""

from datetime import date
from decimal import Decimal

import pytest

from contabilidad.domain.exceptions import (
    AsientoDesequilibradoError,
    AsientoInexistenteError,
    CuadroNoVacioError,
    CuentaDuplicadaError,
    CuentaInexistenteError,
    ImporteInvalidoError,
)
from contabilidad.domain.models import Lado, Masa
from contabilidad.domain.services.cuadro import TOTAL_CUENTAS_PGC, Cuadro


@pytest.fixture
def cuadro():
    c = Cuadro()
    c.crear_cuenta("Capital social", "100", Masa.PATRIMONIO)
    c.crear_cuenta("Proveedores", "400", Masa.PASIVO_CORRIENTE)
    c.crear_cuenta("Bancos", "572", Masa.ACTIVO_CORRIENTE)
    c.crear_cuenta("Compras de mercaderías", "600", Masa.GASTO)
    return c


class TestRegistroCuentas:
    """Pruebas para crear, buscar y cargar cuentas."""

    def test_crear_y_buscar(self, cuadro):
        cuenta = cuadro.buscar_cuenta("572")
        assert cuenta is not None
        assert cuenta.nombre == "Bancos"
        assert cuenta.masa is Masa.ACTIVO_CORRIENTE

    def test_find_cuenta_es_alias(self, cuadro):
        assert cuadro.find_cuenta("572") is cuadro.buscar_cuenta("572")

    def test_buscar_inexistente_devuelve_none(self, cuadro):
        assert cuadro.buscar_cuenta("999") is None

    def test_cuenta_inexistente_lanza_error(self, cuadro):
        with pytest.raises(CuentaInexistenteError, match="'999' no existe"):
            cuadro.cuenta("999")

    def test_duplicada_lanza_error(self, cuadro):
        with pytest.raises(CuentaDuplicadaError, match="La cuenta '572 ~ Bancos' ya existe"):
            cuadro.crear_cuenta("Otro banco", "572", Masa.ACTIVO_CORRIENTE)

    def test_codigo_con_espacios(self, cuadro):
        cuadro.crear_cuenta("  Caja  ", " 570 ", Masa.ACTIVO_CORRIENTE)
        assert "570" in cuadro
        assert cuadro.cuenta("570").nombre == "Caja"

    def test_cuentas_ordenadas_por_codigo(self, cuadro):
        assert [c.codigo for c in cuadro] == ["100", "400", "572", "600"]
        assert len(cuadro) == 4

    def test_str(self, cuadro):
        assert str(cuadro).split("\n")[0] == "(100) Capital social"


class TestCargarPgc:
    def test_carga_en_cuadro_vacio(self):
        cuadro = Cuadro()
        descartados = cuadro.cargar_pgc()
        assert len(cuadro) == TOTAL_CUENTAS_PGC
        assert "1" in descartados
        assert "190" in descartados
        assert cuadro.cuenta("572").masa is Masa.ACTIVO_CORRIENTE
        assert cuadro.cuenta("100").nombre == "Capital social"

    def test_cuadro_no_vacio_lanza_error(self, cuadro):
        with pytest.raises(CuadroNoVacioError, match="no cargar el PGC"):
            cuadro.cargar_pgc()
        assert len(cuadro) == 4


class TestCrearAsiento:
    """Pruebas para el registro de asientos en el libro diario."""

    def test_asiento_cuadrado_se_registra(self):
        """Cuentas 0000 y 0001: 20 al debe y 20 al haber."""
        cuadro = Cuadro()
        cuadro.crear_cuenta("Cuenta A", "0000", Masa.ACTIVO_CORRIENTE)
        cuadro.crear_cuenta("Cuenta B", "0001", Masa.PATRIMONIO)

        asiento = cuadro.crear_asiento(
            "Prueba", date(2024, 1, 1), debe=[("0000", 20)], haber=[("0001", 20)]
        )

        assert cuadro.libro_diario == [asiento]
        assert asiento.debe[0].nombre_cuenta == "Cuenta A"

    def test_asiento_descuadrado_no_se_registra(self):
        """Cuentas 0000 y 0001: 20 al debe y 22 al haber."""
        cuadro = Cuadro()
        cuadro.crear_cuenta("Cuenta A", "0000", Masa.ACTIVO_CORRIENTE)
        cuadro.crear_cuenta("Cuenta B", "0001", Masa.PATRIMONIO)

        with pytest.raises(AsientoDesequilibradoError, match="no coinciden"):
            cuadro.crear_asiento(
                "Prueba", date(2024, 1, 1), debe=[("0000", 20)], haber=[("0001", 22)]
            )
        assert cuadro.libro_diario == []

    def test_tolerancia_de_redondeo(self, cuadro):
        """0.1 + 0.2 en float no es 0.3, pero al céntimo sí."""
        asiento = cuadro.crear_asiento(
            "Redondeo",
            date(2024, 1, 1),
            debe=[("600", 0.1), ("600", 0.2)],
            haber=[("400", "0,30")],
        )
        assert asiento.esta_equilibrado

    def test_lado_vacio_es_descuadre(self, cuadro):
        with pytest.raises(AsientoDesequilibradoError):
            cuadro.crear_asiento("Sin haber", date(2024, 1, 1), debe=[("600", 10)])

    def test_asiento_sin_movimientos_es_descuadre(self, cuadro):
        with pytest.raises(AsientoDesequilibradoError):
            cuadro.crear_asiento("Vacío", date(2024, 1, 1))
        assert cuadro.libro_diario == []

    def test_lado_vacio_con_importe_cero_es_descuadre(self, cuadro):
        with pytest.raises(AsientoDesequilibradoError):
            cuadro.crear_asiento("Cero", date(2024, 1, 1), debe=[("572", 0)])
        assert cuadro.libro_diario == []

    def test_float_en_notacion_exponencial(self, cuadro):
        asiento = cuadro.crear_asiento(
            "Grande", date(2024, 1, 1), debe=[("572", 1e16)], haber=[("100", 1e16)]
        )
        assert asiento.total_debe == Decimal("1E+16")

    def test_cuenta_inexistente(self, cuadro):
        with pytest.raises(CuentaInexistenteError, match="999"):
            cuadro.crear_asiento("X", date(2024, 1, 1), debe=[("999", 1)], haber=[("400", 1)])
        assert cuadro.libro_diario == []

    def test_importe_invalido(self, cuadro):
        with pytest.raises(ImporteInvalidoError):
            cuadro.crear_asiento(
                "X", date(2024, 1, 1), debe=[("600", "diez")], haber=[("400", 10)]
            )

    def test_fecha_por_defecto_hoy(self, cuadro):
        asiento = cuadro.crear_asiento("X", debe=[("600", 1)], haber=[("400", 1)])
        assert asiento.fecha == date.today()

    def test_codigo_generado(self, cuadro):
        a1 = cuadro.crear_asiento("X", date(2024, 3, 1), debe=[("600", 1)], haber=[("400", 1)])
        a2 = cuadro.crear_asiento("Y", date(2024, 3, 1), debe=[("600", 1)], haber=[("400", 1)])
        assert a1.codigo == "20240301-1"
        assert a2.codigo == "20240301-2"

    def test_mismo_codigo_sustituye_en_su_posicion(self, cuadro):
        cuadro.crear_asiento("A", date(2024, 1, 1), [("600", 10)], [("400", 10)], "A1")
        cuadro.crear_asiento("B", date(2024, 1, 2), [("600", 20)], [("400", 20)], "A2")
        cuadro.crear_asiento("A corregido", date(2024, 1, 1), [("600", 15)], [("400", 15)], "A1")

        diario = cuadro.libro_diario
        assert len(diario) == 2
        assert [a.codigo for a in diario] == ["A1", "A2"]
        assert diario[0].concepto == "A corregido"
        assert diario[0].total_debe == Decimal("15")

    def test_libro_diario_es_copia(self, cuadro):
        cuadro.crear_asiento("A", date(2024, 1, 1), [("600", 10)], [("400", 10)], "A1")
        cuadro.libro_diario.clear()
        assert len(cuadro.libro_diario) == 1


class TestBuscarYEliminarAsiento:
    def test_buscar(self, cuadro):
        asiento = cuadro.crear_asiento("A", date(2024, 1, 1), [("600", 10)], [("400", 10)], "A1")
        assert cuadro.buscar_asiento("A1") is asiento
        assert cuadro.asiento("A1") is asiento
        assert cuadro.buscar_asiento("NO") is None

    def test_asiento_inexistente(self, cuadro):
        with pytest.raises(AsientoInexistenteError, match="'NO' no existe"):
            cuadro.asiento("NO")

    def test_eliminar(self, cuadro):
        cuadro.crear_asiento("A", date(2024, 1, 1), [("600", 10)], [("400", 10)], "A1")
        eliminado = cuadro.eliminar_asiento("A1")
        assert eliminado.codigo == "A1"
        assert cuadro.libro_diario == []

    def test_eliminar_inexistente(self, cuadro):
        with pytest.raises(AsientoInexistenteError):
            cuadro.eliminar_asiento("NO")


class TestMayorizarCuenta:
    """Pruebas para la mayorización (libro mayor)."""

    def test_saldos_tras_mayorizar(self, cuadro):
        cuadro.crear_asiento("Aportación", date(2024, 1, 1), [("572", 1000)], [("100", 1000)])
        cuadro.crear_asiento("Compra", date(2024, 1, 2), [("600", 300)], [("572", 300)])

        bancos = cuadro.mayorizar_cuenta("572")
        assert bancos.saldo_deudor == Decimal("1000")
        assert bancos.saldo_acreedor == Decimal("300")
        assert bancos.saldo == bancos.saldo_deudor - bancos.saldo_acreedor
        assert bancos.saldo == Decimal("700")

    def test_apuntes_en_orden_del_diario(self, cuadro):
        cuadro.crear_asiento("Uno", date(2024, 1, 3), [("572", 10)], [("100", 10)], "A1")
        cuadro.crear_asiento("Dos", date(2024, 1, 1), [("600", 4)], [("572", 4)], "A2")
        cuadro.crear_asiento("Tres", date(2024, 1, 2), [("572", 1)], [("100", 1)], "A3")

        apuntes = cuadro.libro_mayor("572")
        assert [a.codigo_asiento for a in apuntes] == ["A1", "A2", "A3"]
        assert [a.lado for a in apuntes] == [Lado.DEBE, Lado.HABER, Lado.DEBE]
        assert [a.saldo for a in apuntes] == [Decimal("10"), Decimal("6"), Decimal("7")]

    def test_mayorizar_dos_veces_no_duplica(self, cuadro):
        cuadro.crear_asiento("A", date(2024, 1, 1), [("572", 10)], [("100", 10)])
        cuadro.mayorizar_cuenta("572")
        bancos = cuadro.mayorizar_cuenta("572")
        assert bancos.saldo == Decimal("10")
        assert len(bancos.apuntes) == 1

    def test_refleja_asiento_sustituido(self, cuadro):
        cuadro.crear_asiento("A", date(2024, 1, 1), [("572", 10)], [("100", 10)], "A1")
        assert cuadro.mayorizar_cuenta("572").saldo == Decimal("10")
        cuadro.crear_asiento("A", date(2024, 1, 1), [("572", 25)], [("100", 25)], "A1")
        assert cuadro.mayorizar_cuenta("572").saldo == Decimal("25")

    def test_cuenta_sin_movimientos(self, cuadro):
        assert cuadro.mayorizar_cuenta("600").saldo == Decimal("0")

    def test_cuenta_inexistente(self, cuadro):
        with pytest.raises(CuentaInexistenteError):
            cuadro.mayorizar_cuenta("999")


class TestInformes:
    def _con_asientos(self, cuadro):
        cuadro.crear_asiento("Aportación", date(2024, 1, 1), [("572", 1000)], [("100", 1000)])
        cuadro.crear_asiento("Compra a crédito", date(2024, 1, 2), [("600", 300)], [("400", 300)])
        return cuadro

    def test_sumas_y_saldos_cuadra(self, cuadro):
        balance = self._con_asientos(cuadro).sumas_y_saldos()
        assert [f.codigo for f in balance.filas] == ["100", "400", "572", "600"]
        assert balance.total_debe == Decimal("1300")
        assert balance.total_haber == Decimal("1300")
        assert balance.total_saldo_deudor == balance.total_saldo_acreedor
        assert balance.cuadra

    def test_sumas_y_saldos_omite_cuentas_sin_movimientos(self, cuadro):
        cuadro.crear_asiento("Aportación", date(2024, 1, 1), [("572", 1000)], [("100", 1000)])
        assert [f.codigo for f in cuadro.sumas_y_saldos().filas] == ["100", "572"]

    def test_saldos_por_masa(self, cuadro):
        saldos = self._con_asientos(cuadro).saldos_por_masa()
        assert saldos[Masa.ACTIVO_CORRIENTE] == Decimal("1000")
        assert saldos[Masa.PATRIMONIO] == Decimal("-1000")
        assert saldos[Masa.GASTO] == Decimal("300")
        assert saldos[Masa.INGRESO] == Decimal("0")

    def test_informe_completo(self, cuadro):
        informe = self._con_asientos(cuadro).informe()
        assert len(informe.libro_diario) == 2
        assert [m.codigo for m in informe.libro_mayor] == ["100", "400", "572", "600"]
        assert informe.sumas_y_saldos.cuadra

    def test_informe_de_una_cuenta(self, cuadro):
        informe = self._con_asientos(cuadro).informe(["572"])
        assert [m.codigo for m in informe.libro_mayor] == ["572"]
        assert informe.libro_mayor[0].saldo == Decimal("1000")

    def test_informe_cuenta_inexistente(self, cuadro):
        with pytest.raises(CuentaInexistenteError):
            cuadro.informe(["999"])
