"""
Servicio de dominio: Cuadro de cuentas.

El Cuadro es el núcleo contable. Es dueño de:
1. El registro de cuentas, indexado por código.
2. El libro diario: la lista ordenada de asientos.

Los saldos de las cuentas NO se actualizan al registrar un asiento. Se
obtienen recorriendo el diario con mayorizar_cuenta(), de modo que
sustituir o eliminar un asiento nunca deja saldos desactualizados.
"""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date
from decimal import Decimal

from contabilidad.domain.exceptions import (
    AsientoDesequilibradoError,
    AsientoInexistenteError,
    CuadroNoVacioError,
    CuentaDuplicadaError,
    CuentaInexistenteError,
)
from contabilidad.domain.models.apunte_mayor import ApunteMayor
from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.cuenta import Cuenta
from contabilidad.domain.models.informe import InformeContable, MayorCuenta
from contabilidad.domain.models.masa import Masa
from contabilidad.domain.models.movimiento import Movimiento
from contabilidad.domain.models.sumas_y_saldos import FilaSumasYSaldos, SumasYSaldos
from contabilidad.domain.shared.clasificacion import interpretar_codigo
from contabilidad.domain.shared.cuentas_pgc import CUENTAS_PGC
from contabilidad.domain.shared.money import redondear, to_importe

# Cuentas que el PGC embebido asigna a alguna masa
TOTAL_CUENTAS_PGC = 723

Partida = tuple[str, Decimal | int | float | str]


class Cuadro:
    """Cuadro de cuentas y libro diario.

    Uso:
        cuadro = Cuadro()
        cuadro.crear_cuenta("Caja, euros", "570", Masa.ACTIVO_CORRIENTE)
        cuadro.crear_cuenta("Capital social", "100", Masa.PATRIMONIO)
        cuadro.crear_asiento("Aportación inicial", debe=[("570", 1000)], haber=[("100", 1000)])
        cuadro.mayorizar_cuenta("570").saldo  # Decimal('1000')
    """

    def __init__(self) -> None:
        self._cuentas: dict[str, Cuenta] = {}
        self._libro_diario: list[Asiento] = []

    # =================================================================
    # Registro de cuentas
    # =================================================================

    @property
    def cuentas(self) -> list[Cuenta]:
        """Cuentas ordenadas por código."""
        return [self._cuentas[codigo] for codigo in sorted(self._cuentas)]

    def crear_cuenta(self, nombre: str, codigo: str, masa: Masa) -> Cuenta:
        """Da de alta una cuenta.

        Raises:
            CuentaDuplicadaError: Si ya hay una cuenta con ese código.
        """
        codigo = codigo.strip()
        if codigo in self._cuentas:
            raise CuentaDuplicadaError(codigo, self._cuentas[codigo].nombre)

        cuenta = Cuenta(codigo=codigo, nombre=nombre.strip(), masa=masa)
        self._cuentas[codigo] = cuenta
        return cuenta

    def buscar_cuenta(self, codigo: str) -> Cuenta | None:
        """Devuelve la cuenta con ese código, o None si no existe."""
        return self._cuentas.get(codigo.strip())

    find_cuenta = buscar_cuenta

    def cuenta(self, codigo: str) -> Cuenta:
        """Como buscar_cuenta(), pero lanza CuentaInexistenteError si no existe."""
        cuenta = self.buscar_cuenta(codigo)
        if cuenta is None:
            raise CuentaInexistenteError(codigo.strip())
        return cuenta

    def cargar_pgc(self) -> list[str]:
        """Carga las cuentas del Plan General de Contabilidad.

        Solo se puede hacer con el cuadro vacío: mezclar el PGC con cuentas
        creadas a mano daría lugar a códigos duplicados a medio cargar.

        Returns:
            Códigos del PGC que no se cargaron porque interpretar_codigo()
            no les asigna ninguna masa, para que el llamador los registre.

        Raises:
            CuadroNoVacioError: Si el cuadro ya tiene alguna cuenta.
        """
        if self._cuentas:
            raise CuadroNoVacioError(len(self._cuentas))

        descartados: list[str] = []
        for nombre, codigo in CUENTAS_PGC:
            masa = interpretar_codigo(codigo)
            if masa is None:
                descartados.append(codigo)
                continue
            self.crear_cuenta(nombre, codigo, masa)
        return descartados

    # =================================================================
    # Libro diario
    # =================================================================

    @property
    def libro_diario(self) -> list[Asiento]:
        """Copia del libro diario, en orden."""
        return list(self._libro_diario)

    def crear_asiento(
        self,
        concepto: str,
        fecha: date | None = None,
        debe: Iterable[Partida] = (),
        haber: Iterable[Partida] = (),
        codigo_asiento: str | None = None,
    ) -> Asiento:
        """Registra un asiento en el libro diario.

        Args:
            concepto: Descripción del asiento.
            fecha: Fecha contable. Por defecto, hoy.
            debe: Pares (código de cuenta, importe) del debe.
            haber: Pares (código de cuenta, importe) del haber.
            codigo_asiento: Código del asiento. Si ya existe, el asiento
                            nuevo sustituye al anterior en su misma
                            posición. Si es None se genera AAAAMMDD-n.

        Returns:
            El asiento registrado.

        Raises:
            CuentaInexistenteError: Si algún código de cuenta no existe.
            ImporteInvalidoError: Si algún importe no es válido.
            AsientoDesequilibradoError: Si el debe y el haber no suman lo
                                        mismo o alguno está vacío. El
                                        asiento no se registra.
        """
        fecha = fecha or date.today()
        codigo = codigo_asiento.strip() if codigo_asiento else self._generar_codigo(fecha)

        movimientos_debe = self._movimientos(debe)
        movimientos_haber = self._movimientos(haber)

        total_debe = sum((m.importe for m in movimientos_debe), Decimal("0"))
        total_haber = sum((m.importe for m in movimientos_haber), Decimal("0"))
        # Un lado vacío es un descuadre aunque los totales coincidan
        if (
            not movimientos_debe
            or not movimientos_haber
            or redondear(total_debe) != redondear(total_haber)
        ):
            raise AsientoDesequilibradoError(codigo, total_debe, total_haber)

        asiento = Asiento(
            concepto=concepto,
            fecha=fecha,
            codigo=codigo,
            debe=movimientos_debe,
            haber=movimientos_haber,
        )
        self._insertar(asiento)
        return asiento

    def buscar_asiento(self, codigo: str) -> Asiento | None:
        indice = self._indice_asiento(codigo)
        return None if indice is None else self._libro_diario[indice]

    def asiento(self, codigo: str) -> Asiento:
        """Como buscar_asiento(), pero lanza AsientoInexistenteError si no existe."""
        asiento = self.buscar_asiento(codigo)
        if asiento is None:
            raise AsientoInexistenteError(codigo)
        return asiento

    def eliminar_asiento(self, codigo: str) -> Asiento:
        """Quita un asiento del libro diario y lo devuelve."""
        indice = self._indice_asiento(codigo)
        if indice is None:
            raise AsientoInexistenteError(codigo)
        return self._libro_diario.pop(indice)

    # =================================================================
    # Libro mayor
    # =================================================================

    def mayorizar_cuenta(self, codigo: str) -> Cuenta:
        """Rehace los apuntes y totales de una cuenta recorriendo el diario.

        Returns:
            La cuenta, con sus apuntes en el orden del libro diario.

        Raises:
            CuentaInexistenteError: Si la cuenta no existe.
        """
        cuenta = self.cuenta(codigo)
        cuenta.reiniciar()

        for asiento in self._libro_diario:
            for lado, mov in asiento.movimientos():
                if mov.codigo_cuenta == cuenta.codigo:
                    cuenta.anotar(lado, mov.importe, asiento.fecha, asiento.codigo, asiento.concepto)
        return cuenta

    def mayorizar(self) -> None:
        """Mayoriza todas las cuentas del cuadro."""
        for codigo in self._cuentas:
            self.mayorizar_cuenta(codigo)

    def libro_mayor(self, codigo: str) -> list[ApunteMayor]:
        """Apuntes del libro mayor de una cuenta, recién mayorizados."""
        return list(self.mayorizar_cuenta(codigo).apuntes)

    # =================================================================
    # Informes
    # =================================================================

    def sumas_y_saldos(self) -> SumasYSaldos:
        """Balance de sumas y saldos de las cuentas con movimientos."""
        self.mayorizar()
        filas = tuple(
            FilaSumasYSaldos(
                codigo=c.codigo,
                nombre=c.nombre,
                masa=c.masa,
                suma_debe=c.saldo_deudor,
                suma_haber=c.saldo_acreedor,
            )
            for c in self.cuentas
            if c.tiene_movimientos
        )
        return SumasYSaldos(filas=filas)

    def saldos_por_masa(self) -> dict[Masa, Decimal]:
        """Suma de los saldos de las cuentas de cada masa."""
        self.mayorizar()
        saldos = {masa: Decimal("0") for masa in Masa}
        for cuenta in self._cuentas.values():
            saldos[cuenta.masa] += cuenta.saldo
        return saldos

    def informe(self, cuentas: Sequence[str] | None = None) -> InformeContable:
        """Foto del diario, del mayor y de las sumas y saldos.

        Args:
            cuentas: Códigos cuyo mayor se incluye. Por defecto, todas las
                     cuentas con movimientos.

        Raises:
            CuentaInexistenteError: Si se pide una cuenta que no existe.
        """
        sumas_y_saldos = self.sumas_y_saldos()

        if cuentas:
            seleccion = [self.cuenta(codigo) for codigo in cuentas]
        else:
            seleccion = [c for c in self.cuentas if c.tiene_movimientos]

        mayores = tuple(
            MayorCuenta(
                codigo=c.codigo,
                nombre=c.nombre,
                masa=c.masa,
                apuntes=tuple(c.apuntes),
            )
            for c in seleccion
        )
        return InformeContable(
            libro_diario=tuple(self._libro_diario),
            libro_mayor=mayores,
            sumas_y_saldos=sumas_y_saldos,
        )

    # =================================================================
    # Protocolo de contenedor
    # =================================================================

    def __len__(self) -> int:
        return len(self._cuentas)

    def __contains__(self, codigo: object) -> bool:
        return isinstance(codigo, str) and codigo.strip() in self._cuentas

    def __iter__(self) -> Iterator[Cuenta]:
        return iter(self.cuentas)

    def __str__(self) -> str:
        return "\n".join(str(c) for c in self.cuentas)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _movimientos(self, partidas: Iterable[Partida]) -> list[Movimiento]:
        movimientos = []
        for codigo, importe in partidas:
            cuenta = self.cuenta(codigo)
            movimientos.append(
                Movimiento(
                    importe=to_importe(importe),
                    codigo_cuenta=cuenta.codigo,
                    nombre_cuenta=cuenta.nombre,
                )
            )
        return movimientos

    def _insertar(self, asiento: Asiento) -> None:
        """Añade el asiento al final, o sustituye al que tenga su código."""
        indice = self._indice_asiento(asiento.codigo)
        if indice is None:
            self._libro_diario.append(asiento)
        else:
            self._libro_diario[indice] = asiento

    def _indice_asiento(self, codigo: str) -> int | None:
        codigo = codigo.strip()
        for indice, asiento in enumerate(self._libro_diario):
            if asiento.codigo == codigo:
                return indice
        return None

    def _generar_codigo(self, fecha: date) -> str:
        """Primer código libre de la forma AAAAMMDD-n, con n >= 1."""
        existentes = {a.codigo for a in self._libro_diario}
        n = 1
        while f"{fecha:%Y%m%d}-{n}" in existentes:
            n += 1
        return f"{fecha:%Y%m%d}-{n}"
