"""
Servicio de dominio: Procesador contable.

Orquesta la carga de un cuadro a partir de archivos:
1. (Opcional) Carga el PGC en el cuadro vacío.
2. Lee el archivo de cuentas y da de alta cada cuenta clasificable.
3. Lee el balance inicial y registra el asiento de apertura.
4. Lee los archivos de asientos (AAAAMMDD*.data) en orden y los registra.

Todo es "best effort": una línea mal escrita, una cuenta inexistente o un
asiento descuadrado se registran en la bitácora y la carga sigue con el
resto. Solo aborta la carga un archivo obligatorio que no se puede leer
(LecturaError), que se propaga al CLI.
"""

from pathlib import Path

from contabilidad.domain.exceptions import (
    AsientoDesequilibradoError,
    CuentaDuplicadaError,
    CuentaInexistenteError,
    FormatoInvalidoError,
    ImporteInvalidoError,
    LecturaError,
)
from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.resultado_lectura import RegistroAsiento, ResultadoLectura
from contabilidad.domain.ports.lector_contable import LectorContable
from contabilidad.domain.ports.process_logger import ProcessLogger
from contabilidad.domain.services.cuadro import Cuadro
from contabilidad.domain.shared.clasificacion import interpretar_codigo

PATRON_ASIENTOS = "*.data"


class ProcesadorContable:
    """Carga cuentas y asientos en un Cuadro a partir de archivos.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué formato concreto tienen los archivos; solo conoce el
    puerto LectorContable.
    """

    def __init__(
        self,
        lector_cuentas: LectorContable,
        lector_asientos: LectorContable,
        lector_balance: LectorContable,
        logger: ProcessLogger,
    ) -> None:
        self._lector_cuentas = lector_cuentas
        self._lector_asientos = lector_asientos
        self._lector_balance = lector_balance
        self._logger = logger

    def cargar_pgc(self, cuadro: Cuadro) -> int:
        """Carga el PGC y registra los códigos descartados.

        Returns:
            Número de cuentas creadas.

        Raises:
            CuadroNoVacioError: Si el cuadro ya tiene cuentas.
        """
        antes = len(cuadro)
        for codigo in cuadro.cargar_pgc():
            self._logger.log_codigo_no_clasificable(codigo, "PGC")
        return len(cuadro) - antes

    def cargar_cuentas(self, cuadro: Cuadro, ruta: Path) -> int:
        """Da de alta las cuentas de un archivo de definición de cuentas.

        Los códigos sin masa y los duplicados se registran y se saltan.

        Returns:
            Número de cuentas creadas.

        Raises:
            LecturaError: Si el archivo no se puede leer.
        """
        resultado = self._leer(self._lector_cuentas, ruta)

        creadas = 0
        for registro in resultado.cuentas:
            masa = interpretar_codigo(registro.codigo)
            if masa is None:
                self._logger.log_codigo_no_clasificable(registro.codigo, ruta.name)
                continue
            try:
                cuenta = cuadro.crear_cuenta(registro.nombre, registro.codigo, masa)
            except CuentaDuplicadaError as e:
                self._logger.log_line_discarded(ruta, registro.linea, str(e))
                continue
            self._logger.log_cuenta_creada(cuenta.codigo, cuenta.nombre, cuenta.masa)
            creadas += 1

        self._logger.log_file_processed(ruta, creadas)
        return creadas

    def cargar_balance_inicial(
        self, cuadro: Cuadro, ruta: Path, obligatorio: bool = False
    ) -> Asiento | None:
        """Registra el asiento de apertura a partir del balance inicial.

        Args:
            cuadro: Cuadro donde registrar el asiento.
            ruta: Archivo de balance inicial.
            obligatorio: Si es True, un archivo que no existe o no se puede
                         leer aborta la carga. Si es False, se registra y se
                         sigue sin asiento de apertura.

        Returns:
            El asiento de apertura, o None si no se pudo registrar.

        Raises:
            LecturaError: Si obligatorio=True y el archivo no se puede leer.
        """
        if not ruta.is_file():
            if obligatorio:
                raise LecturaError(str(ruta), "el archivo no existe")
            self._logger.log_file_skipped(ruta, "No existe el balance inicial")
            return None

        try:
            resultado = self._leer(self._lector_balance, ruta)
        except LecturaError as e:
            if obligatorio:
                raise
            self._logger.log_error(ruta, e)
            return None

        if not resultado.asientos:
            self._logger.log_file_skipped(ruta, "El balance inicial no tiene partidas")
            return None

        asiento = self._registrar(cuadro, ruta, resultado.asientos[0])
        self._logger.log_file_processed(ruta, 0 if asiento is None else 1)
        return asiento

    def procesar_directorio(self, cuadro: Cuadro, directorio: Path) -> list[Asiento]:
        """Registra los asientos de todos los archivos .data de un directorio.

        Los archivos se procesan por orden de nombre, que al empezar por la
        fecha es el orden cronológico.

        Returns:
            Asientos registrados (nuevos o sustitutos), en orden.

        Raises:
            LecturaError: Si el directorio no existe.
        """
        if not directorio.is_dir():
            raise LecturaError(str(directorio), "no es un directorio")

        registrados: list[Asiento] = []
        for archivo in sorted(directorio.glob(PATRON_ASIENTOS)):
            if archivo.is_file():
                registrados.extend(self.procesar_archivo(cuadro, archivo))

        self._logger.log_carga_completa(len(cuadro), len(cuadro.libro_diario))
        return registrados

    def procesar_archivo(self, cuadro: Cuadro, archivo: Path) -> list[Asiento]:
        """Registra los asientos de un archivo .data.

        Returns:
            Asientos registrados. Lista vacía si el archivo se descartó.
        """
        try:
            resultado = self._leer(self._lector_asientos, archivo)
        except FormatoInvalidoError as e:
            self._logger.log_file_skipped(archivo, e.detalle)
            return []
        except LecturaError as e:
            self._logger.log_error(archivo, e)
            return []

        registrados: list[Asiento] = []
        for registro in resultado.asientos:
            asiento = self._registrar(cuadro, archivo, registro)
            if asiento is not None:
                registrados.append(asiento)

        self._logger.log_file_processed(archivo, len(registrados))
        return registrados

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _leer(self, lector: LectorContable, ruta: Path) -> ResultadoLectura:
        """Lee un archivo con el lector dado y registra las líneas descartadas."""
        self._logger.log_file_received(ruta, lector.tipo)
        resultado = lector.leer(ruta)
        for descarte in resultado.descartes:
            self._logger.log_line_discarded(ruta, descarte.linea, descarte.motivo)
        return resultado

    def _registrar(self, cuadro: Cuadro, archivo: Path, registro: RegistroAsiento) -> Asiento | None:
        """Registra un asiento leído. Los errores se registran y devuelve None."""
        reemplaza = cuadro.buscar_asiento(registro.codigo) is not None
        try:
            asiento = cuadro.crear_asiento(
                registro.concepto,
                fecha=registro.fecha,
                debe=registro.debe,
                haber=registro.haber,
                codigo_asiento=registro.codigo,
            )
        except (
            CuentaInexistenteError,
            AsientoDesequilibradoError,
            ImporteInvalidoError,
        ) as e:
            self._logger.log_error(archivo, e)
            return None

        if reemplaza:
            self._logger.log_asiento_reemplazado(asiento)
        else:
            self._logger.log_asiento_registrado(asiento)
        return asiento
