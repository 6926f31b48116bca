"""
Lector del archivo de definición de cuentas.

Formato: una cuenta por línea, código y nombre separados por espacios.

    # Cuentas propias
    570   Caja, euros
    5720  Banco Santander c/c
    600   Compras de mercaderías

Las líneas vacías y las que empiezan por # se ignoran. El lector no
clasifica ni valida duplicados: eso lo hace el ProcesadorContable.
"""

import re
from pathlib import Path

from contabilidad.adapters.input.lectores.archivo_texto import leer_lineas
from contabilidad.domain.models.resultado_lectura import (
    LineaDescartada,
    RegistroCuenta,
    ResultadoLectura,
)
from contabilidad.domain.ports.lector_contable import LectorContable
from contabilidad.domain.shared.text_cleaner import clean_whitespace, es_linea_ignorable

_LINEA_CUENTA = re.compile(r"^(\d+)\s+(\S.*)$")


class CuentasReader(LectorContable):
    """Lee archivos de definición de cuentas (<código> <nombre>)."""

    @property
    def tipo(self) -> str:
        return "cuentas"

    def leer(self, ruta: Path) -> ResultadoLectura:
        cuentas: list[RegistroCuenta] = []
        descartes: list[LineaDescartada] = []

        for numero, linea in enumerate(leer_lineas(ruta), start=1):
            if es_linea_ignorable(linea):
                continue
            m = _LINEA_CUENTA.match(linea.strip())
            if not m:
                descartes.append(
                    LineaDescartada(
                        ruta.name, numero, f"Se esperaba '<código> <nombre>': '{linea.strip()}'"
                    )
                )
                continue
            cuentas.append(RegistroCuenta(m.group(1), clean_whitespace(m.group(2)), numero))

        return ResultadoLectura(
            archivo=ruta.name,
            cuentas=tuple(cuentas),
            descartes=tuple(descartes),
        )
