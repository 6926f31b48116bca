"""
Lector del balance inicial.

El balance inicial se convierte en el asiento de apertura: las partidas
de activo van al debe y las de pasivo y patrimonio neto al haber.

    FECHA 2024-01-01

    ACTIVO NO CORRIENTE
    216 3.000,00

    ACTIVO CORRIENTE
    572 12.000,00

    PATRIMONIO NETO
    100 15.000,00

La línea FECHA es opcional; sin ella el asiento lleva la fecha del día
en que se carga.
"""

import re
from decimal import Decimal
from pathlib import Path

from contabilidad.adapters.input.lectores.archivo_texto import leer_lineas
from contabilidad.domain.exceptions import ImporteInvalidoError
from contabilidad.domain.models.apunte_mayor import Lado
from contabilidad.domain.models.resultado_lectura import (
    LineaDescartada,
    RegistroAsiento,
    ResultadoLectura,
)
from contabilidad.domain.ports.lector_contable import LectorContable
from contabilidad.domain.shared.date_parser import parse_fecha
from contabilidad.domain.shared.money import parse_importe
from contabilidad.domain.shared.text_cleaner import es_linea_ignorable, normalizar_cabecera

CODIGO_APERTURA = "APERTURA"
CONCEPTO_APERTURA = "Asiento de apertura"

SECCIONES: dict[str, Lado] = {
    "ACTIVO": Lado.DEBE,
    "ACTIVO NO CORRIENTE": Lado.DEBE,
    "ACTIVO CORRIENTE": Lado.DEBE,
    "PASIVO": Lado.HABER,
    "PASIVO NO CORRIENTE": Lado.HABER,
    "PASIVO CORRIENTE": Lado.HABER,
    "PATRIMONIO": Lado.HABER,
    "PATRIMONIO NETO": Lado.HABER,
}

_LINEA_FECHA = re.compile(r"^FECHA\s*:?\s+(\S+)$", re.IGNORECASE)
_LINEA_PARTIDA = re.compile(r"^(\d+)\s+(\S.*)$")


class BalanceInicialReader(LectorContable):
    """Lee un balance inicial y lo devuelve como asiento de apertura."""

    @property
    def tipo(self) -> str:
        return "balance inicial"

    def leer(self, ruta: Path) -> ResultadoLectura:
        fecha = None
        lado: Lado | None = None
        debe: list[tuple[str, Decimal]] = []
        haber: list[tuple[str, Decimal]] = []
        descartes: list[LineaDescartada] = []

        for numero, linea in enumerate(leer_lineas(ruta), start=1):
            if es_linea_ignorable(linea):
                continue

            cabecera = normalizar_cabecera(linea)
            if cabecera in SECCIONES:
                lado = SECCIONES[cabecera]
                continue

            m = _LINEA_FECHA.match(linea.strip())
            if m:
                try:
                    fecha = parse_fecha(m.group(1))
                except ValueError as e:
                    descartes.append(LineaDescartada(ruta.name, numero, str(e)))
                continue

            m = _LINEA_PARTIDA.match(linea.strip())
            if not m:
                descartes.append(
                    LineaDescartada(
                        ruta.name, numero, f"Se esperaba '<código> <importe>': '{linea.strip()}'"
                    )
                )
                continue
            if lado is None:
                descartes.append(
                    LineaDescartada(ruta.name, numero, "Partida fuera de una sección ACTIVO/PASIVO")
                )
                continue

            try:
                importe = parse_importe(m.group(2))
            except ImporteInvalidoError as e:
                descartes.append(LineaDescartada(ruta.name, numero, str(e)))
                continue

            partidas = debe if lado is Lado.DEBE else haber
            partidas.append((m.group(1), importe))

        asientos: tuple[RegistroAsiento, ...] = ()
        if debe or haber:
            asientos = (
                RegistroAsiento(
                    codigo=CODIGO_APERTURA,
                    fecha=fecha,
                    concepto=CONCEPTO_APERTURA,
                    debe=tuple(debe),
                    haber=tuple(haber),
                ),
            )

        return ResultadoLectura(archivo=ruta.name, asientos=asientos, descartes=tuple(descartes))
