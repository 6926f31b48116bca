"""
Lector de archivos de asientos diarios.

Cada archivo se llama <AAAAMMDD><sufijo>.data (el sufijo puede faltar:
"20240105.data", "20240105b.data") y contiene uno o más asientos con
este formato:

    Compra de mercaderías
    Factura 2024/001

    DEBE
    600 1.200,00
    472 252,00

    HABER
    400 1452
    ///

- Concepto: una o más líneas hasta la cabecera DEBE.
- DEBE y HABER: una partida <código> <importe> por línea.
- /// cierra el asiento.

La fecha de todos los asientos es la del nombre del archivo. El código
del primer asiento es el nombre sin extensión; los siguientes del mismo
archivo llevan "-2", "-3", etc.

Un asiento con alguna línea que no se entiende se descarta entero (con
el motivo en ResultadoLectura.descartes): registrarlo sin esa partida lo
dejaría descuadrado o, peor, cuadrado con datos incompletos.
"""

import re
from datetime import date
from decimal import Decimal
from pathlib import Path

from contabilidad.adapters.input.lectores.archivo_texto import leer_lineas
from contabilidad.domain.exceptions import FormatoInvalidoError, ImporteInvalidoError
from contabilidad.domain.models.resultado_lectura import (
    LineaDescartada,
    RegistroAsiento,
    ResultadoLectura,
)
from contabilidad.domain.ports.lector_contable import LectorContable
from contabilidad.domain.shared.date_parser import parse_fecha_archivo
from contabilidad.domain.shared.money import parse_importe

TERMINADOR = "///"
CABECERA_DEBE = "DEBE"
CABECERA_HABER = "HABER"

_LINEA_PARTIDA = re.compile(r"^(\d+)\s+(\S.*)$")


class AsientosReader(LectorContable):
    """Lee los asientos de un archivo AAAAMMDD*.data."""

    @property
    def tipo(self) -> str:
        return "asientos"

    def leer(self, ruta: Path) -> ResultadoLectura:
        try:
            fecha = parse_fecha_archivo(ruta.name)
        except ValueError as e:
            raise FormatoInvalidoError(ruta.name, str(e))

        lineas = leer_lineas(ruta)

        asientos: list[RegistroAsiento] = []
        descartes: list[LineaDescartada] = []
        bloque: list[tuple[int, str]] = []
        num_asiento = 0

        for numero, linea in enumerate(lineas, start=1):
            if linea.strip() != TERMINADOR:
                bloque.append((numero, linea))
                continue

            contenido = [(n, texto) for n, texto in bloque if texto.strip()]
            bloque = []
            if not contenido:
                continue

            num_asiento += 1
            codigo = ruta.stem if num_asiento == 1 else f"{ruta.stem}-{num_asiento}"
            try:
                asientos.append(self._parsear_asiento(ruta.name, contenido, codigo, fecha))
            except FormatoInvalidoError as e:
                descartes.append(
                    LineaDescartada(ruta.name, e.linea or contenido[0][0], e.detalle)
                )

        pendiente = [(n, texto) for n, texto in bloque if texto.strip()]
        if pendiente:
            descartes.append(
                LineaDescartada(
                    ruta.name, pendiente[0][0], f"Asiento sin terminador '{TERMINADOR}'"
                )
            )

        return ResultadoLectura(
            archivo=ruta.name,
            asientos=tuple(asientos),
            descartes=tuple(descartes),
        )

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _parsear_asiento(
        self,
        archivo: str,
        contenido: list[tuple[int, str]],
        codigo: str,
        fecha: date,
    ) -> RegistroAsiento:
        """Interpreta las líneas no vacías de un asiento.

        Raises:
            FormatoInvalidoError: Si falta alguna sección o alguna partida
                                  no se entiende.
        """
        seccion = "concepto"
        concepto: list[str] = []
        debe: list[tuple[str, Decimal]] = []
        haber: list[tuple[str, Decimal]] = []

        for numero, linea in contenido:
            limpia = linea.strip()
            cabecera = limpia.upper()

            if cabecera == CABECERA_DEBE:
                if seccion != "concepto":
                    raise FormatoInvalidoError(archivo, "Cabecera DEBE repetida", numero)
                seccion = "debe"
            elif cabecera == CABECERA_HABER:
                if seccion != "debe":
                    raise FormatoInvalidoError(archivo, "Cabecera HABER antes que DEBE", numero)
                seccion = "haber"
            elif seccion == "concepto":
                concepto.append(limpia)
            elif seccion == "debe":
                debe.append(_parsear_partida(archivo, numero, limpia))
            else:
                haber.append(_parsear_partida(archivo, numero, limpia))

        inicio = contenido[0][0]
        if not concepto:
            raise FormatoInvalidoError(archivo, "El asiento no tiene concepto", inicio)
        if seccion == "concepto":
            raise FormatoInvalidoError(archivo, "Falta la sección DEBE", inicio)
        if seccion == "debe":
            raise FormatoInvalidoError(archivo, "Falta la sección HABER", inicio)
        if not debe or not haber:
            raise FormatoInvalidoError(archivo, "El debe y el haber deben tener partidas", inicio)

        return RegistroAsiento(
            codigo=codigo,
            fecha=fecha,
            concepto="\n".join(concepto),
            debe=tuple(debe),
            haber=tuple(haber),
            linea=inicio,
        )


def _parsear_partida(archivo: str, numero: int, linea: str) -> tuple[str, Decimal]:
    """Convierte "572 1.200,00" en ("572", Decimal("1200.00"))."""
    m = _LINEA_PARTIDA.match(linea)
    if not m:
        raise FormatoInvalidoError(archivo, f"Se esperaba '<código> <importe>': '{linea}'", numero)
    try:
        importe = parse_importe(m.group(2))
    except ImporteInvalidoError as e:
        raise FormatoInvalidoError(archivo, str(e), numero)
    return m.group(1), importe
