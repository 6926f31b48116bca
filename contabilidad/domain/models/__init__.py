"""
Modelos de dominio del proyecto contabilidad.

Casi todos son dataclasses inmutables (frozen=True). La excepción es
Cuenta, cuyos totales rehace el cuadro al mayorizar.

Uso:
    from contabilidad.domain.models import Asiento, Cuenta, Masa, Movimiento
"""

from contabilidad.domain.models.apunte_mayor import ApunteMayor, Lado
from contabilidad.domain.models.asiento import Asiento
from contabilidad.domain.models.cuenta import Cuenta
from contabilidad.domain.models.informe import InformeContable, MayorCuenta
from contabilidad.domain.models.masa import Masa
from contabilidad.domain.models.movimiento import Movimiento
from contabilidad.domain.models.presupuesto import (
    ComparacionPartida,
    ItemPresupuesto,
    RangoFechas,
    TipoImporte,
)
from contabilidad.domain.models.resultado_lectura import (
    LineaDescartada,
    RegistroAsiento,
    RegistroCuenta,
    ResultadoLectura,
)
from contabilidad.domain.models.sumas_y_saldos import FilaSumasYSaldos, SumasYSaldos

__all__ = [
    "ApunteMayor",
    "Asiento",
    "ComparacionPartida",
    "Cuenta",
    "FilaSumasYSaldos",
    "InformeContable",
    "ItemPresupuesto",
    "Lado",
    "LineaDescartada",
    "Masa",
    "MayorCuenta",
    "Movimiento",
    "RangoFechas",
    "RegistroAsiento",
    "RegistroCuenta",
    "ResultadoLectura",
    "SumasYSaldos",
    "TipoImporte",
]
