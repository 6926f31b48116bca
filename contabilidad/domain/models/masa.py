"""
Modelo de dominio: Masa patrimonial.

Cada cuenta del cuadro pertenece a una masa: las cinco del balance
(activo corriente y no corriente, pasivo corriente y no corriente,
patrimonio neto) o una de las dos de la cuenta de resultados (ingresos
y gastos). La masa se deduce del código de la cuenta con
interpretar_codigo().
"""

from enum import Enum


class Masa(Enum):
    """Clasificación de una cuenta según el PGC."""

    ACTIVO_CORRIENTE = "Activo corriente"
    ACTIVO_NO_CORRIENTE = "Activo no corriente"
    PASIVO_CORRIENTE = "Pasivo corriente"
    PASIVO_NO_CORRIENTE = "Pasivo no corriente"
    PATRIMONIO = "Patrimonio neto"
    INGRESO = "Ingresos"
    GASTO = "Gastos"

    def __str__(self) -> str:
        return self.value
