"""
Clasificación de cuentas por código según el PGC.

El primer dígito del código es el grupo, el segundo el subgrupo y el
tercero la cuenta. Las subcuentas (4 o más dígitos) se clasifican como
la cuenta de tres dígitos a la que pertenecen.

Hay códigos que el cuadro oficial no asigna a ninguna masa (por ejemplo
el subgrupo 19, "Situaciones transitorias de financiación", o casi todo
el grupo 5). Para ellos se devuelve None y el llamador decide: el
cargador del PGC los descarta y el lector de cuentas los registra en la
bitácora.
"""

import re

from contabilidad.domain.models.masa import Masa

_CODIGO = re.compile(r"(\d)(\d?)(\d?)\d*")

# Grupo 1: Financiación básica
_SUBGRUPOS_1: dict[str, Masa] = {
    "0": Masa.PATRIMONIO,  # Capital
    "1": Masa.PATRIMONIO,  # Reservas
    "2": Masa.PATRIMONIO,  # Resultados pendientes de aplicación
    "3": Masa.PATRIMONIO,  # Subvenciones y ajustes por cambios de valor
    "4": Masa.PASIVO_NO_CORRIENTE,  # Provisiones
    "5": Masa.PASIVO_NO_CORRIENTE,  # Deudas l/p con características especiales
    "6": Masa.PASIVO_NO_CORRIENTE,  # Deudas l/p con partes vinculadas
    "7": Masa.PASIVO_NO_CORRIENTE,  # Deudas l/p por préstamos y empréstitos
    "8": Masa.PASIVO_NO_CORRIENTE,  # Fianzas y garantías l/p
}

# Grupo 4: Acreedores y deudores por operaciones comerciales
_SUBGRUPOS_4: dict[str, Masa] = {
    "0": Masa.PASIVO_CORRIENTE,  # Proveedores
    "1": Masa.PASIVO_CORRIENTE,  # Acreedores varios
    "2": Masa.PASIVO_NO_CORRIENTE,  # Libre: deudas comerciales a largo plazo
    "3": Masa.ACTIVO_CORRIENTE,  # Clientes
    "4": Masa.ACTIVO_CORRIENTE,  # Deudores varios
    "5": Masa.ACTIVO_NO_CORRIENTE,  # Libre: créditos comerciales a largo plazo
    "9": Masa.PASIVO_CORRIENTE,  # Deterioro y provisiones a corto plazo
}

# 46 Personal: solo dos cuentas tienen masa
_CUENTAS_46: dict[str, Masa] = {
    "460": Masa.ACTIVO_CORRIENTE,  # Anticipos de remuneraciones
    "465": Masa.PASIVO_CORRIENTE,  # Remuneraciones pendientes de pago
}

# 48 Ajustes por periodificación
_CUENTAS_48: dict[str, Masa] = {
    "0": Masa.ACTIVO_CORRIENTE,  # Gastos anticipados
    "5": Masa.PASIVO_CORRIENTE,  # Ingresos anticipados
}

# Grupo 5: Cuentas financieras
_SUBGRUPOS_5: dict[str, Masa] = {
    "4": Masa.ACTIVO_NO_CORRIENTE,
    "7": Masa.ACTIVO_CORRIENTE,  # Tesorería
}


def interpretar_codigo(codigo: str) -> Masa | None:
    """Devuelve la masa patrimonial de un código de cuenta.

    Se toma la primera secuencia de dígitos del texto, así que los
    espacios alrededor del código no importan.

    Args:
        codigo: Código de cuenta. Ejemplo: "572", "4300", "60".

    Returns:
        La Masa correspondiente, o None si el código no tiene dígitos o
        el PGC no lo asigna a ninguna masa.

    Ejemplos:
        >>> interpretar_codigo("572")
        <Masa.ACTIVO_CORRIENTE: 'Activo corriente'>
        >>> interpretar_codigo("60")
        <Masa.GASTO: 'Gastos'>
        >>> interpretar_codigo("hsjhuek") is None
        True
    """
    m = _CODIGO.search(codigo)
    if not m:
        return None

    grupo, subgrupo, cuenta = m.group(1), m.group(2), m.group(3)

    if grupo == "1":
        return _SUBGRUPOS_1.get(subgrupo)
    if grupo == "2":
        return Masa.ACTIVO_NO_CORRIENTE  # Inmovilizado
    if grupo == "3":
        return Masa.ACTIVO_CORRIENTE  # Existencias
    if grupo == "4":
        return _interpretar_grupo_4(subgrupo, cuenta)
    if grupo == "5":
        return _SUBGRUPOS_5.get(subgrupo)
    if grupo in ("6", "8"):
        return Masa.GASTO
    if grupo in ("7", "9"):
        return Masa.INGRESO
    return None


def _interpretar_grupo_4(subgrupo: str, cuenta: str) -> Masa | None:
    if subgrupo == "6":
        return _CUENTAS_46.get(f"4{subgrupo}{cuenta}")
    if subgrupo == "7":
        # 470-474 son créditos con las administraciones, 475-477 deudas
        if cuenta in ("0", "1", "2", "3", "4"):
            return Masa.ACTIVO_CORRIENTE
        if cuenta in ("5", "6", "7"):
            return Masa.PASIVO_CORRIENTE
        return None
    if subgrupo == "8":
        return _CUENTAS_48.get(cuenta)
    return _SUBGRUPOS_4.get(subgrupo)
