"""
Utilidades para manejo de importes.

Los importes llegan de tres sitios distintos: los archivos de asientos
escritos a mano, el balance inicial y las llamadas directas a
Cuadro.crear_asiento() (que pueden pasar int o float). Todos terminan
como Decimal, que es lo único que el dominio suma y compara.

Formatos aceptados en texto:
    "1234.56"     → punto decimal
    "1234,56"     → coma decimal
    "1.234,56"    → miles con punto, coma decimal (formato español)
    "1,234.56"    → miles con coma, punto decimal
    "1234.56 €"   → con símbolo de euro
    "-20"         → negativos
"""

import re
from decimal import Decimal, InvalidOperation

from contabilidad.domain.exceptions import ImporteInvalidoError

CENTIMOS = Decimal("0.01")

_NUMERO = re.compile(r"^[-+]?\d+(\.\d+)?$")


def parse_importe(text: str) -> Decimal:
    """Convierte un texto con un importe a Decimal.

    Args:
        text: Texto que representa un importe.

    Returns:
        Decimal con el valor exacto del texto (sin redondear).

    Raises:
        TypeError: Si no se recibe un str.
        ImporteInvalidoError: Si el texto no se puede convertir. El mensaje
                              incluye el valor original.

    Ejemplos:
        >>> parse_importe("1.234,56 €")
        Decimal('1234.56')
        >>> parse_importe("20")
        Decimal('20')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_importe espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ImporteInvalidoError(text, "el importe está vacío")

    cleaned = text.replace("€", "").replace("EUR", "")
    cleaned = re.sub(r"\s+", "", cleaned)
    cleaned = _normalizar_separadores(cleaned)

    if not _NUMERO.match(cleaned):
        raise ImporteInvalidoError(text)

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ImporteInvalidoError(text, f"limpio: '{cleaned}'")


def to_importe(valor: Decimal | int | float | str) -> Decimal:
    """Convierte cualquier importe aceptado por el dominio a Decimal.

    Los float pasan por str() para que 20.1 sea Decimal("20.1") y no
    Decimal(20.100000000000001421...).

    Raises:
        ImporteInvalidoError: Si el valor no es un número válido.
    """
    if isinstance(valor, bool):
        raise ImporteInvalidoError(str(valor), "no es un número")
    if isinstance(valor, Decimal):
        if not valor.is_finite():
            raise ImporteInvalidoError(str(valor), "no es un número finito")
        return valor
    if isinstance(valor, int):
        return Decimal(valor)
    if isinstance(valor, float):
        importe = Decimal(str(valor))
        if not importe.is_finite():
            raise ImporteInvalidoError(str(valor), "no es un número finito")
        return importe
    if isinstance(valor, str):
        return parse_importe(valor)
    raise ImporteInvalidoError(repr(valor), f"tipo no soportado: {type(valor).__name__}")


def redondear(importe: Decimal) -> Decimal:
    """Redondea un importe a céntimos."""
    return importe.quantize(CENTIMOS)


def format_importe(amount: Decimal) -> str:
    """Formatea un Decimal como importe en euros con formato español.

    Ejemplos:
        >>> format_importe(Decimal("1234567.891"))
        '1.234.567,89 €'
        >>> format_importe(Decimal("-20"))
        '-20,00 €'
    """
    amount = redondear(amount)
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if amount < 0:
        return f"-{texto} €"
    return f"{texto} €"


def _normalizar_separadores(cleaned: str) -> str:
    """Deja un único punto como separador decimal.

    Si aparecen los dos separadores, el último es el decimal. Si solo
    aparece uno y se repite, son separadores de miles.
    """
    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            return cleaned.replace(".", "").replace(",", ".")
        return cleaned.replace(",", "")
    if "," in cleaned:
        if cleaned.count(",") == 1:
            return cleaned.replace(",", ".")
        return cleaned.replace(",", "")
    if cleaned.count(".") > 1:
        return cleaned.replace(".", "")
    return cleaned
