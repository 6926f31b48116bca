"""
Conversión de fechas de los archivos contables.

Las fechas aparecen en dos sitios:
- El nombre de los archivos de asientos: "20240105.data",
  "20240105-compras.data". Los 8 primeros caracteres son AAAAMMDD.
- Líneas escritas a mano (balance inicial, presupuestos): "2024-01-05"
  o "05/01/2024".

Siempre se devuelve un objeto `date` de Python, nunca un string.
"""

import re
from datetime import date


def parse_fecha_archivo(nombre_archivo: str) -> date:
    """Extrae la fecha de los 8 primeros caracteres de un nombre de archivo.

    Args:
        nombre_archivo: Nombre (no ruta) del archivo. Ejemplo: "20240105b.data".

    Returns:
        Objeto date.

    Raises:
        ValueError: Si el nombre no empieza por una fecha AAAAMMDD válida.

    Ejemplos:
        >>> parse_fecha_archivo("20240105.data")
        date(2024, 1, 5)
        >>> parse_fecha_archivo("20240105-compras.data")
        date(2024, 1, 5)
    """
    m = re.match(r"^(\d{4})(\d{2})(\d{2})", nombre_archivo)
    if not m:
        raise ValueError(
            f"El nombre '{nombre_archivo}' no empieza por una fecha AAAAMMDD"
        )
    return _build_date(int(m.group(1)), int(m.group(2)), int(m.group(3)), nombre_archivo)


def parse_fecha(date_text: str) -> date:
    """Parsea una fecha escrita a mano.

    Formatos soportados:
        "2024-01-05"    → AAAA-MM-DD (ISO)
        "05/01/2024"    → DD/MM/AAAA
        "05-01-2024"    → DD-MM-AAAA
        "20240105"      → AAAAMMDD

    Raises:
        ValueError: Si el formato no se reconoce o la fecha no existe.
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    m = re.match(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", text)
    if m:
        return _build_date(int(m.group(1)), int(m.group(2)), int(m.group(3)), text)

    m = re.match(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})$", text)
    if m:
        return _build_date(int(m.group(3)), int(m.group(2)), int(m.group(1)), text)

    m = re.match(r"^(\d{4})(\d{2})(\d{2})$", text)
    if m:
        return _build_date(int(m.group(1)), int(m.group(2)), int(m.group(3)), text)

    raise ValueError(
        f"Formato de fecha no reconocido: '{text}'. "
        f"Formatos soportados: AAAA-MM-DD, DD/MM/AAAA, AAAAMMDD"
    )


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje de error que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} ({e})"
        )
