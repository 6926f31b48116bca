"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar las líneas de los archivos de
cuentas, asientos y balance inicial antes de interpretarlas.

Estas funciones NO tienen lógica contable. Solo operan sobre strings.
"""

import re


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  Caja,   euros  ")
        'Caja, euros'
    """
    return re.sub(r"\s+", " ", text).strip()


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Los archivos editados en Windows llegan con \\r\\n.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def es_linea_ignorable(line: str) -> bool:
    """Indica si una línea está vacía o es un comentario (empieza por #)."""
    cleaned = line.strip()
    return not cleaned or cleaned.startswith("#")


def normalizar_cabecera(line: str) -> str:
    """Normaliza una cabecera de sección: mayúsculas, sin ':' final y con
    espacios simples.

    Ejemplos:
        >>> normalizar_cabecera("  Activo   no corriente: ")
        'ACTIVO NO CORRIENTE'
    """
    return clean_whitespace(line).rstrip(":").strip().upper()
