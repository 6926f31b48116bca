"""
Lectura de archivos de texto para los lectores contables.

Los tres formatos (cuentas, asientos, balance inicial) se escriben a mano,
en UTF-8, a veces desde Windows. Aquí se resuelve eso una sola vez.
"""

from pathlib import Path

from contabilidad.domain.exceptions import LecturaError
from contabilidad.domain.shared.text_cleaner import normalize_line_endings


def leer_lineas(ruta: Path) -> list[str]:
    """Lee un archivo de texto UTF-8 y lo devuelve partido en líneas.

    Raises:
        LecturaError: Si el archivo no existe, no se puede abrir o no es UTF-8.
    """
    try:
        texto = ruta.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LecturaError(str(ruta), str(e))
    return normalize_line_endings(texto).split("\n")
