"""
Excepciones de dominio del proyecto contabilidad.

Permiten que el cargador y el CLI distingan entre "la cuenta no existe"
y "el asiento no cuadra" y reaccionen de forma distinta: lo primero se
registra en la bitácora y se sigue leyendo, lo segundo se informa al
llamador.

Jerarquía:
    ContabilidadError
    ├── CuentaDuplicadaError        → Ya existe una cuenta con ese código
    ├── CuentaInexistenteError      → El código de cuenta no está en el cuadro
    ├── CuadroNoVacioError          → Se intentó cargar el PGC en un cuadro con cuentas
    ├── AsientoDesequilibradoError  → Debe y haber no suman lo mismo
    ├── AsientoInexistenteError     → No hay ningún asiento con ese código
    ├── ImporteInvalidoError        → Texto que no se puede convertir a importe
    ├── FormatoInvalidoError        → Archivo o línea con formato inesperado
    ├── LecturaError                → No se pudo leer un archivo obligatorio
    ├── RangoFechasError            → Fin de un presupuesto anterior al inicio
    └── OutputError                 → Error al generar el informe de salida
"""

from datetime import date
from decimal import Decimal


class ContabilidadError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Un solo `except ContabilidadError` en el CLI captura cualquier error
    del dominio; el cargador captura subclases concretas.
    """


class CuentaDuplicadaError(ContabilidadError):
    """Se lanza al crear una cuenta cuyo código ya está en el cuadro."""

    def __init__(self, codigo: str, nombre: str):
        self.codigo = codigo
        self.nombre = nombre
        super().__init__(f"La cuenta '{codigo} ~ {nombre}' ya existe")


class CuentaInexistenteError(ContabilidadError):
    """Se lanza cuando un asiento o un presupuesto hace referencia a un
    código de cuenta que no está dado de alta en el cuadro."""

    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"El código de cuenta '{codigo}' no existe")


class CuadroNoVacioError(ContabilidadError):
    """Se lanza al cargar el PGC sobre un cuadro que ya tiene cuentas."""

    def __init__(self, num_cuentas: int):
        self.num_cuentas = num_cuentas
        super().__init__(
            "El cuadro ya contiene cuentas. Puedes añadir de una en una, "
            "pero no cargar el PGC"
        )


class AsientoDesequilibradoError(ContabilidadError):
    """Se lanza cuando el debe y el haber de un asiento no coinciden.

    El asiento no se inserta en el libro diario.
    """

    def __init__(self, codigo: str, total_debe: Decimal, total_haber: Decimal):
        self.codigo = codigo
        self.total_debe = total_debe
        self.total_haber = total_haber
        super().__init__(
            f"El debe y el haber del asiento '{codigo}' no coinciden: "
            f"debe {total_debe}, haber {total_haber}"
        )


class AsientoInexistenteError(ContabilidadError):
    """Se lanza al buscar o eliminar un asiento que no está en el diario."""

    def __init__(self, codigo: str):
        self.codigo = codigo
        super().__init__(f"El asiento '{codigo}' no existe en el libro diario")


class ImporteInvalidoError(ContabilidadError):
    """Se lanza cuando un importe no se puede convertir a Decimal.

    Ejemplos:
    - "veinte" en lugar de "20.00".
    - Una línea de movimiento sin importe.
    """

    def __init__(self, texto: str, detalle: str = ""):
        self.texto = texto
        self.detalle = detalle
        mensaje = f"Importe inválido: '{texto}'"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class FormatoInvalidoError(ContabilidadError):
    """Se lanza cuando un archivo de entrada no tiene el formato esperado.

    Ejemplos:
    - Un asiento sin la sección DEBE o HABER.
    - Un nombre de archivo de asientos que no empieza por una fecha.
    - Un asiento sin el terminador ///.
    """

    def __init__(self, archivo: str, detalle: str, linea: int | None = None):
        self.archivo = archivo
        self.detalle = detalle
        self.linea = linea
        ubicacion = f"'{archivo}'" if linea is None else f"'{archivo}', línea {linea}"
        super().__init__(f"Formato inválido en {ubicacion}: {detalle}")


class LecturaError(ContabilidadError):
    """Se lanza cuando no se puede leer un archivo obligatorio, como el
    balance inicial indicado explícitamente en la línea de comandos."""

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"No se pudo leer '{archivo}': {causa}")


class RangoFechasError(ContabilidadError):
    """Se lanza cuando la fecha de fin de un presupuesto es anterior a la
    fecha de inicio."""

    def __init__(self, inicio: date, fin: date):
        self.inicio = inicio
        self.fin = fin
        super().__init__(
            f"La fecha de fin ({fin.isoformat()}) es anterior a la de "
            f"inicio ({inicio.isoformat()})"
        )


class OutputError(ContabilidadError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
