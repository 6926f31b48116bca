"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from contabilidad.domain.ports import LectorContable, OutputWriter, ProcessLogger
"""

from contabilidad.domain.ports.lector_contable import LectorContable
from contabilidad.domain.ports.output_writer import OutputWriter
from contabilidad.domain.ports.process_logger import ProcessLogger

__all__ = [
    "LectorContable",
    "OutputWriter",
    "ProcessLogger",
]
