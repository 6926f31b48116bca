"""
Utilidades compartidas del dominio.

Funciones puras usadas por el cuadro, los lectores y los escritores.
No dependen de ninguna librería externa.

Uso:
    from contabilidad.domain.shared.money import parse_importe, format_importe
    from contabilidad.domain.shared.date_parser import parse_fecha_archivo
    from contabilidad.domain.shared.clasificacion import interpretar_codigo
    from contabilidad.domain.shared.cuentas_pgc import CUENTAS_PGC
"""
