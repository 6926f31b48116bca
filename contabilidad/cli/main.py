"""
Punto de entrada CLI: contabilidad.

Uso:
    # Cargar el directorio de asientos y listar diario, mayor y sumas y saldos
    contabilidad /ruta/asientos

    # Cargar primero el PGC y después un archivo de cuentas propio
    contabilidad /ruta/asientos --pgc --cuentas /ruta/cuentas.txt

    # Solo validar: carga todo y muestra el resumen, sin listados
    contabilidad /ruta/asientos --prueba

    # Mayor de dos cuentas concretas, y además el informe en Excel y texto
    contabilidad /ruta/asientos --cuenta 572 --cuenta 600 -o /ruta/salida

Dentro del directorio se buscan por defecto:
- cuentas.txt: definición de cuentas (si existe).
- balance_inicial.txt: balance de apertura (si existe).
- AAAAMMDD*.data: archivos de asientos.

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
crea los lectores, el logger y los escritores concretos y los inyecta en
el ProcesadorContable. No contiene lógica contable.
"""

import argparse
import sys
from pathlib import Path

from contabilidad.adapters.input.lectores.asientos_reader import AsientosReader
from contabilidad.adapters.input.lectores.balance_inicial_reader import BalanceInicialReader
from contabilidad.adapters.input.lectores.cuentas_reader import CuentasReader
from contabilidad.adapters.output.loggers.console_logger import ConsoleLogger
from contabilidad.adapters.output.writers.excel_writer import ExcelWriter
from contabilidad.adapters.output.writers.texto_writer import TextoWriter
from contabilidad.domain.exceptions import ContabilidadError, LecturaError
from contabilidad.domain.services.cuadro import Cuadro
from contabilidad.domain.services.procesador_contable import ProcesadorContable

ARCHIVO_CUENTAS = "cuentas.txt"
ARCHIVO_BALANCE_INICIAL = "balance_inicial.txt"
NOMBRE_INFORME = "contabilidad"


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    directorio = Path(args.ruta)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=not args.prueba)
    procesador = ProcesadorContable(
        lector_cuentas=CuentasReader(),
        lector_asientos=AsientosReader(),
        lector_balance=BalanceInicialReader(),
        logger=logger,
    )
    cuadro = Cuadro()

    print("=" * 60)
    print("CONTABILIDAD" + (" (PRUEBA)" if args.prueba else ""))
    print("=" * 60)
    print(f"  Asientos: {directorio}")
    if output_dir is not None:
        print(f"  Salida:   {output_dir}")
    print()

    # --- Cargar ---
    try:
        _cargar(procesador, cuadro, directorio, args)
        informe = cuadro.informe(args.cuenta)
    except ContabilidadError as e:
        print(f"\n❌ {e}")
        logger.print_summary()
        sys.exit(1)

    if args.prueba:
        logger.print_summary()
        if logger.tiene_errores:
            sys.exit(1)
        return

    # --- Listados ---
    texto_writer = TextoWriter()
    print()
    print(texto_writer.render(informe))

    if output_dir is not None:
        try:
            ruta_excel = ExcelWriter().write(informe, output_dir / NOMBRE_INFORME)
            ruta_texto = texto_writer.write(informe, output_dir / NOMBRE_INFORME)
        except ContabilidadError as e:
            print(f"\n❌ {e}")
            sys.exit(1)
        print(f"\n📁 Excel generado: {ruta_excel}")
        print(f"📁 Texto generado: {ruta_texto}")

    # --- Resumen final ---
    logger.print_summary()


def _cargar(
    procesador: ProcesadorContable,
    cuadro: Cuadro,
    directorio: Path,
    args: argparse.Namespace,
) -> None:
    """Carga PGC, cuentas, balance inicial y asientos, en ese orden.

    Raises:
        LecturaError: Si el directorio no existe o un archivo pedido
                      explícitamente no se puede leer.
    """
    if not directorio.is_dir():
        raise LecturaError(str(directorio), "no es un directorio")

    if args.pgc:
        procesador.cargar_pgc(cuadro)

    if args.cuentas:
        procesador.cargar_cuentas(cuadro, Path(args.cuentas))
    elif (directorio / ARCHIVO_CUENTAS).is_file():
        procesador.cargar_cuentas(cuadro, directorio / ARCHIVO_CUENTAS)

    if args.balance_inicial:
        procesador.cargar_balance_inicial(cuadro, Path(args.balance_inicial), obligatorio=True)
    elif (directorio / ARCHIVO_BALANCE_INICIAL).is_file():
        procesador.cargar_balance_inicial(cuadro, directorio / ARCHIVO_BALANCE_INICIAL)

    procesador.procesar_directorio(cuadro, directorio)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="contabilidad",
        description="Contabilidad por partida doble: libro diario, mayor y sumas y saldos",
        epilog="Ejemplo: contabilidad /ruta/asientos --pgc -o /ruta/salida",
        add_help=False,
    )

    parser.add_argument(
        "ruta",
        help="Directorio con los archivos de asientos (AAAAMMDD*.data)",
    )

    parser.add_argument(
        "--ayuda",
        action="help",
        help="Muestra esta ayuda y termina",
    )

    parser.add_argument(
        "--prueba",
        action="store_true",
        help="Solo carga y valida los archivos; muestra el resumen sin listados",
    )

    parser.add_argument(
        "--pgc",
        action="store_true",
        help="Carga el Plan General de Contabilidad antes que las cuentas propias",
    )

    parser.add_argument(
        "--cuentas",
        metavar="ARCHIVO",
        help=f"Archivo de definición de cuentas. Por defecto, <ruta>/{ARCHIVO_CUENTAS} si existe.",
    )

    parser.add_argument(
        "--balance-inicial",
        dest="balance_inicial",
        metavar="ARCHIVO",
        help="Balance de apertura. Por defecto, "
        f"<ruta>/{ARCHIVO_BALANCE_INICIAL} si existe.",
    )

    parser.add_argument(
        "--cuenta",
        action="append",
        metavar="CODIGO",
        help="Limita el libro mayor a esta cuenta. Se puede repetir.",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help=f"Directorio donde escribir además {NOMBRE_INFORME}.xlsx y {NOMBRE_INFORME}.txt",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
