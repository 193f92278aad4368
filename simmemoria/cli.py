"""Interactive menu for creating and viewing memory simulations."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .archivo import crear_archivo_simulacion
from .config import pedir_configuracion
from .generador import generar_procesos
from .simulador import ejecutar_simulacion
from .visualizador import mostrar_simulaciones

Ruta = Union[str, Path]
Leer = Callable[[str], str]
Escribir = Callable[[str], None]

_BANNER = (
    "================================================",
    "Bienvenido al programa de simulación de memoria",
    "Este programa simula la asignación de memoria en un sistema multiprogramado y mono-procesador.",
    "Se implementan estrategias como First-Fit, Best-Fit, Next-Fit, y Worst-Fit.",
    "El objetivo es estudiar el comportamiento de distintas estrategias de administración de memoria.",
    "================================================",
    "Materia: Sistemas Operativos",
    "================================================",
    "1) Crear Nueva Simulación",
    "2) Ver simulaciones",
    "3) Salir",
    "",
)


def crear_carpetas(directorio: Ruta = "files") -> Path:
    """Create the reports directory if it does not exist yet."""
    carpeta = Path(directorio)
    carpeta.mkdir(parents=True, exist_ok=True)
    return carpeta


def limpiar_consola() -> None:
    """Clear the terminal using the platform's own command."""
    if sys.platform.startswith("win"):
        subprocess.run(["cmd", "/C", "cls"], check=False)
    else:
        subprocess.run(["clear"], check=False)


def nueva_tanda(
    directorio: Ruta = "files",
    leer: Leer = input,
    escribir: Escribir = print,
    rng: Optional[random.Random] = None,
) -> Path:
    """Generate a batch, ask for settings, simulate and save the report."""
    procesos = generar_procesos(leer, escribir, rng)
    configuracion = pedir_configuracion(leer, escribir)
    resultado = ejecutar_simulacion(procesos, configuracion)
    return crear_archivo_simulacion(
        directorio, procesos, configuracion, resultado.eventos, resultado.resultados
    )


def _menu(directorio: Path, leer: Leer, escribir: Escribir) -> None:
    while True:
        limpiar_consola()
        for linea in _BANNER:
            escribir(linea)
        opcion = leer("Seleccione una opción (1-3): ").strip()
        limpiar_consola()
        if opcion == "1":
            try:
                ruta = nueva_tanda(directorio, leer, escribir)
            except ValueError as error:
                escribir(str(error))
            else:
                escribir(f"Simulación guardada en {ruta}")
        elif opcion == "2":
            mostrar_simulaciones(directorio, leer, escribir)
            escribir("\nPresione Enter para continuar...")
            leer("")
        elif opcion == "3":
            return
        else:
            escribir("Opción no válida")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu until the user chooses to leave."""
    parser = argparse.ArgumentParser(description="Simulador de asignación de memoria.")
    parser.add_argument(
        "--directorio",
        default="files",
        help="carpeta donde se guardan las simulaciones (por defecto: files)",
    )
    argumentos = parser.parse_args(argv)
    carpeta = crear_carpetas(argumentos.directorio)
    try:
        _menu(carpeta, input, print)
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())