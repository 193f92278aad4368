"""Listing and displaying previously saved simulation reports."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, List, Optional, Union

Ruta = Union[str, Path]
Leer = Callable[[str], str]
Escribir = Callable[[str], None]

_ENTERO = re.compile(r"\+?[0-9]+")


def enlistar_simulaciones(directorio: Ruta) -> List[str]:
    """Names of the entries in the reports directory, sorted; empty if missing."""
    carpeta = Path(directorio)
    if not carpeta.is_dir():
        return []
    return sorted(entrada.name for entrada in carpeta.iterdir())


def leer_simulacion(directorio: Ruta, nombre: str) -> List[str]:
    """The lines of one saved report.

    Raises OSError when the file cannot be opened.
    """
    ruta = Path(directorio) / nombre
    return ruta.read_text(encoding="utf-8", errors="replace").splitlines()


def _opcion(texto: str) -> int:
    texto = texto.strip()
    return int(texto) if _ENTERO.fullmatch(texto) else 0


def mostrar_simulaciones(
    directorio: Ruta = "files",
    leer: Leer = input,
    escribir: Escribir = print,
) -> Optional[str]:
    """Let the user pick a saved report and show it.

    Returns the name of the report shown, or None when nothing was shown.
    """
    carpeta = Path(directorio)
    if not carpeta.exists():
        escribir(f"La carpeta '{carpeta}' no existe.")
    simulaciones = enlistar_simulaciones(carpeta)
    if not simulaciones:
        escribir("No se encontraron simulaciones previas.")
        return None

    escribir("Simulaciones disponibles:")
    for numero, nombre in enumerate(simulaciones, start=1):
        escribir(f"{numero}: {nombre}")
    escribir("Seleccione el número de la simulación que desea ver (0 para volver):")

    opcion = _opcion(leer(""))
    if opcion == 0 or opcion > len(simulaciones):
        escribir("Volviendo al menú principal...")
        return None

    nombre = simulaciones[opcion - 1]
    try:
        lineas = leer_simulacion(carpeta, nombre)
    except OSError:
        escribir("No se pudo abrir el archivo de simulación.")
        return None

    escribir(f"\nContenido de la simulación '{nombre}':\n")
    for linea in lineas:
        escribir(linea)
    return nombre