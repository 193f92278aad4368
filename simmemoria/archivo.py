"""Writing a finished simulation to a numbered text file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .config import Config
from .estrategias import EstrategiaAsignacion
from .proceso import Proceso

_DIVISORA = "-------------------------------------------"

Ruta = Union[str, Path]


def formatear_simulacion(
    procesos: Sequence[Proceso],
    configuracion: Config,
    eventos: Iterable[str],
    resultados: Iterable[str],
) -> str:
    """Render processes, settings, events and results as the report text."""
    lineas: List[str] = [
        "Procesos de la Tanda:",
        _DIVISORA,
        "| Nombre  | Arribo | Duración | Memoria |",
        _DIVISORA,
    ]
    lineas.extend(
        f"| {p.nombre:<7} | {p.arribo:<6} | {p.duracion:<8} | {p.memoria_requerida:<7} |"
        for p in procesos
    )
    lineas += [
        _DIVISORA,
        "",
        "Configuración del Simulador:",
        _DIVISORA,
        f"Tamaño de memoria: {configuracion.tamanio_memoria} KB",
        f"Estrategia de asignación: {configuracion.estrategia}",
        f"Tiempo de selección de partición: {configuracion.tiempo_seleccion} ms",
        f"Tiempo de carga promedio: {configuracion.tiempo_carga} ms",
        f"Tiempo de liberación de partición: {configuracion.tiempo_liberacion} ms",
        _DIVISORA,
        "",
        "Eventos de la Simulación:",
        _DIVISORA,
        *eventos,
        _DIVISORA,
        "",
        "Resultados de la Simulación:",
        _DIVISORA,
        *resultados,
        _DIVISORA,
    ]
    return "\n".join(lineas) + "\n"


def nombre_archivo_simulacion(
    directorio: Ruta, cantidad_procesos: int, estrategia: EstrategiaAsignacion
) -> Path:
    """Path for the next report: numbered after the entries already present.

    The directory is created when missing.
    """
    carpeta = Path(directorio)
    if carpeta.exists():
        numero = sum(1 for _ in carpeta.iterdir()) + 1
    else:
        carpeta.mkdir(parents=True)
        numero = 1
    return carpeta / f"{numero}_procesos({cantidad_procesos})_estrategia({estrategia}).txt"


def crear_archivo_simulacion(
    directorio: Ruta,
    procesos: Sequence[Proceso],
    configuracion: Config,
    eventos: Iterable[str],
    resultados: Iterable[str],
) -> Path:
    """Write the report into a new numbered file and return its path."""
    ruta = nombre_archivo_simulacion(directorio, len(procesos), configuracion.estrategia)
    ruta.write_text(
        formatear_simulacion(procesos, configuracion, eventos, resultados), encoding="utf-8"
    )
    return ruta