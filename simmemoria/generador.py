"""Random generation of a batch of processes."""

from __future__ import annotations

import random
import re
from typing import Callable, List, Optional

from .proceso import Proceso

_ENTERO = re.compile(r"\+?[0-9]+")

Leer = Callable[[str], str]
Escribir = Callable[[str], None]


def generar_procesos_aleatorios(cantidad: int, rng: Optional[random.Random] = None) -> List[Proceso]:
    """Create processes P1..Pn with random arrival, duration and memory need.

    Arrival is in [0, 20), duration in [5, 10) and memory in [1, 500) KB.
    """
    rng = rng or random.Random()
    return [
        Proceso(
            nombre=f"P{numero}",
            arribo=rng.randrange(0, 20),
            duracion=rng.randrange(5, 10),
            memoria_requerida=rng.randrange(1, 500),
        )
        for numero in range(1, cantidad + 1)
    ]


def _pedir_cantidad(leer: Leer, escribir: Escribir) -> int:
    while True:
        escribir("\n=========================================")
        escribir("Generación de Procesos")
        escribir("=========================================")
        escribir("Vamos a generar un conjunto de procesos que serán utilizados")
        escribir("en la simulación de asignación de memoria.")
        escribir("Cada proceso tendrá un instante de arribo, una duración y")
        escribir("una cantidad de memoria requerida.")
        escribir("\nPor favor, elija cuántos procesos desea generar.")
        escribir("Recuerde que este número debe ser mayor que 0.")
        texto = leer("Ingrese el número de procesos a generar: ").strip()
        if _ENTERO.fullmatch(texto) and int(texto) > 0:
            cantidad = int(texto)
            escribir(f"\nSe generarán {cantidad} procesos.")
            return cantidad
        escribir("Por favor ingrese un número válido mayor que 0.")


def generar_procesos(
    leer: Leer = input,
    escribir: Escribir = print,
    rng: Optional[random.Random] = None,
) -> List[Proceso]:
    """Ask how many processes to create, generate them and sort by arrival."""
    cantidad = _pedir_cantidad(leer, escribir)
    escribir("\nGenerando procesos aleatorios...")
    procesos = generar_procesos_aleatorios(cantidad, rng)
    for numero, proceso in enumerate(procesos, start=1):
        escribir(
            f"Proceso {numero} generado: | Nombre: {proceso.nombre} | Instante de arribo: "
            f"{proceso.arribo} | Duración: {proceso.duracion} | "
            f"Memoria: {proceso.memoria_requerida}KB |"
        )
    procesos.sort(key=lambda proceso: proceso.arribo)
    escribir("\nProcesos generados con éxito y ordenados por tiempo de arribo.")
    escribir("A continuación, procederemos con la configuración de la simulación.\n")
    return procesos