"""Placement strategies over a vector of 1 KB partitions.

A process needing N KB takes N contiguous free partitions. Every strategy
returns the index of the first partition of the block it used, or None.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, MutableSequence, Optional, Tuple

from .particion import Particion
from .proceso import Proceso


class EstrategiaAsignacion(enum.Enum):
    """The four classic allocation strategies."""

    FIRST_FIT = "FirstFit"
    BEST_FIT = "BestFit"
    NEXT_FIT = "NextFit"
    WORST_FIT = "WorstFit"

    def __str__(self) -> str:
        return self.value


Particiones = MutableSequence[Particion]


def _ocupar_bloque(particiones: Particiones, inicio: int, cantidad: int, proceso: Proceso) -> None:
    n = len(particiones)
    for paso in range(cantidad):
        particiones[(inicio + paso) % n].ocupar(
            proceso.nombre, proceso.arribo, proceso.duracion
        )


def _tramos_libres(particiones: Particiones) -> Iterator[Tuple[int, int]]:
    """Yield (start, length) for every maximal run of free partitions."""
    inicio: Optional[int] = None
    for indice, particion in enumerate(particiones):
        if particion.esta_libre():
            if inicio is None:
                inicio = indice
        elif inicio is not None:
            yield inicio, indice - inicio
            inicio = None
    if inicio is not None:
        yield inicio, len(particiones) - inicio


def first_fit(particiones: Particiones, proceso: Proceso) -> Optional[int]:
    """Take the first run of free partitions large enough for the process."""
    necesaria = proceso.memoria_requerida
    inicio: Optional[int] = None
    contiguas = 0
    for indice, particion in enumerate(particiones):
        if not particion.esta_libre():
            inicio = None
            contiguas = 0
            continue
        if inicio is None:
            inicio = indice
        contiguas += 1
        if contiguas >= necesaria:
            _ocupar_bloque(particiones, inicio, indice - inicio + 1, proceso)
            return inicio
    return None


def best_fit(particiones: Particiones, proceso: Proceso) -> Optional[int]:
    """Take the smallest free run that fits; the earliest wins a tie."""
    necesaria = proceso.memoria_requerida
    candidatos = [t for t in _tramos_libres(particiones) if t[1] >= necesaria]
    if not candidatos:
        return None
    inicio, _ = min(candidatos, key=lambda tramo: tramo[1])
    _ocupar_bloque(particiones, inicio, necesaria, proceso)
    return inicio


def worst_fit(particiones: Particiones, proceso: Proceso) -> Optional[int]:
    """Take the largest free run that fits; the earliest wins a tie."""
    necesaria = proceso.memoria_requerida
    candidatos = [t for t in _tramos_libres(particiones) if t[1] >= necesaria]
    if not candidatos:
        return None
    inicio, _ = max(candidatos, key=lambda tramo: tramo[1])
    _ocupar_bloque(particiones, inicio, necesaria, proceso)
    return inicio


def next_fit(particiones: Particiones, proceso: Proceso, inicio: int) -> Optional[int]:
    """Search circularly from ``inicio``; a block may wrap past the end."""
    n = len(particiones)
    necesaria = proceso.memoria_requerida
    comienzo_tramo: Optional[int] = None
    contiguas = 0
    for paso in range(n):
        indice = (inicio + paso) % n
        if not particiones[indice].esta_libre():
            comienzo_tramo = None
            contiguas = 0
            continue
        if comienzo_tramo is None:
            comienzo_tramo = indice
        contiguas += 1
        if contiguas >= necesaria:
            _ocupar_bloque(particiones, comienzo_tramo, necesaria, proceso)
            return comienzo_tramo
    return None


_DIRECTAS: Dict[EstrategiaAsignacion, Callable[[Particiones, Proceso], Optional[int]]] = {
    EstrategiaAsignacion.FIRST_FIT: first_fit,
    EstrategiaAsignacion.BEST_FIT: best_fit,
    EstrategiaAsignacion.WORST_FIT: worst_fit,
}


@dataclass
class Asignador:
    """Applies a strategy, remembering where next-fit should resume."""

    estrategia: EstrategiaAsignacion
    ultima_asignada: int = 0

    def asignar(self, particiones: Particiones, proceso: Proceso) -> Optional[int]:
        """Place the process; return the start index of its block or None."""
        if self.estrategia is EstrategiaAsignacion.NEXT_FIT:
            inicio = next_fit(particiones, proceso, self.ultima_asignada)
            if inicio is not None:
                self.ultima_asignada = (inicio + proceso.memoria_requerida) % len(particiones)
            return inicio
        return _DIRECTAS[self.estrategia](particiones, proceso)