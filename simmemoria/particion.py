"""One-kilobyte memory partitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class EstadoParticion(enum.Enum):
    """Whether a partition is free or held by a process."""

    LIBRE = "Libre"
    OCUPADA = "Ocupada"


@dataclass
class Particion:
    """A single 1 KB partition, free unless a process occupies it."""

    id_proceso: Optional[str] = None
    tiempo_de_arribo: Optional[int] = None
    tiempo_de_vida: Optional[int] = None
    estado: EstadoParticion = EstadoParticion.LIBRE

    def ocupar(self, nombre_proceso: str, tiempo_arribo: int, tiempo_vida: int) -> None:
        """Give the partition to a process for the given lifetime."""
        self.id_proceso = nombre_proceso
        self.tiempo_de_arribo = tiempo_arribo
        self.tiempo_de_vida = tiempo_vida
        self.estado = EstadoParticion.OCUPADA

    def liberar(self) -> None:
        """Return the partition to the free state."""
        self.id_proceso = None
        self.tiempo_de_arribo = None
        self.tiempo_de_vida = None
        self.estado = EstadoParticion.LIBRE

    def esta_libre(self) -> bool:
        """True when no process holds the partition."""
        return self.estado is EstadoParticion.LIBRE