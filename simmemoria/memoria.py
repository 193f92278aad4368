"""Memory made of fixed partitions of arbitrary size."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .estrategias import EstrategiaAsignacion
from .proceso import Proceso


@dataclass
class ParticionFija:
    """A fixed partition; free unless a process name is recorded in it."""

    id: int
    direccion_comienzo: int
    tamanio: int
    proceso: Optional[str] = None

    def ocupar(self, nombre_proceso: str) -> None:
        """Mark the partition as held by the named process."""
        self.proceso = nombre_proceso

    def liberar(self) -> None:
        """Mark the partition as free."""
        self.proceso = None

    def espacio_libre(self) -> int:
        """Its whole size when free, otherwise zero."""
        return self.tamanio if self.proceso is None else 0

    @property
    def estado(self) -> str:
        return "Libre" if self.proceso is None else f"Ocupada ({self.proceso})"


@dataclass
class Memoria:
    """An ordered list of fixed partitions, remembering the last next-fit spot."""

    particiones: List[ParticionFija] = field(default_factory=list)
    ultima_asignada: Optional[int] = None

    def asignar_tanda(
        self, procesos: Iterable[Proceso], estrategia: EstrategiaAsignacion
    ) -> List[Optional[int]]:
        """Place each process; return the partition id used for each, or None."""
        metodos: Dict[EstrategiaAsignacion, Callable[[Proceso], Optional[int]]] = {
            EstrategiaAsignacion.FIRST_FIT: self._first_fit,
            EstrategiaAsignacion.BEST_FIT: self._best_fit,
            EstrategiaAsignacion.NEXT_FIT: self._next_fit,
            EstrategiaAsignacion.WORST_FIT: self._worst_fit,
        }
        asignar = metodos[estrategia]
        return [asignar(proceso) for proceso in procesos]

    def _ocupar(self, particion: ParticionFija, proceso: Proceso) -> int:
        particion.ocupar(proceso.nombre)
        return particion.id

    def _first_fit(self, proceso: Proceso) -> Optional[int]:
        for particion in self.particiones:
            if particion.espacio_libre() >= proceso.memoria_requerida:
                return self._ocupar(particion, proceso)
        return None

    def _best_fit(self, proceso: Proceso) -> Optional[int]:
        mejor: Optional[ParticionFija] = None
        for particion in self.particiones:
            libre = particion.espacio_libre()
            if libre >= proceso.memoria_requerida and (
                mejor is None or libre < mejor.espacio_libre()
            ):
                mejor = particion
        return None if mejor is None else self._ocupar(mejor, proceso)

    def _next_fit(self, proceso: Proceso) -> Optional[int]:
        inicio = self.ultima_asignada if self.ultima_asignada is not None else 0
        for indice, particion in enumerate(self.particiones[inicio:], start=inicio):
            if particion.espacio_libre() >= proceso.memoria_requerida:
                self.ultima_asignada = indice
                return self._ocupar(particion, proceso)
        return None

    def _worst_fit(self, proceso: Proceso) -> Optional[int]:
        peor: Optional[ParticionFija] = None
        mayor = 0
        for particion in self.particiones:
            libre = particion.espacio_libre()
            if libre >= proceso.memoria_requerida and libre > mayor:
                peor = particion
                mayor = libre
        return None if peor is None else self._ocupar(peor, proceso)

    def liberar_particion(self, id_particion: int) -> bool:
        """Free the first partition with that id; False if there is none."""
        for particion in self.particiones:
            if particion.id == id_particion:
                particion.liberar()
                return True
        return False

    def mostrar_estado(self) -> str:
        """The partition table as text, one row per partition."""
        filas = [
            f"{'ID':<10} {'Dirección':<15} {'Tamaño':<10} {'Estado':<10}",
            "---------------------------------------------------",
        ]
        filas.extend(
            f"{p.id:<10} {p.direccion_comienzo:<15} {p.tamanio:<10} {p.estado:<10}"
            for p in self.particiones
        )
        return "\n".join(filas)