"""Discrete-time simulation of a batch of processes over 1 KB partitions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .config import Config
from .estrategias import Asignador
from .particion import Particion
from .proceso import Proceso


@dataclass
class ResultadoSimulacion:
    """Event log, result lines and the raw figures behind them."""

    eventos: List[str] = field(default_factory=list)
    resultados: List[str] = field(default_factory=list)
    tiempo_total: int = 0
    tiempos_retorno: List[int] = field(default_factory=list)


def _formatear(valor: float) -> str:
    return "NaN" if math.isnan(valor) else f"{valor:.2f}"


def _cociente(numerador: float, denominador: float) -> float:
    return numerador / denominador if denominador else math.nan


def _memoria_ocupada(memoria: Sequence[Particion]) -> int:
    return sum(1 for particion in memoria if not particion.esta_libre())


def _fin_de_la_tanda(pendientes: bool, memoria: Sequence[Particion]) -> bool:
    return not pendientes and all(particion.esta_libre() for particion in memoria)


def _liberar_memoria(memoria: Sequence[Particion]) -> Tuple[bool, List[str]]:
    """Free every partition of processes whose lifetime reached zero."""
    terminados: List[str] = []
    for particion in memoria:
        nombre = particion.id_proceso
        if particion.tiempo_de_vida == 0 and nombre is not None and nombre not in terminados:
            terminados.append(nombre)

    liberada = False
    for particion in memoria:
        if particion.id_proceso is not None and particion.id_proceso in terminados:
            particion.liberar()
            liberada = True
    return liberada, terminados


def _decrementar_tiempo_vida(memoria: Sequence[Particion]) -> None:
    for particion in memoria:
        if particion.tiempo_de_vida is not None and particion.tiempo_de_vida > 0:
            particion.tiempo_de_vida -= 1


def ejecutar_simulacion(procesos: Sequence[Proceso], configuracion: Config) -> ResultadoSimulacion:
    """Run the batch, in the given order, until every process has finished.

    Raises ValueError when some process could never fit in memory, since the
    simulation would otherwise wait for it forever.
    """
    tamanio = configuracion.tamanio_memoria
    for proceso in procesos:
        if max(proceso.memoria_requerida, 1) > tamanio:
            raise ValueError(
                f"El proceso {proceso.nombre} requiere {proceso.memoria_requerida} KB "
                f"y la memoria solo tiene {tamanio} KB."
            )

    memoria = [Particion() for _ in range(tamanio)]
    asignador = Asignador(configuracion.estrategia)
    eventos: List[str] = []
    esperas = [0] * len(procesos)
    tiempo_global = 0
    siguiente = 0
    particiones_libres_totales = 0

    while not _fin_de_la_tanda(siguiente < len(procesos), memoria):
        hubo_cambio = False

        liberada, terminados = _liberar_memoria(memoria)
        if liberada:
            eventos.append(
                f"En el tiempo global {tiempo_global}, se liberó memoria de los procesos "
                f"finalizados: {', '.join(terminados)}. (Memoria Ocupada: "
                f"{_memoria_ocupada(memoria)} KB de {tamanio} total)"
            )
            hubo_cambio = True

        while siguiente < len(procesos) and procesos[siguiente].arribo <= tiempo_global:
            proceso = procesos[siguiente]
            hubo_cambio = True
            if asignador.asignar(memoria, proceso) is None:
                eventos.append(
                    f"En el tiempo global {tiempo_global}, la memoria estaba llena o era "
                    f"insuficiente para asignar el proceso {proceso.nombre}. "
                    "El proceso quedó esperando."
                )
                break
            eventos.append(
                f"En el tiempo global {tiempo_global}, el proceso {proceso.nombre} fue "
                f"asignado correctamente. (Memoria Ocupada: {_memoria_ocupada(memoria)} KB "
                f"de {tamanio} total)"
            )
            esperas[siguiente] = tiempo_global - proceso.arribo
            siguiente += 1

        if not hubo_cambio:
            eventos.append(
                f"En el tiempo global {tiempo_global}, no se asignó ni liberó nada. "
                f"(Memoria Ocupada: {_memoria_ocupada(memoria)} KB de {tamanio} total)"
            )

        _decrementar_tiempo_vida(memoria)
        particiones_libres_totales += sum(1 for p in memoria if p.esta_libre())
        tiempo_global += 1

    tiempos_retorno = [espera + proceso.duracion for espera, proceso in zip(esperas, procesos)]
    resultados = [
        f"Tiempo de retorno del proceso {proceso.nombre}: {retorno} unidades de tiempo."
        for proceso, retorno in zip(procesos, tiempos_retorno)
    ]
    medio = _cociente(sum(tiempos_retorno), len(procesos))
    resultados.append(f"Tiempo medio de retorno: {_formatear(medio)} unidades de tiempo.")
    fragmentacion = _cociente(particiones_libres_totales, tiempo_global)
    resultados.append(f"Índice de fragmentación externa: {_formatear(fragmentacion)}.")
    resultados.append(f"Tiempo total de la simulación: {tiempo_global} unidades de tiempo.")

    return ResultadoSimulacion(
        eventos=eventos,
        resultados=resultados,
        tiempo_total=tiempo_global,
        tiempos_retorno=tiempos_retorno,
    )