import pytest

from simmemoria.config import Config
from simmemoria.estrategias import EstrategiaAsignacion
from simmemoria.proceso import Proceso
from simmemoria.simulador import ejecutar_simulacion


def _config(tamanio, estrategia=EstrategiaAsignacion.FIRST_FIT):
    return Config(
        estrategia=estrategia,
        tamanio_memoria=tamanio,
        tiempo_seleccion=1,
        tiempo_carga=1,
        tiempo_liberacion=1,
    )


def test_worked_example_single_process():
    resultado = ejecutar_simulacion([Proceso("P1", 0, 2, 1)], _config(2))
    assert resultado.eventos == [
        "En el tiempo global 0, el proceso P1 fue asignado correctamente. "
        "(Memoria Ocupada: 1 KB de 2 total)",
        "En el tiempo global 1, no se asignó ni liberó nada. (Memoria Ocupada: 1 KB de 2 total)",
        "En el tiempo global 2, se liberó memoria de los procesos finalizados: P1. "
        "(Memoria Ocupada: 0 KB de 2 total)",
    ]
    assert resultado.resultados == [
        "Tiempo de retorno del proceso P1: 2 unidades de tiempo.",
        "Tiempo medio de retorno: 2.00 unidades de tiempo.",
        "Índice de fragmentación externa: 1.33.",
        "Tiempo total de la simulación: 3 unidades de tiempo.",
    ]
    assert resultado.tiempo_total == 3


def test_empty_batch_gives_nan_figures():
    resultado = ejecutar_simulacion([], _config(4))
    assert resultado.eventos == []
    assert resultado.resultados == [
        "Tiempo medio de retorno: NaN unidades de tiempo.",
        "Índice de fragmentación externa: NaN.",
        "Tiempo total de la simulación: 0 unidades de tiempo.",
    ]


def test_process_larger_than_memory_is_rejected():
    with pytest.raises(ValueError):
        ejecutar_simulacion([Proceso("P1", 0, 3, 5)], _config(4))


def test_process_waits_when_memory_is_full():
    procesos = [Proceso("P1", 0, 3, 2), Proceso("P2", 0, 1, 2)]
    resultado = ejecutar_simulacion(procesos, _config(2))
    assert (
        "En el tiempo global 0, la memoria estaba llena o era insuficiente para asignar "
        "el proceso P2. El proceso quedó esperando."
    ) in resultado.eventos
    assert resultado.tiempos_retorno[0] == 3
    assert resultado.tiempos_retorno[1] > 1


@pytest.mark.parametrize("estrategia", list(EstrategiaAsignacion))
def test_every_process_is_assigned_once(estrategia):
    procesos = [
        Proceso("P1", 0, 4, 3),
        Proceso("P2", 1, 2, 5),
        Proceso("P3", 2, 3, 2),
        Proceso("P4", 6, 1, 8),
    ]
    resultado = ejecutar_simulacion(procesos, _config(8, estrategia))
    for proceso in procesos:
        asignados = [
            e for e in resultado.eventos
            if f"el proceso {proceso.nombre} fue asignado correctamente" in e
        ]
        assert len(asignados) == 1
    for proceso, retorno in zip(procesos, resultado.tiempos_retorno):
        assert retorno >= proceso.duracion
    assert resultado.tiempo_total > max(p.arribo for p in procesos)
    assert len(resultado.resultados) == len(procesos) + 3


def test_mean_line_matches_return_times():
    procesos = [Proceso("P1", 0, 2, 2), Proceso("P2", 0, 3, 2), Proceso("P3", 1, 1, 1)]
    resultado = ejecutar_simulacion(procesos, _config(3))
    media = sum(resultado.tiempos_retorno) / len(procesos)
    assert resultado.resultados[len(procesos)] == (
        f"Tiempo medio de retorno: {media:.2f} unidades de tiempo."
    )
    assert resultado.resultados[-1] == (
        f"Tiempo total de la simulación: {resultado.tiempo_total} unidades de tiempo."
    )