import pytest

from simmemoria.estrategias import EstrategiaAsignacion
from simmemoria.memoria import Memoria, ParticionFija
from simmemoria.proceso import Proceso


def _memoria(*tamanios):
    particiones = []
    direccion = 0
    for indice, tamanio in enumerate(tamanios):
        particiones.append(ParticionFija(indice, direccion, tamanio))
        direccion += tamanio
    return Memoria(particiones)


def _proc(nombre, memoria):
    return Proceso(nombre, 0, 5, memoria)


def test_particion_espacio_libre_and_release():
    particion = ParticionFija(1, 0, 64)
    assert particion.espacio_libre() == 64
    particion.ocupar("P1")
    assert particion.espacio_libre() == 0
    particion.liberar()
    assert particion.espacio_libre() == 64


@pytest.mark.parametrize(
    "estrategia, esperado",
    [
        (EstrategiaAsignacion.FIRST_FIT, 1),
        (EstrategiaAsignacion.BEST_FIT, 2),
        (EstrategiaAsignacion.WORST_FIT, 1),
        (EstrategiaAsignacion.NEXT_FIT, 1),
    ],
)
def test_single_process_placement(estrategia, esperado):
    memoria = _memoria(100, 300, 200)
    assert memoria.asignar_tanda([_proc("P1", 150)], estrategia) == [esperado]
    assert memoria.particiones[esperado].proceso == "P1"


def test_best_fit_prefers_smaller_and_worst_fit_larger():
    memoria = _memoria(500, 120, 300)
    assert memoria.asignar_tanda([_proc("A", 100)], EstrategiaAsignacion.BEST_FIT) == [1]
    memoria = _memoria(500, 120, 300)
    assert memoria.asignar_tanda([_proc("A", 100)], EstrategiaAsignacion.WORST_FIT) == [0]


def test_nothing_fits_leaves_memory_untouched():
    memoria = _memoria(10, 20)
    for estrategia in EstrategiaAsignacion:
        assert memoria.asignar_tanda([_proc("X", 50)], estrategia) == [None]
    assert all(p.proceso is None for p in memoria.particiones)


def test_returns_partition_ids_not_positions():
    memoria = Memoria([ParticionFija(10, 0, 50), ParticionFija(20, 50, 50)])
    ids = memoria.asignar_tanda([_proc("A", 40), _proc("B", 40)], EstrategiaAsignacion.FIRST_FIT)
    assert ids == [10, 20]


def test_next_fit_resumes_and_does_not_wrap():
    memoria = _memoria(100, 100, 100)
    primera = memoria.asignar_tanda([_proc("A", 50), _proc("B", 50)], EstrategiaAsignacion.NEXT_FIT)
    assert primera == [0, 1]
    assert memoria.ultima_asignada == 1
    memoria.liberar_particion(0)
    segunda = memoria.asignar_tanda([_proc("C", 50), _proc("D", 50)], EstrategiaAsignacion.NEXT_FIT)
    assert segunda == [2, None]
    assert memoria.particiones[0].proceso is None


def test_liberar_particion():
    memoria = _memoria(100, 200)
    memoria.asignar_tanda([_proc("A", 150)], EstrategiaAsignacion.FIRST_FIT)
    assert memoria.liberar_particion(1) is True
    assert memoria.particiones[1].espacio_libre() == 200
    assert memoria.liberar_particion(99) is False


def test_mostrar_estado_lists_every_partition():
    memoria = _memoria(100, 200)
    memoria.asignar_tanda([_proc("P1", 150)], EstrategiaAsignacion.FIRST_FIT)
    lineas = memoria.mostrar_estado().splitlines()
    assert len(lineas) == 2 + len(memoria.particiones)
    assert lineas[0].startswith("ID")
    assert "Dirección" in lineas[0]
    assert lineas[2].split()[-1] == "Libre"
    assert "Ocupada (P1)" in lineas[3]