"""Simulation settings and the interactive questionnaire that fills them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from .estrategias import EstrategiaAsignacion

_MAXIMO_U32 = 2**32 - 1
_ENTERO = re.compile(r"\+?[0-9]+")

_OPCIONES_ESTRATEGIA = {
    "1": EstrategiaAsignacion.FIRST_FIT,
    "2": EstrategiaAsignacion.BEST_FIT,
    "3": EstrategiaAsignacion.NEXT_FIT,
    "4": EstrategiaAsignacion.WORST_FIT,
}

Leer = Callable[[str], str]
Escribir = Callable[[str], None]


class ConfiguracionInvalida(ValueError):
    """Raised when a configuration value makes no sense."""


@dataclass
class Config:
    """Memory size in KB, strategy and the three timing parameters in ms."""

    estrategia: EstrategiaAsignacion
    tamanio_memoria: int
    tiempo_seleccion: int
    tiempo_carga: int
    tiempo_liberacion: int

    def validar(self) -> None:
        """Raise ConfiguracionInvalida if any size or time is zero."""
        if self.tamanio_memoria == 0:
            raise ConfiguracionInvalida("El tamaño de la memoria no puede ser 0.")
        if self.tiempo_seleccion == 0:
            raise ConfiguracionInvalida("El tiempo de selección de partición no puede ser 0.")
        if self.tiempo_carga == 0:
            raise ConfiguracionInvalida("El tiempo de carga no puede ser 0.")
        if self.tiempo_liberacion == 0:
            raise ConfiguracionInvalida("El tiempo de liberación no puede ser 0.")

    def resumen(self) -> str:
        """A multi-line human-readable summary."""
        return "\n".join(
            [
                "--- Resumen de la Configuración ---",
                f"Tamaño de la memoria: {self.tamanio_memoria} unidades",
                f"Estrategia seleccionada: {self.estrategia}",
                f"Tiempo de selección de partición: {self.tiempo_seleccion} unidades",
                f"Tiempo de carga: {self.tiempo_carga} unidades",
                f"Tiempo de liberación: {self.tiempo_liberacion} unidades",
                "-----------------------------------",
            ]
        )


def _entero_positivo(texto: str) -> int | None:
    texto = texto.strip()
    if not _ENTERO.fullmatch(texto):
        return None
    valor = int(texto)
    return valor if 0 < valor <= _MAXIMO_U32 else None


def _pedir_entero(leer: Leer, escribir: Escribir, pregunta: str, error: str) -> int:
    while True:
        valor = _entero_positivo(leer(pregunta))
        if valor is not None:
            return valor
        escribir(error)


def _pedir_tamanio(leer: Leer, escribir: Escribir) -> int:
    escribir("\n1. Tamaño de la memoria física disponible:")
    escribir("Este valor define cuánta memoria está disponible en KB para los procesos.")
    escribir("Recuerde que el sistema operativo ya utiliza parte de la memoria, así que ingrese")
    escribir("un valor que represente la memoria disponible para los usuarios.")
    escribir("<<advertencia: No debe crear una memoria menor al proceso mas grande que tiene>>")
    return _pedir_entero(
        leer,
        escribir,
        "Ingrese el tamaño de la memoria física disponible (en KB): ",
        "Por favor ingrese un tamaño de memoria válido (número mayor que 0).",
    )


def _pedir_estrategia(leer: Leer, escribir: Escribir) -> EstrategiaAsignacion:
    while True:
        escribir("\n2. Selección de la Estrategia de Asignación:")
        escribir("Escoja la estrategia que se utilizará para asignar los procesos a la memoria.")
        escribir("Estas son las opciones disponibles:")
        escribir("1) First-fit (Primer ajuste): Asigna el primer espacio libre que sea suficiente.")
        escribir("2) Best-fit (Mejor ajuste): Busca la partición más pequeña posible que sea suficiente.")
        escribir("3) Next-fit (Siguiente ajuste): Busca el siguiente espacio libre desde el último utilizado.")
        escribir("4) Worst-fit (Peor ajuste): Busca la partición más grande disponible.")
        opcion = leer("Seleccione una opción (1-4): ").strip()
        if opcion in _OPCIONES_ESTRATEGIA:
            return _OPCIONES_ESTRATEGIA[opcion]
        escribir("Opción no válida. Por favor ingrese 1, 2, 3 o 4.")


def _pedir_tiempo(leer: Leer, escribir: Escribir, tipo: str) -> int:
    return _pedir_entero(
        leer,
        escribir,
        f"Ingrese el tiempo de {tipo} (en milisegundos): ",
        "Por favor ingrese un valor válido para el tiempo (en milisegundos).",
    )


def pedir_configuracion(leer: Leer = input, escribir: Escribir = print) -> Config:
    """Ask the user for every setting, repeating each question until valid.

    ``leer`` receives a prompt and returns one line; ``escribir`` shows a line.
    """
    escribir("=============================")
    escribir("Configuración de la Simulación")
    escribir("=============================")
    escribir("A continuación, vamos a configurar los parámetros necesarios")
    escribir("para simular la asignación de memoria en un sistema multiprogramado.")
    escribir("Por favor, siga las indicaciones para cada uno de los elementos.")

    tamanio_memoria = _pedir_tamanio(leer, escribir)
    estrategia = _pedir_estrategia(leer, escribir)

    escribir("\n3. Tiempo de Selección de Partición:")
    escribir("Este valor representa el tiempo que toma seleccionar la partición de memoria")
    escribir("para un proceso (en milisegundos). Un valor más alto simulará un sistema más lento.")
    tiempo_seleccion = _pedir_tiempo(leer, escribir, "selección de partición")

    escribir("\n4. Tiempo de Carga Promedio:")
    escribir("Este es el tiempo que toma cargar un proceso desde la memoria secundaria a la principal.")
    escribir("Ingrese un valor en milisegundos. Un valor más alto simulará un proceso de carga más lento.")
    tiempo_carga = _pedir_tiempo(leer, escribir, "carga promedio")

    escribir("\n5. Tiempo de Liberación de Partición:")
    escribir("Este valor representa el tiempo necesario para liberar una partición de memoria")
    escribir("cuando un proceso termina. Ingrese un valor en milisegundos.")
    tiempo_liberacion = _pedir_tiempo(leer, escribir, "liberación de partición")

    return Config(
        estrategia=estrategia,
        tamanio_memoria=tamanio_memoria,
        tiempo_seleccion=tiempo_seleccion,
        tiempo_carga=tiempo_carga,
        tiempo_liberacion=tiempo_liberacion,
    )