"""Processes that make up a batch to be loaded into memory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Proceso:
    """A process with its arrival instant, lifetime and memory need in KB."""

    nombre: str
    arribo: int
    duracion: int
    memoria_requerida: int