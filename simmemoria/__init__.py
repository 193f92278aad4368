"""Simulador de asignación de memoria contigua con estrategias First, Best, Next y Worst-fit."""

__version__ = "0.1.0"