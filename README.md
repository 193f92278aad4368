# simmemoria

Simulador por consola de la asignación de memoria contigua en un sistema
multiprogramado y mono-procesador. Permite estudiar el comportamiento de
las estrategias **First-fit**, **Best-fit**, **Next-fit** y **Worst-fit**
sobre una tanda de procesos generada al azar.

## Instalación

```
pip install .
```

Para ejecutar las pruebas:

```
pip install .[test]
pytest
```

## Uso

```
simmemoria
```

Opción disponible:

- `--directorio CARPETA`: carpeta donde se guardan y se buscan las
  simulaciones (por defecto `files`; se crea si no existe).

El menú principal ofrece:

1. **Crear Nueva Simulación**: pide cuántos procesos generar y crea
   `P1..Pn` con instante de arribo en [0, 20), duración en [5, 10) y
   memoria requerida en [1, 500) KB, ordenados por arribo. Luego pide la
   configuración (tamaño de memoria en KB, estrategia y los tiempos de
   selección, carga y liberación en milisegundos), ejecuta la simulación
   y guarda el informe.
2. **Ver simulaciones**: lista por orden alfabético los archivos de la
   carpeta y muestra el que se elija por número (0 para volver).
3. **Salir**.

Cada informe se guarda como `N_procesos(YY)_estrategia(ZZ).txt`, donde `N`
es la cantidad de entradas que ya había en la carpeta más uno. Contiene la
tabla de procesos, la configuración, los eventos ocurridos y los
resultados: tiempo de retorno de cada proceso, tiempo medio de retorno,
índice de fragmentación externa y tiempo total de la simulación.

## Modelo de simulación

La memoria es un vector de particiones de 1 KB; un proceso ocupa tantas
particiones contiguas como KB requiere. En cada unidad de tiempo se
liberan los procesos cuyo tiempo de vida llegó a cero, se asignan en orden
los procesos que ya arribaron (el primero que no cabe detiene a los
siguientes hasta la próxima unidad) y se descuenta una unidad de vida a
los procesos en memoria. Next-fit continúa la búsqueda donde terminó el
último bloque asignado y puede dar la vuelta al final de la memoria.

Si algún proceso requiere más memoria que la configurada,
`ejecutar_simulacion` lanza `ValueError` en lugar de esperar para siempre.

## Uso como biblioteca

```python
from simmemoria.proceso import Proceso
from simmemoria.config import Config
from simmemoria.estrategias import EstrategiaAsignacion
from simmemoria.simulador import ejecutar_simulacion
from simmemoria.archivo import crear_archivo_simulacion

procesos = [Proceso("P1", 0, 5, 10), Proceso("P2", 1, 3, 20)]
config = Config(
    estrategia=EstrategiaAsignacion.FIRST_FIT,
    tamanio_memoria=64,
    tiempo_seleccion=1,
    tiempo_carga=1,
    tiempo_liberacion=1,
)
config.validar()
resultado = ejecutar_simulacion(procesos, config)
for evento in resultado.eventos:
    print(evento)
print(resultado.tiempo_total, resultado.tiempos_retorno)

ruta = crear_archivo_simulacion("files", procesos, config,
                                resultado.eventos, resultado.resultados)
```

Otros elementos útiles:

- `simmemoria.estrategias`: las funciones `first_fit`, `best_fit`,
  `next_fit` y `worst_fit` sobre una lista de `Particion`, y `Asignador`,
  que recuerda el punto de partida de Next-fit.
- `simmemoria.config`: `Config.validar()` lanza `ConfiguracionInvalida` si
  algún valor es cero; `Config.resumen()` devuelve un resumen en texto;
  `pedir_configuracion(leer, escribir)` hace el cuestionario interactivo.
- `simmemoria.generador`: `generar_procesos_aleatorios(cantidad, rng)` y
  `generar_procesos(leer, escribir, rng)`.
- `simmemoria.archivo`: `formatear_simulacion` devuelve el texto del
  informe y `nombre_archivo_simulacion` la ruta del próximo archivo.
- `simmemoria.visualizador`: `enlistar_simulaciones`, `leer_simulacion` y
  `mostrar_simulaciones`.
- `simmemoria.memoria`: un modelo aparte de particiones fijas de tamaño
  arbitrario (`Memoria`, `ParticionFija`) con las mismas cuatro
  estrategias; `Memoria.asignar_tanda` devuelve el id de la partición
  usada por cada proceso (o `None`) y `Memoria.mostrar_estado` la tabla de
  particiones como texto.

## Limitaciones

Los tiempos de selección, carga y liberación se piden y se guardan en el
informe, pero no intervienen en la simulación: el tiempo avanza de a una
unidad y solo cuentan el arribo y la duración de cada proceso. El modelo de
particiones fijas de `simmemoria.memoria` no se usa desde el menú.