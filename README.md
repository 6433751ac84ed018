# escape-pokemon

Un juego de escape en modo texto. Estás encerradx en una habitación y para
salir tenés que examinar, agarrar y usar los objetos que vas descubriendo.
La sala se describe con dos archivos de texto: uno con los objetos y otro con
las interacciones posibles entre ellos.

## Jugar

```
escape-pokemon objetos.txt interacciones.txt
```

Hacen falta exactamente los dos archivos; si no, el comando termina con
código 1. Si la sala no se puede crear, muestra "Error al crear la sala de
escape" y termina con código 1.

Después de una introducción (que espera a que se presione enter), cada turno
muestra los objetos que conocés y los que tenés en el inventario, y pide una
línea con un verbo y uno o dos objetos, por ejemplo `examinar habitacion` o
`abrir puerta llave`. La línea se pasa a minúsculas antes de procesarla. Las
líneas con más de tres palabras se ignoran, y las palabras de 20 caracteres o
más se descartan.

Comandos siempre disponibles:

- `ayuda`: muestra la página de ayuda y espera a que se presione enter
- `describir objeto`: describe un objeto conocido o en el inventario
- `agarrar objeto`: agarra un objeto conocido, si se puede agarrar
- `salir`: sale del juego

Cualquier otro verbo se busca entre las interacciones de la sala; si ninguna
se ejecuta, se muestra "No puedo hacer eso". La partida termina cuando una
interacción de escape tiene éxito, con `salir`, o cuando se acaba la entrada.

## Revisar una sala

```
escape-pokemon-resumen objetos.txt interacciones.txt
```

Lista los objetos de la sala numerados desde 0 y dice si estas interacciones
son válidas (`Válido` o `Inválido`): examinar la habitación, abrir la
pokébola, usar la llave en el cajón y quemar la mesa. Si la sala no se puede
crear no muestra nada.

## Formato de los archivos

Archivo de objetos, una línea por objeto; el primer objeto es el único
conocido al empezar:

```
nombre;descripcion;true
```

El tercer campo (`true` o `false`, en minúsculas) indica si el objeto se
puede agarrar.

Archivo de interacciones, una línea por interacción:

```
objeto;verbo;objeto_parametro;tipo:objeto_accion:mensaje
```

`_` en `objeto_parametro` u `objeto_accion` significa "ninguno". El tipo de
acción es una letra; cualquier otra deja la interacción sin efecto:

| letra | acción                              |
|-------|-------------------------------------|
| `d`   | descubrir un objeto                 |
| `r`   | reemplazar el objeto parámetro      |
| `e`   | eliminar un objeto                  |
| `m`   | mostrar un mensaje                  |
| `g`   | escapar de la sala                  |

Un objeto que se puede agarrar solo sirve para descubrir, reemplazar o
eliminar cuando está en el inventario.

## Uso desde Python

```python
from escape_pokemon.sala import Sala

sala = Sala.desde_archivos("objetos.txt", "interacciones.txt")

print(sala.nombre_objetos_conocidos())
ejecutadas = sala.ejecutar_interaccion("examinar", "habitacion", "", None)
if sala.agarrar_objeto("pokebola"):
    print(sala.describir_objeto("pokebola"))
print(sala.escape_exitoso())
```

`ejecutar_interaccion` recibe además una función opcional
`mostrar_mensaje(mensaje, tipo)` que se llama con el mensaje y el
`TipoAccion` de cada interacción ejecutada. `es_interaccion_valida` indica si
existe una interacción con ese verbo y esos objetos.

Si los archivos no existen o tienen líneas mal formadas, o la sala queda sin
objetos o sin interacciones, crear la sala lanza `ErrorSala`. Las líneas
sueltas se pueden leer con `parsear_objeto` y `parsear_interaccion` de
`escape_pokemon.modelos`, que lanzan `FormatoInvalido` ante un formato
incorrecto.

El paquete incluye también sus propias estructuras de datos: `Lista`
(`escape_pokemon.lista`) y `TablaHash` (`escape_pokemon.tabla_hash`), una
tabla de hash con encadenamiento y claves de texto.

## Lo que no hace

No guarda ni retoma partidas: el estado de la sala vive solo mientras dura
el juego.