"""Partida interactiva en consola de una sala de escape."""

from __future__ import annotations

import sys
from typing import NamedTuple, Optional, Sequence, TextIO

from .modelos import TipoAccion
from .sala import ErrorSala, Sala

LIMPIAR_PANTALLA = "\033[1;1H\033[2J"
BLANCO = "\x1b[37;1m"
VERDE = "\x1b[32;1m"
ROJO = "\x1b[31;1m"
AMARILLO = "\x1b[33;1m"
NORMAL = "\x1b[0m"

SALIR = "salir"
AYUDA = "ayuda"
AGARRAR = "agarrar"
DESCRIBIR = "describir"

CANTIDAD_OBJETIVOS = 3
MAX_PALABRA = 20

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Palabras(NamedTuple):
    """Palabras de una orden; las que faltan o son demasiado largas quedan en None."""

    verbo: Optional[str]
    objeto: Optional[str]
    objeto_parametro: Optional[str]
    excedido: bool


def mostrar_mensaje(mensaje: Optional[str], accion: TipoAccion, salida: TextIO) -> None:
    """Muestra el mensaje de una acción con el formato que corresponde a su tipo."""
    if accion is TipoAccion.ESCAPAR:
        salida.write(f"{AMARILLO}{mensaje}\n")
        salida.write(f"Besitos besitos, chau chau.\n{NORMAL}")
    elif accion is TipoAccion.ACCION_INVALIDA:
        salida.write(f"{ROJO}No{AMARILLO} puedo hacer eso\n{NORMAL}")
    else:
        salida.write(f"{AMARILLO}{mensaje}\n{NORMAL}")


def separar_palabras(linea: str) -> Palabras:
    """Pasa la línea a minúsculas y la separa en verbo y hasta dos objetos."""
    palabras = [palabra for palabra in linea.rstrip("\r\n").lower().split(" ") if palabra]
    objetivos: list[Optional[str]] = [
        palabra if len(palabra) + 1 <= MAX_PALABRA else None
        for palabra in palabras[:CANTIDAD_OBJETIVOS]
    ]
    objetivos.extend([None] * (CANTIDAD_OBJETIVOS - len(objetivos)))
    return Palabras(*objetivos, excedido=len(palabras) > CANTIDAD_OBJETIVOS)


def ejecutar_palabras(
    sala: Sala,
    verbo: Optional[str],
    objeto: Optional[str],
    objeto_parametro: Optional[str],
    salida: TextIO,
    entrada: TextIO,
) -> None:
    """Ejecuta un comando propio del juego o una interacción de la sala."""
    if verbo == AYUDA:
        mostrar_ayuda(salida, entrada)
    elif verbo == DESCRIBIR:
        descripcion = sala.describir_objeto(objeto) if objeto is not None else None
        if descripcion is None:
            mostrar_mensaje(None, TipoAccion.ACCION_INVALIDA, salida)
        else:
            salida.write(f"{AMARILLO}{descripcion}\n{NORMAL}")
    elif verbo == AGARRAR:
        if objeto is not None and sala.agarrar_objeto(objeto):
            salida.write(f"{AMARILLO}Agarraste el/la {objeto}\n{NORMAL}")
        else:
            salida.write(f"{AMARILLO}No puedo agarrar eso\n{NORMAL}")
    else:
        ejecutadas = sala.ejecutar_interaccion(
            verbo,
            objeto,
            objeto_parametro,
            lambda mensaje, accion: mostrar_mensaje(mensaje, accion, salida),
        )
        if ejecutadas == 0:
            mostrar_mensaje(None, TipoAccion.ACCION_INVALIDA, salida)


def procesar_entrada(sala: Sala, linea: str, salida: TextIO, entrada: TextIO) -> bool:
    """Procesa una orden del jugador; devuelve True si quiere salir del juego."""
    palabras = separar_palabras(linea)

    if palabras.verbo is None and palabras.objeto is None and palabras.objeto_parametro is None:
        salida.write(f"{ROJO}Ingresa algo válido por favor ;-;\n{NORMAL}")
    elif palabras.verbo == SALIR and palabras.objeto is None:
        return True
    elif not palabras.excedido:
        ejecutar_palabras(
            sala,
            palabras.verbo,
            palabras.objeto,
            palabras.objeto_parametro,
            salida,
            entrada,
        )
    return False


def mostrar_objetos(sala: Sala, salida: TextIO) -> None:
    """Muestra los objetos conocidos y los del inventario."""
    salida.write("\nConoces las siguientes cosas:\n")
    for nombre in sala.nombre_objetos_conocidos():
        salida.write(f"{VERDE}{nombre}\n{NORMAL}")

    poseidos = sala.nombre_objetos_poseidos()
    salida.write("\nEn tu inventario tenés las siguientes cosas:\n")
    if not poseidos:
        salida.write(f"{ROJO}No tenés nada por ahora.\n{NORMAL}")
    for nombre in poseidos:
        salida.write(f"{VERDE}{nombre}\n{NORMAL}")


def mostrar_ayuda(salida: TextIO, entrada: TextIO) -> None:
    """Muestra los comandos disponibles y espera a que se presione enter."""
    separador = "=" * 66
    salida.write(LIMPIAR_PANTALLA)
    salida.write(f"{ROJO}{separador}\n")
    salida.write(f"{AMARILLO}PAGINA DE AYUDA\n")
    salida.write("Algunos comandos disponibles:\n")
    salida.write("-ayuda: Muestra esta página\n")
    salida.write("-describir objeto: Describe el objeto indicado\n")
    salida.write("-agarrar objeto: Agarra un objeto de la sala (si se puede agarrar)\n")
    salida.write(f"-salir: Sale del juego\n{NORMAL}")
    salida.write(f"{ROJO}{separador}\n")
    salida.write(f"{NORMAL}Presiona enter para continuar...\n")
    salida.flush()
    entrada.readline()
    salida.write(LIMPIAR_PANTALLA)


def mostrar_intro(salida: TextIO, entrada: TextIO) -> None:
    """Presenta el juego y espera a que se presione enter."""
    salida.write(LIMPIAR_PANTALLA)
    salida.write(f"{AMARILLO}Bienvenidx, amante de los pokémon.\n{NORMAL}")
    salida.write(
        "Lamentablemente no estás acá para ser entrenador, así que ¿Qué haces acá? "
        "te estarás preguntando. "
    )
    salida.write("Hoy te preparamos un reto. Tenés que escaparte de esta habitación.")
    salida.write(
        "\nPodés interactuar con tu entorno ingresando un verbo y un objeto "
        "(o dos si hiciera falta) en la consola."
    )
    salida.write("\nPor ejemplo: 'examinar habitacion'.")
    salida.write(
        "\nO también: 'abrir puerta llave'. "
        "(ESTA INTERACCIÓN DEBERÍA ESTAR EN ESTE ORDEN EN EL EJEMPLO >:|)"
    )
    salida.write(
        "\nTambién contas con los siguientes comandos:\n"
        "-salir: Sale del juego\n"
        "-agarrar objeto: Agarra un objeto de la sala (siempre que pueda ser agarrado)\n"
        "-describir objeto: describe un objeto conocido o en el inventario\n"
    )
    salida.write(
        "Ah! Que tonto de mi parte, casi olvidaba un gran detalle. Si en algún momento "
        "no te acordás de los comandos disponibles siempre podés consultarlos usando 'ayuda'.\n"
    )
    salida.write(
        "El juego está diseñado para hacerte pensar, así que ponete creativx con los verbos!\n"
    )
    salida.write("\nAdelante, tu nueva aventura te espera, y que tengas un buen escape!\n")
    salida.write(
        f"{ROJO}\nOOC: No te preocupes de las mayúsculas y minúsculas, de eso me encargo "
        f"yo detrás de escena ;)\n{NORMAL}"
    )
    salida.write("\nPresiona enter para empezar...\n")
    salida.flush()
    entrada.readline()
    salida.write(LIMPIAR_PANTALLA)


def jugar(sala: Sala, entrada: Optional[TextIO] = None, salida: Optional[TextIO] = None) -> bool:
    """Juega una partida completa; devuelve True si el jugador escapó."""
    entrada = sys.stdin if entrada is None else entrada
    salida = sys.stdout if salida is None else salida

    mostrar_intro(salida, entrada)

    salir = False
    while not sala.escape_exitoso() and not salir:
        mostrar_objetos(sala, salida)
        salida.write("\n¿Que querés hacer?\n>")
        salida.flush()

        linea = entrada.readline()
        if not linea:
            salir = True
            break
        salir = procesar_entrada(sala, linea, salida, entrada)

    if salir:
        salida.write(f"{ROJO}NOOOOOOO VOLVEEEEE ;-; ;-;\n{NORMAL}")

    return sala.escape_exitoso()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Inicia el juego con un archivo de objetos y otro de interacciones."""
    argumentos = list(sys.argv[1:] if argv is None else argv)
    if len(argumentos) != 2:
        return EXIT_FAILURE

    try:
        sala = Sala.desde_archivos(argumentos[0], argumentos[1])
    except ErrorSala:
        sys.stdout.write(f"{ROJO}Error al crear la sala de escape\n{NORMAL}")
        return EXIT_FAILURE

    jugar(sala, sys.stdin, sys.stdout)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())