"""Resumen de una sala: sus objetos y la validez de algunas interacciones."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .sala import ErrorSala, Sala

EXIT_FAILURE = 1

_INTERACCIONES = (
    ("Examinar la habitacion", "examinar", "habitacion", ""),
    ("Abrir pokebola", "abrir", "pokebola", "_"),
    ("Usar llave en el cajon", "usar", "llave", "cajon"),
    ("Quemar la mesa", "quemar", "mesa", ""),
)

_TEXTOS_VALIDEZ = {True: "Válido", False: "Inválido"}


def string_a_bool(texto: str) -> bool:
    """Interpreta 'true' o 'false' sin distinguir mayúsculas."""
    normalizado = texto.lower()
    if normalizado == "true":
        return True
    if normalizado == "false":
        return False
    raise ValueError(f"no es un booleano: {texto!r}")


def texto_validez(valido: object) -> str:
    """Texto que indica si algo es válido, según el valor de verdad dado."""
    return _TEXTOS_VALIDEZ[bool(valido)]


def resumir_sala(sala: Sala) -> str:
    """Lista los objetos de la sala y la validez de algunas interacciones."""
    lineas = ["Objetos..."]
    lineas.extend(f"{indice}: {nombre}" for indice, nombre in enumerate(sala.nombre_objetos()))
    lineas.append("")
    lineas.append("Interacciones...")
    for titulo, verbo, objeto1, objeto2 in _INTERACCIONES:
        valida = sala.es_interaccion_valida(verbo, objeto1, objeto2)
        lineas.append(f"{titulo}: {texto_validez(valida)}")
    return "\n".join(lineas) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Muestra el resumen de la sala descrita por los dos archivos dados."""
    argumentos = list(sys.argv[1:] if argv is None else argv)
    if len(argumentos) != 2:
        return EXIT_FAILURE

    try:
        sala = Sala.desde_archivos(argumentos[0], argumentos[1])
    except ErrorSala:
        return 0

    sys.stdout.write(resumir_sala(sala))
    return 0


if __name__ == "__main__":
    sys.exit(main())