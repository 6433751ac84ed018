"""Objetos, acciones e interacciones de una sala de escape y su lectura desde texto."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class TipoAccion(Enum):
    """Tipo de efecto que produce una interacción."""

    ACCION_INVALIDA = 0
    DESCUBRIR_OBJETO = 1
    REEMPLAZAR_OBJETO = 2
    ELIMINAR_OBJETO = 3
    MOSTRAR_MENSAJE = 4
    ESCAPAR = 5


_TIPOS_POR_LETRA = {
    "d": TipoAccion.DESCUBRIR_OBJETO,
    "r": TipoAccion.REEMPLAZAR_OBJETO,
    "e": TipoAccion.ELIMINAR_OBJETO,
    "m": TipoAccion.MOSTRAR_MENSAJE,
    "g": TipoAccion.ESCAPAR,
}

_VACIO = "_"
_BOOLEANOS = {"true": True, "false": False}

# nombre;descripcion;bandera  (la bandera se toma como una palabra de hasta 5 caracteres)
_FORMATO_OBJETO = re.compile(r"([^;]+);([^;]+);\s*(\S{1,5})", re.ASCII)
# objeto;verbo;objeto_parametro;tipo:objeto_accion:mensaje
_FORMATO_INTERACCION = re.compile(
    r"([^;]+);([^;]+);([^;]+);([\x00-\x7f]):([^:]+):([^\n]+)"
)


class FormatoInvalido(ValueError):
    """La línea no describe un objeto o una interacción válida."""


@dataclass(frozen=True)
class Accion:
    """Efecto de una interacción sobre la sala."""

    tipo: TipoAccion
    objeto: str = ""
    mensaje: str = ""


@dataclass(frozen=True)
class Objeto:
    """Objeto de la sala; es_asible indica si se puede agarrar."""

    nombre: str
    descripcion: str
    es_asible: bool


@dataclass(frozen=True)
class Interaccion:
    """Verbo aplicado a un objeto (y opcionalmente a otro) y la acción que dispara."""

    objeto: str
    verbo: str
    objeto_parametro: str
    accion: Accion


def _sin_guion(texto: str) -> str:
    return "" if texto == _VACIO else texto


def parsear_objeto(linea: str) -> Objeto:
    """Crea un objeto a partir de una línea 'nombre;descripcion;true|false'."""
    if not linea:
        raise FormatoInvalido("no se puede crear un objeto de una línea vacía")

    coincidencia = _FORMATO_OBJETO.match(linea)
    if coincidencia is None:
        raise FormatoInvalido(f"objeto con formato inválido: {linea!r}")

    nombre, descripcion, bandera = coincidencia.groups()
    try:
        es_asible = _BOOLEANOS[bandera]
    except KeyError:
        raise FormatoInvalido(f"bandera de objeto inválida: {bandera!r}") from None

    return Objeto(nombre, descripcion, es_asible)


def parsear_interaccion(linea: str) -> Interaccion:
    """Crea una interacción a partir de una línea 'obj;verbo;param;t:obj_accion:mensaje'."""
    if not linea:
        raise FormatoInvalido("no se puede crear una interacción de una línea vacía")

    coincidencia = _FORMATO_INTERACCION.match(linea)
    if coincidencia is None:
        raise FormatoInvalido(f"interacción con formato inválido: {linea!r}")

    objeto, verbo, parametro, letra, objeto_accion, mensaje = coincidencia.groups()
    accion = Accion(
        tipo=_TIPOS_POR_LETRA.get(letra, TipoAccion.ACCION_INVALIDA),
        objeto=_sin_guion(objeto_accion),
        mensaje=mensaje,
    )
    return Interaccion(objeto, verbo, _sin_guion(parametro), accion)