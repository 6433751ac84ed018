"""Sala de escape: objetos conocidos, poseídos e interacciones ejecutables."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Optional, Union

from .lista import Lista
from .modelos import (
    FormatoInvalido,
    Interaccion,
    Objeto,
    TipoAccion,
    parsear_interaccion,
    parsear_objeto,
)
from .tabla_hash import TablaHash

CAPACIDAD_INICIAL = 6
_VACIO = "_"

MostrarMensaje = Callable[[str, TipoAccion], None]
Ruta = Union[str, "os.PathLike[str]"]


class ErrorSala(Exception):
    """No se pudo crear la sala de escape."""


def leer_objetos(ruta: Ruta) -> list[Objeto]:
    """Lee un objeto por línea del archivo indicado."""
    with open(ruta, encoding="utf-8") as archivo:
        return [parsear_objeto(linea) for linea in archivo]


def leer_interacciones(ruta: Ruta) -> list[Interaccion]:
    """Lee una interacción por línea del archivo indicado."""
    with open(ruta, encoding="utf-8") as archivo:
        return [parsear_interaccion(linea) for linea in archivo]


def _quitar(tabla: TablaHash, clave: str) -> Optional[Objeto]:
    try:
        return tabla.quitar(clave)
    except KeyError:
        return None


def _normalizar_parametro(objeto2: Optional[str]) -> str:
    if objeto2 is None or objeto2 == _VACIO:
        return ""
    return objeto2


class Sala:
    """Estado de una partida: objetos existentes, conocidos, poseídos e interacciones."""

    def __init__(self, objetos: Iterable[Objeto], interacciones: Iterable[Interaccion]) -> None:
        self._objetos = TablaHash(CAPACIDAD_INICIAL)
        self._conocidos = TablaHash(CAPACIDAD_INICIAL)
        self._poseidos = TablaHash(CAPACIDAD_INICIAL)
        self._interacciones = Lista(interacciones)
        self._escape_exitoso = False

        for posicion, objeto in enumerate(objetos):
            self._objetos.insertar(objeto.nombre, objeto)
            if posicion == 0:
                self._conocidos.insertar(objeto.nombre, objeto)

        if len(self._objetos) == 0:
            raise ErrorSala("la sala no tiene objetos")
        if self._interacciones.vacia():
            raise ErrorSala("la sala no tiene interacciones")

    @classmethod
    def desde_archivos(cls, objetos: Ruta, interacciones: Ruta) -> "Sala":
        """Crea la sala a partir de un archivo de objetos y otro de interacciones."""
        try:
            lista_objetos = leer_objetos(objetos)
            lista_interacciones = leer_interacciones(interacciones)
        except (OSError, FormatoInvalido) as error:
            raise ErrorSala(f"no se pudo leer la sala: {error}") from error
        return cls(lista_objetos, lista_interacciones)

    def nombre_objetos(self) -> list[str]:
        """Nombres de todos los objetos existentes en la sala."""
        return list(self._objetos)

    def nombre_objetos_conocidos(self) -> list[str]:
        """Nombres de los objetos conocidos que no están en posesión del jugador."""
        return list(self._conocidos)

    def nombre_objetos_poseidos(self) -> list[str]:
        """Nombres de los objetos en posesión del jugador."""
        return list(self._poseidos)

    def agarrar_objeto(self, nombre_objeto: str) -> bool:
        """Pasa un objeto conocido y asible al inventario; indica si se pudo."""
        objeto = self._conocidos.obtener(nombre_objeto)
        if objeto is None or not objeto.es_asible:
            return False
        self._conocidos.quitar(nombre_objeto)
        self._poseidos.insertar(objeto.nombre, objeto)
        return True

    def describir_objeto(self, nombre_objeto: str) -> Optional[str]:
        """Descripción de un objeto conocido o poseído, o None si no lo es."""
        for tabla in (self._conocidos, self._poseidos):
            objeto = tabla.obtener(nombre_objeto)
            if objeto is not None:
                return objeto.descripcion
        return None

    def ejecutar_interaccion(
        self,
        verbo: str,
        objeto1: str,
        objeto2: Optional[str] = "",
        mostrar_mensaje: Optional[MostrarMensaje] = None,
    ) -> int:
        """Ejecuta en orden las interacciones que coinciden; devuelve cuántas se realizaron."""
        parametro = _normalizar_parametro(objeto2)
        ejecutadas = 0
        for interaccion in self._interacciones:
            if self._coincide(interaccion, verbo, objeto1, parametro) and self._ejecutar(
                interaccion, mostrar_mensaje
            ):
                ejecutadas += 1
        return ejecutadas

    def es_interaccion_valida(self, verbo: str, objeto1: str, objeto2: Optional[str] = "") -> bool:
        """Indica si existe una interacción con ese verbo y esos objetos."""
        parametro = _normalizar_parametro(objeto2)
        encontrada = self._interacciones.buscar_elemento(
            lambda interaccion: self._coincide(interaccion, verbo, objeto1, parametro)
        )
        return encontrada is not None

    def escape_exitoso(self) -> bool:
        """Indica si el jugador ya escapó de la sala."""
        return self._escape_exitoso

    @staticmethod
    def _coincide(interaccion: Interaccion, verbo: str, objeto: str, parametro: str) -> bool:
        return (
            interaccion.verbo == verbo
            and interaccion.objeto == objeto
            and interaccion.objeto_parametro == parametro
        )

    def _es_visible(self, nombre: str) -> bool:
        return nombre in self._conocidos or nombre in self._poseidos

    def _puede_usar(self, nombre: str) -> bool:
        """Un objeto asible solo puede usarse si está en posesión del jugador."""
        objeto = self._objetos.obtener(nombre)
        if objeto is None:
            return False
        return not (objeto.es_asible and nombre not in self._poseidos)

    def _ejecutar(self, interaccion: Interaccion, mostrar: Optional[MostrarMensaje]) -> bool:
        accion = interaccion.accion
        tipo = accion.tipo
        principal = interaccion.objeto

        if tipo is TipoAccion.MOSTRAR_MENSAJE:
            if mostrar is None or not self._es_visible(principal):
                return False
            mostrar(accion.mensaje, tipo)
            return True

        if tipo is TipoAccion.DESCUBRIR_OBJETO:
            if self._es_visible(accion.objeto) or not self._puede_usar(principal):
                return False
            descubierto = self._objetos.obtener(accion.objeto)
            if descubierto is None:
                return False
            self._conocidos.insertar(descubierto.nombre, descubierto)

        elif tipo is TipoAccion.REEMPLAZAR_OBJETO:
            if not self._puede_usar(principal):
                return False
            nuevo = self._objetos.obtener(accion.objeto)
            viejo = _quitar(self._objetos, interaccion.objeto_parametro)
            if viejo is None or nuevo is None:
                return False
            _quitar(self._conocidos, interaccion.objeto_parametro)
            _quitar(self._poseidos, interaccion.objeto_parametro)
            self._conocidos.insertar(nuevo.nombre, nuevo)

        elif tipo is TipoAccion.ELIMINAR_OBJETO:
            if not self._puede_usar(principal):
                return False
            if _quitar(self._objetos, accion.objeto) is None:
                return False
            _quitar(self._conocidos, accion.objeto)
            _quitar(self._poseidos, accion.objeto)

        elif tipo is TipoAccion.ESCAPAR:
            if not self._es_visible(principal):
                return False
            self._escape_exitoso = True

        else:
            return False

        if mostrar is not None:
            mostrar(accion.mensaje, tipo)
        return True