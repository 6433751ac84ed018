"""Tabla de hash con encadenamiento, claves de texto y crecimiento automático."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

CAPACIDAD_MINIMA = 3
FACTOR_CARGA_LIMITE = 0.75
INCREMENTO_CAPACIDAD = 2

_MASCARA = (1 << 64) - 1


def hashear_clave(clave: str) -> int:
    """Suma de cada byte de la clave (con signo) por su posición más uno."""
    total = 0
    for posicion, byte in enumerate(clave.encode("utf-8"), start=1):
        valor = byte if byte < 128 else byte - 256
        total = (total + valor * posicion) & _MASCARA
    return total


def _validar_clave(clave: Any) -> str:
    if not isinstance(clave, str):
        raise TypeError(f"la clave debe ser un texto, no {type(clave).__name__}")
    return clave


class TablaHash:
    """Diccionario de claves de texto implementado con listas encadenadas."""

    def __init__(self, capacidad: int = CAPACIDAD_MINIMA) -> None:
        self._capacidad = max(capacidad, CAPACIDAD_MINIMA)
        # Cada balde es una cadena de pares [clave, elemento]; el índice 0 es la cabeza.
        self._tabla: list[list[list[Any]]] = [[] for _ in range(self._capacidad)]
        self._ocupados = 0

    def _balde(self, clave: str) -> list[list[Any]]:
        return self._tabla[hashear_clave(clave) % self._capacidad]

    def _rehash(self) -> None:
        nueva_capacidad = self._capacidad * INCREMENTO_CAPACIDAD
        nueva_tabla: list[list[list[Any]]] = [[] for _ in range(nueva_capacidad)]
        for balde in self._tabla:
            for nodo in balde:
                nueva_tabla[hashear_clave(nodo[0]) % nueva_capacidad].insert(0, nodo)
        self._tabla = nueva_tabla
        self._capacidad = nueva_capacidad

    def insertar(self, clave: str, elemento: Any) -> Any:
        """Inserta o actualiza la clave; devuelve el elemento anterior o None."""
        _validar_clave(clave)

        # El factor de carga se calcula con división entera.
        if (self._ocupados + 1) // self._capacidad >= FACTOR_CARGA_LIMITE:
            self._rehash()

        balde = self._balde(clave)
        for nodo in balde:
            if nodo[0] == clave:
                anterior = nodo[1]
                nodo[1] = elemento
                return anterior

        balde.insert(0, [clave, elemento])
        self._ocupados += 1
        return None

    def quitar(self, clave: str) -> Any:
        """Quita la clave y devuelve su elemento; KeyError si no existe."""
        _validar_clave(clave)
        balde = self._balde(clave)
        for indice, nodo in enumerate(balde):
            if nodo[0] == clave:
                del balde[indice]
                self._ocupados -= 1
                return nodo[1]
        raise KeyError(clave)

    def obtener(self, clave: str) -> Optional[Any]:
        """Devuelve el elemento asociado a la clave o None si no existe."""
        _validar_clave(clave)
        return next((nodo[1] for nodo in self._balde(clave) if nodo[0] == clave), None)

    def capacidad(self) -> int:
        """Cantidad de baldes de la tabla."""
        return self._capacidad

    def con_cada_clave(self, funcion: Callable[[str, Any], bool]) -> int:
        """Invoca funcion(clave, elemento) hasta que devuelva falso.

        Devuelve la cantidad de veces que se invocó.
        """
        iteradas = 0
        for clave, elemento in self.items():
            iteradas += 1
            if not funcion(clave, elemento):
                break
        return iteradas

    def items(self) -> Iterator[tuple[str, Any]]:
        """Pares (clave, elemento) en el orden de la tabla."""
        for balde in self._tabla:
            for clave, elemento in list(balde):
                yield clave, elemento

    def __contains__(self, clave: object) -> bool:
        if not isinstance(clave, str):
            return False
        return any(nodo[0] == clave for nodo in self._balde(clave))

    def __len__(self) -> int:
        return self._ocupados

    def __iter__(self) -> Iterator[str]:
        return (clave for clave, _ in self.items())

    def __repr__(self) -> str:
        return f"TablaHash({dict(self.items())!r})"