"""Lista ordenada con inserción y extracción por posición."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class Lista:
    """Secuencia de elementos en orden de inserción."""

    def __init__(self, elementos: Optional[Iterable[Any]] = None) -> None:
        self._elementos: list[Any] = list(elementos) if elementos is not None else []

    def insertar(self, elemento: Any) -> "Lista":
        """Agrega el elemento al final."""
        self._elementos.append(elemento)
        return self

    def insertar_en_posicion(self, elemento: Any, posicion: int) -> "Lista":
        """Inserta en la posición dada; si no existe, inserta al final."""
        if posicion < 0:
            raise ValueError("la posición no puede ser negativa")
        if posicion >= len(self._elementos):
            return self.insertar(elemento)
        self._elementos.insert(posicion, elemento)
        return self

    def quitar(self) -> Any:
        """Quita y devuelve el último elemento."""
        if not self._elementos:
            raise IndexError("la lista está vacía")
        return self._elementos.pop()

    def quitar_de_posicion(self, posicion: int) -> Any:
        """Quita y devuelve el elemento en la posición; si no existe, quita el último."""
        if posicion < 0:
            raise ValueError("la posición no puede ser negativa")
        if not self._elementos:
            raise IndexError("la lista está vacía")
        if posicion >= len(self._elementos) - 1:
            return self.quitar()
        return self._elementos.pop(posicion)

    def elemento_en_posicion(self, posicion: int) -> Any:
        """Devuelve el elemento en la posición dada."""
        if posicion < 0 or posicion >= len(self._elementos):
            raise IndexError(f"no existe la posición {posicion}")
        return self._elementos[posicion]

    def buscar_elemento(self, predicado: Callable[[Any], bool]) -> Any:
        """Devuelve el primer elemento que cumple el predicado, o None."""
        return next((e for e in self._elementos if predicado(e)), None)

    def primero(self) -> Any:
        """Devuelve el primer elemento."""
        if not self._elementos:
            raise IndexError("la lista está vacía")
        return self._elementos[0]

    def ultimo(self) -> Any:
        """Devuelve el último elemento."""
        if not self._elementos:
            raise IndexError("la lista está vacía")
        return self._elementos[-1]

    def vacia(self) -> bool:
        """Indica si la lista no tiene elementos."""
        return not self._elementos

    def con_cada_elemento(self, funcion: Callable[[Any], bool]) -> int:
        """Aplica la función a cada elemento hasta que devuelva falso.

        Devuelve la cantidad de elementos sobre los que se invocó.
        """
        iterados = 0
        for elemento in self._elementos:
            iterados += 1
            if not funcion(elemento):
                break
        return iterados

    def __len__(self) -> int:
        return len(self._elementos)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elementos)

    def __repr__(self) -> str:
        return f"Lista({self._elementos!r})"