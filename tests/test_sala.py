import pytest

from escape_pokemon.modelos import (
    Accion,
    FormatoInvalido,
    Interaccion,
    Objeto,
    TipoAccion,
)
from escape_pokemon.sala import ErrorSala, Sala, leer_interacciones, leer_objetos

OBJETOS = (
    "habitacion;Una habitacion de la que no podes escapar;false\n"
    "pokebola;Una poquebola roja y blanca;true\n"
    "puerta;Una puerta cerrada;false\n"
    "llave;Una llave dorada;true\n"
    "puerta-abierta;Una puerta abierta;false\n"
)

INTERACCIONES = (
    "habitacion;examinar;_;d:pokebola:Hay una pokebola\n"
    "habitacion;examinar;_;d:puerta:Hay una puerta\n"
    "pokebola;abrir;_;d:llave:Encontraste una llave\n"
    "pokebola;abrir;_;e:pokebola:La pokebola desaparece\n"
    "llave;abrir;puerta;r:puerta-abierta:Abriste la puerta\n"
    "puerta-abierta;salir;_;g:_:Saliste\n"
    "puerta;abrir;_;m:_:Esta cerrada\n"
    "habitacion;mirar;_;m:_:Nada interesante\n"
    "habitacion;bailar;_;x:_:Baile\n"
    "fantasma;ver;_;d:llave:Boo\n"
)


@pytest.fixture
def archivos(tmp_path):
    ruta_objetos = tmp_path / "objetos.txt"
    ruta_interacciones = tmp_path / "interacciones.txt"
    ruta_objetos.write_text(OBJETOS, encoding="utf-8")
    ruta_interacciones.write_text(INTERACCIONES, encoding="utf-8")
    return ruta_objetos, ruta_interacciones


@pytest.fixture
def sala(archivos):
    return Sala.desde_archivos(*archivos)


def registrar():
    mensajes = []
    return mensajes, lambda mensaje, tipo: mensajes.append((mensaje, tipo))


def test_leer_objetos(archivos):
    objetos = leer_objetos(archivos[0])
    assert len(objetos) == 5
    assert objetos[1] == Objeto("pokebola", "Una poquebola roja y blanca", True)


def test_leer_interacciones(archivos):
    interacciones = leer_interacciones(archivos[1])
    assert len(interacciones) == 10
    assert interacciones[4] == Interaccion(
        "llave",
        "abrir",
        "puerta",
        Accion(TipoAccion.REEMPLAZAR_OBJETO, "puerta-abierta", "Abriste la puerta"),
    )


def test_leer_objetos_con_linea_invalida(tmp_path):
    ruta = tmp_path / "malo.txt"
    ruta.write_text("a;b;c\n", encoding="utf-8")
    with pytest.raises(FormatoInvalido):
        leer_objetos(ruta)


def test_archivos_inexistentes(tmp_path):
    with pytest.raises(ErrorSala):
        Sala.desde_archivos(tmp_path / "no" / "existe", tmp_path / "tampoco")


def test_sala_sin_objetos(tmp_path, archivos):
    vacio = tmp_path / "vacio.txt"
    vacio.write_text("", encoding="utf-8")
    with pytest.raises(ErrorSala):
        Sala.desde_archivos(vacio, archivos[1])


def test_sala_sin_interacciones(tmp_path, archivos):
    vacio = tmp_path / "vacio.txt"
    vacio.write_text("", encoding="utf-8")
    with pytest.raises(ErrorSala):
        Sala.desde_archivos(archivos[0], vacio)


def test_sala_con_objeto_invalido(tmp_path, archivos):
    malo = tmp_path / "malo.txt"
    malo.write_text("nombre;desc;quizas\n", encoding="utf-8")
    with pytest.raises(ErrorSala):
        Sala.desde_archivos(malo, archivos[1])


def test_constructor_sin_datos():
    objeto = Objeto("a", "b", False)
    interaccion = Interaccion("a", "ver", "", Accion(TipoAccion.MOSTRAR_MENSAJE, "", "m"))
    with pytest.raises(ErrorSala):
        Sala([], [interaccion])
    with pytest.raises(ErrorSala):
        Sala([objeto], [])


def test_nombres_de_objetos(sala):
    assert sorted(sala.nombre_objetos()) == [
        "habitacion",
        "llave",
        "pokebola",
        "puerta",
        "puerta-abierta",
    ]


def test_sala_recien_creada(sala):
    assert sala.nombre_objetos_conocidos() == ["habitacion"]
    assert sala.nombre_objetos_poseidos() == []
    assert sala.escape_exitoso() is False


def test_interacciones_validas(sala):
    assert sala.es_interaccion_valida("examinar", "habitacion", "")
    assert sala.es_interaccion_valida("abrir", "pokebola")
    assert sala.es_interaccion_valida("abrir", "llave", "puerta")
    assert sala.es_interaccion_valida("bailar", "habitacion", "")
    assert not sala.es_interaccion_valida("romper", "todo", "")
    assert not sala.es_interaccion_valida("abrir", "mesa", "")
    assert not sala.es_interaccion_valida("examinar", "techo", "")
    assert not sala.es_interaccion_valida("abrir", "llave", "")


def test_describir_objeto(sala):
    assert sala.describir_objeto("habitacion") == "Una habitacion de la que no podes escapar"
    assert sala.describir_objeto("pokebola") is None
    assert sala.ejecutar_interaccion("examinar", "habitacion", "") == 2
    assert sala.agarrar_objeto("pokebola")
    assert sala.describir_objeto("pokebola") == "Una poquebola roja y blanca"


def test_agarrar_objetos(sala):
    assert not sala.agarrar_objeto("mesa")
    assert not sala.agarrar_objeto("llave")
    assert not sala.agarrar_objeto("habitacion")
    sala.ejecutar_interaccion("examinar", "habitacion")
    assert sala.agarrar_objeto("pokebola")
    assert not sala.agarrar_objeto("pokebola")
    assert sala.nombre_objetos_poseidos() == ["pokebola"]
    assert "pokebola" not in sala.nombre_objetos_conocidos()


def test_mostrar_mensaje_solo_cuenta_con_funcion(sala):
    assert sala.ejecutar_interaccion("mirar", "habitacion", "") == 0
    mensajes, mostrar = registrar()
    assert sala.ejecutar_interaccion("mirar", "habitacion", "", mostrar) == 1
    assert mensajes == [("Nada interesante", TipoAccion.MOSTRAR_MENSAJE)]


def test_accion_invalida_no_se_ejecuta(sala):
    mensajes, mostrar = registrar()
    assert sala.ejecutar_interaccion("bailar", "habitacion", "", mostrar) == 0
    assert mensajes == []


def test_objeto_principal_inexistente(sala):
    assert sala.ejecutar_interaccion("ver", "fantasma", "") == 0
    assert "llave" not in sala.nombre_objetos_conocidos()


def test_partida_completa(sala):
    mensajes, mostrar = registrar()
    assert sala.ejecutar_interaccion("abrir", "puerta", "", mostrar) == 0
    assert sala.ejecutar_interaccion("salir", "puerta-abierta", "", mostrar) == 0
    assert sala.ejecutar_interaccion("salir", "puerta", "", mostrar) == 0
    assert sala.ejecutar_interaccion("abrir", "llave", "puerta", mostrar) == 0
    assert mensajes == []

    assert sala.ejecutar_interaccion("examinar", "habitacion", "", mostrar) == 2
    assert [tipo for _, tipo in mensajes] == [TipoAccion.DESCUBRIR_OBJETO] * 2
    assert sorted(sala.nombre_objetos_conocidos()) == ["habitacion", "pokebola", "puerta"]

    mensajes.clear()
    assert sala.ejecutar_interaccion("examinar", "habitacion", "", mostrar) == 0
    assert mensajes == []

    assert sala.ejecutar_interaccion("abrir", "pokebola") == 0
    assert sala.ejecutar_interaccion("abrir", "llave", "puerta") == 0
    assert sala.ejecutar_interaccion("salir", "puerta-abierta") == 0

    assert sala.agarrar_objeto("pokebola")
    assert sala.nombre_objetos_poseidos() == ["pokebola"]

    assert sala.ejecutar_interaccion("abrir", "pokebola", "") == 2
    assert sala.nombre_objetos_poseidos() == []
    assert "pokebola" not in sala.nombre_objetos()
    assert sala.ejecutar_interaccion("examinar", "habitacion", "") == 0
    assert sala.describir_objeto("pokebola") is None

    assert sala.ejecutar_interaccion("abrir", "llave", "puerta") == 0
    assert sala.agarrar_objeto("llave")

    mensajes.clear()
    assert sala.ejecutar_interaccion("abrir", "llave", "puerta", mostrar) == 1
    assert mensajes == [("Abriste la puerta", TipoAccion.REEMPLAZAR_OBJETO)]
    mensajes.clear()
    assert sala.ejecutar_interaccion("abrir", "llave", "puerta", mostrar) == 0
    assert mensajes == []

    assert not sala.escape_exitoso()
    assert sala.ejecutar_interaccion("abrir", "puerta", "") == 0
    assert sala.describir_objeto("puerta") is None
    assert "puerta-abierta" in sala.nombre_objetos_conocidos()

    assert sala.ejecutar_interaccion("salir", "puerta-abierta", "", mostrar) == 1
    assert mensajes == [("Saliste", TipoAccion.ESCAPAR)]
    assert sala.escape_exitoso()


def test_guion_bajo_equivale_a_vacio(sala):
    assert sala.es_interaccion_valida("examinar", "habitacion", "_")
    assert sala.ejecutar_interaccion("examinar", "habitacion", "_") == 2


def test_constructor_con_objetos_en_memoria():
    objetos = [Objeto("cuarto", "Un cuarto", False), Objeto("salida", "Una salida", False)]
    interacciones = [
        Interaccion("cuarto", "mirar", "", Accion(TipoAccion.DESCUBRIR_OBJETO, "salida", "Ves una salida")),
        Interaccion("salida", "usar", "", Accion(TipoAccion.ESCAPAR, "", "Libre")),
    ]
    sala = Sala(objetos, interacciones)
    assert sala.nombre_objetos_conocidos() == ["cuarto"]
    assert sala.ejecutar_interaccion("usar", "salida") == 0
    assert sala.ejecutar_interaccion("mirar", "cuarto") == 1
    assert sala.ejecutar_interaccion("usar", "salida") == 1
    assert sala.escape_exitoso()