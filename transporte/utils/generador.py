# transporte/utils/generador.py

import random


def dimensiones_aleatorias(rng=None, max_dimension=10):
    rng = rng or random.Random()
    return rng.randint(1, max_dimension), rng.randint(1, max_dimension)


def datos_aleatorios(filas, columnas, rng=None):
    """
    Genera costos, oferta y demanda enteros entre 1 y 100 para una tabla
    de filas x columnas. Con un random.Random sembrado el resultado es
    reproducible.
    """
    rng = rng or random.Random()
    costos = []
    oferta = []
    for _ in range(filas):
        costos.append([rng.randint(1, 100) for _ in range(columnas)])
        oferta.append(rng.randint(1, 100))
    demanda = [rng.randint(1, 100) for _ in range(columnas)]

    return {
        "filas": filas,
        "columnas": columnas,
        "costos": costos,
        "oferta": oferta,
        "demanda": demanda,
    }
