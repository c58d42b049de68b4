# transporte/utils/entrada.py

import math

from transporte.utils.errores import (
    CostoInvalidoError,
    DatosIncompletosError,
    DemandaInvalidaError,
    DimensionInvalidaError,
    OfertaInvalidaError,
)


def _vacio(valor):
    return valor is None or (isinstance(valor, str) and valor.strip() == "")


def _a_numero(valor):
    # devuelve None si el valor no es un número finito
    if isinstance(valor, bool):
        return None
    if isinstance(valor, (int, float)):
        numero = valor
    elif isinstance(valor, str):
        texto = valor.strip()
        try:
            numero = int(texto)
        except ValueError:
            try:
                numero = float(texto)
            except ValueError:
                return None
    else:
        return None
    if isinstance(numero, float) and not math.isfinite(numero):
        return None
    return numero


def _dimension(valor, max_dimension):
    if isinstance(valor, bool):
        raise DimensionInvalidaError(max_dimension)
    try:
        entero = int(str(valor).strip()) if isinstance(valor, str) else valor
    except ValueError:
        raise DimensionInvalidaError(max_dimension)
    if not isinstance(entero, int) or entero < 1 or entero > max_dimension:
        raise DimensionInvalidaError(max_dimension)
    return entero


def _campos_en_listas(datos, max_dimension):
    costos = datos.get("costos")
    oferta = datos.get("oferta")
    demanda = datos.get("demanda")

    if not isinstance(costos, list) or not isinstance(oferta, list) or not isinstance(demanda, list):
        raise DatosIncompletosError()
    if any(not isinstance(fila, list) for fila in costos):
        raise DatosIncompletosError()

    filas = len(oferta) if _vacio(datos.get("filas")) else datos.get("filas")
    columnas = len(demanda) if _vacio(datos.get("columnas")) else datos.get("columnas")
    filas = _dimension(filas, max_dimension)
    columnas = _dimension(columnas, max_dimension)

    # todas las celdas deben estar presentes antes de interpretar valores
    if len(oferta) != filas or len(demanda) != columnas or len(costos) != filas:
        raise DatosIncompletosError()
    if any(len(fila) != columnas for fila in costos):
        raise DatosIncompletosError()

    celdas = {}
    for i in range(filas):
        for j in range(columnas):
            celdas[("costo", i, j)] = costos[i][j]
        celdas[("oferta", i)] = oferta[i]
    for j in range(columnas):
        celdas[("demanda", j)] = demanda[j]
    return filas, columnas, celdas


def _campos_de_formulario(datos, max_dimension):
    # nombres de los inputs de la tabla: costo-i-j, oferta-i, demanda-j
    if _vacio(datos.get("filas")) or _vacio(datos.get("columnas")):
        raise DatosIncompletosError("Por favor ingresa el número de filas y columnas")
    filas = _dimension(datos.get("filas"), max_dimension)
    columnas = _dimension(datos.get("columnas"), max_dimension)

    celdas = {}
    for i in range(filas):
        for j in range(columnas):
            celdas[("costo", i, j)] = datos.get(f"costo-{i}-{j}")
        celdas[("oferta", i)] = datos.get(f"oferta-{i}")
    for j in range(columnas):
        celdas[("demanda", j)] = datos.get(f"demanda-{j}")
    return filas, columnas, celdas


def leer_entrada(datos, max_dimension=10):
    """
    Valida y convierte el payload recibido en los datos del problema.

    Acepta listas ("costos", "oferta", "demanda", y opcionalmente "filas" y
    "columnas") o los campos planos del formulario. Primero verifica que no
    falte ningún campo y después interpreta cada valor en el mismo orden que
    la tabla: costos de la fila i seguidos de su oferta, y al final la demanda.

    Devuelve: (filas, columnas, costos, oferta, demanda)
    Lanza una subclase de TransporteError ante datos inválidos.
    """
    # un JSON válido que no es objeto (lista, texto, número) no trae campos
    if not datos or not hasattr(datos, "get"):
        raise DatosIncompletosError()

    if isinstance(datos.get("costos"), list):
        filas, columnas, celdas = _campos_en_listas(datos, max_dimension)
    else:
        filas, columnas, celdas = _campos_de_formulario(datos, max_dimension)

    if any(_vacio(valor) for valor in celdas.values()):
        raise DatosIncompletosError()

    costos = []
    oferta = []
    for i in range(filas):
        fila_costos = []
        for j in range(columnas):
            valor = _a_numero(celdas[("costo", i, j)])
            if valor is None:
                raise CostoInvalidoError(i + 1, j + 1)
            fila_costos.append(valor)
        costos.append(fila_costos)

        valor = _a_numero(celdas[("oferta", i)])
        if valor is None:
            raise OfertaInvalidaError(i + 1)
        oferta.append(valor)

    demanda = []
    for j in range(columnas):
        valor = _a_numero(celdas[("demanda", j)])
        if valor is None:
            raise DemandaInvalidaError(j + 1)
        demanda.append(valor)

    return filas, columnas, costos, oferta, demanda
