# transporte/controllers/costo_minimo_controller.py

from flask import Blueprint, current_app, request, jsonify
from transporte.logic.costo_minimo import TransporteProblem
from transporte.utils.errores import TransporteError
from transporte.utils.generador import datos_aleatorios, dimensiones_aleatorias
from transporte.utils.tablas import construir_html_resultado, detalle_asignaciones
import random
import uuid
import logging
import traceback

costo_minimo_bp = Blueprint("costo_minimo", __name__)

_VERDADEROS = ("1", "true", "True", "si", "sí")


def _error_response(mensaje, status=400, detalle=None):
    codigo = uuid.uuid4().hex[:8]
    payload = {"error": mensaje, "code": codigo}
    if detalle is None:
        logging.info(f"Validación {codigo}: {mensaje}")
    else:
        # el traceback completo queda en el log; al cliente solo en modo debug
        logging.error(f"Error {codigo}: {detalle}")
        if current_app.debug:
            payload["detalle"] = str(detalle)
    return jsonify(payload), status


def _leer_payload():
    if request.is_json:
        return request.get_json(silent=True)
    return request.form


@costo_minimo_bp.route("/resolver/costo-minimo", methods=["POST"])
def resolver_costo_minimo():
    try:
        data = _leer_payload()
        if not data:
            return _error_response("No se recibió ningún dato.", 400)

        # un problema nuevo por solicitud
        problema = TransporteProblem.desde_entrada(data, max_dimension=current_app.config["MAX_DIMENSION"])
        problema.balancear()
        resultado = problema.resolver()

        logging.debug(
            f"Costo mínimo {problema.numero_filas}x{problema.numero_columnas}: "
            f"{len(resultado['iteraciones'])} iteraciones, costo total {resultado['costo_total']}"
        )

        respuesta = {
            "status": "ok",
            "asignaciones": resultado["asignaciones"],
            "costo_total": resultado["costo_total"],
            "iteraciones": resultado["iteraciones"],
            "meta_balance": problema.meta_balance(),
            "costos": problema.costos,
            "oferta": problema.oferta,
            "demanda": problema.demanda,
            "etiquetas_origen": [problema.etiqueta_origen(i) for i in range(len(problema.oferta))],
            "etiquetas_destino": [problema.etiqueta_destino(j) for j in range(len(problema.demanda))],
            "detalle": detalle_asignaciones(resultado, problema),
        }
        if request.args.get("html", "") in _VERDADEROS:
            respuesta["html"] = construir_html_resultado(resultado, problema)

        return jsonify(respuesta)
    except TransporteError as e:
        return _error_response(e.mensaje, 400)
    except Exception:
        tb = traceback.format_exc()
        return _error_response("Error interno al resolver Costo Mínimo", 500, detalle=tb)


@costo_minimo_bp.route("/costo-minimo/aleatorio", methods=["GET"])
def datos_aleatorios_costo_minimo():
    max_dimension = current_app.config["MAX_DIMENSION"]
    try:
        semilla = request.args.get("semilla", type=int)
        rng = random.Random(semilla)

        filas = request.args.get("filas", type=int)
        columnas = request.args.get("columnas", type=int)
        # solo se sortea la dimensión que no vino en la consulta
        filas_azar, columnas_azar = dimensiones_aleatorias(rng, max_dimension)
        filas = filas_azar if filas is None else filas
        columnas = columnas_azar if columnas is None else columnas

        if not (1 <= filas <= max_dimension and 1 <= columnas <= max_dimension):
            return _error_response(f"Por favor ingresa números válidos entre 1 y {max_dimension}", 400)

        return jsonify(datos_aleatorios(filas, columnas, rng))
    except Exception:
        tb = traceback.format_exc()
        return _error_response("Error interno al generar datos aleatorios", 500, detalle=tb)
