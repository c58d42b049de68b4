# transporte/utils/tablas.py

import html

_TH = 'style="background:#f0f0f0;border:1px solid #000;padding:6px;text-align:center;"'
_TH_FILA = 'style="background:#f7f7f7;border:1px solid #000;padding:6px;text-align:center;"'
_TD = 'style="border:1px solid #000;padding:6px;text-align:center;"'
_TD_ASIGNADA = 'style="border:1px solid #000;padding:6px;text-align:center;background:#e8f5e9;font-weight:700;"'
_TD_FICTICIA = 'style="border:1px solid #000;padding:6px;text-align:center;background:#fff2f2;"'


def _esc(valor):
    return html.escape(str(valor))


def tabla_asignaciones(asignaciones, problema, titulo):
    """
    Tabla O/D con las cantidades asignadas, la oferta por fila y la demanda
    por columna. Las celdas sin asignación quedan vacías y el origen/destino
    ficticio se rotula como tal.
    """
    parts = []
    parts.append(f'<p class="titulo-tabla"><strong>{_esc(titulo)}</strong></p>')
    parts.append('<table class="tabla-asignaciones" style="border-collapse:collapse;width:100%;margin-bottom:8px;">')

    parts.append('<thead><tr>')
    parts.append(f'<th {_TH}>O/D</th>')
    for j in range(len(problema.demanda)):
        if problema.es_destino_ficticio(j):
            parts.append(f'<th {_TH} class="celda-ficticia">Fict</th>')
        else:
            parts.append(f'<th {_TH}>D{j + 1}</th>')
    parts.append(f'<th {_TH}>Oferta</th>')
    parts.append('</tr></thead>')

    parts.append('<tbody>')
    for i, fila in enumerate(asignaciones):
        parts.append('<tr>')
        if problema.es_origen_ficticio(i):
            parts.append(f'<th {_TH_FILA} class="celda-ficticia">Ficticio</th>')
        else:
            parts.append(f'<th {_TH_FILA}>O{i + 1}</th>')
        for j, cantidad in enumerate(fila):
            if cantidad > 0:
                parts.append(f'<td {_TD_ASIGNADA} class="celda-asignacion">{_esc(cantidad)}</td>')
            elif problema.es_origen_ficticio(i) or problema.es_destino_ficticio(j):
                parts.append(f'<td {_TD_FICTICIA}></td>')
            else:
                parts.append(f'<td {_TD}></td>')
        parts.append(f'<td {_TD}><strong>{_esc(problema.oferta[i])}</strong></td>')
        parts.append('</tr>')

    # fila de demanda
    parts.append('<tr>')
    parts.append(f'<th {_TH}>Demanda</th>')
    for cantidad in problema.demanda:
        parts.append(f'<td {_TD}><strong>{_esc(cantidad)}</strong></td>')
    parts.append(f'<td {_TD}></td>')
    parts.append('</tr>')
    parts.append('</tbody>')

    parts.append('</table>')
    return ''.join(parts)


def info_iteracion(iteracion, problema):
    origen = problema.etiqueta_origen(iteracion["fila"])
    destino = problema.etiqueta_destino(iteracion["columna"])
    parcial = iteracion["cantidad"] * iteracion["costo"]
    return (
        f'<p class="info-text"><strong>{_esc(origen)} → {_esc(destino)}</strong>'
        f' | Costo unitario: {_esc(iteracion["costo"])}'
        f' | Cantidad asignada: {_esc(iteracion["cantidad"])}'
        f' | Costo parcial: {_esc(parcial)}'
        f' | Costo acumulado: {_esc(iteracion["costo_actual"])}</p>'
    )


def detalle_asignaciones(resultado, problema):
    # una línea por celda con asignación positiva
    lineas = []
    for i, fila in enumerate(resultado["asignaciones"]):
        for j, cantidad in enumerate(fila):
            if cantidad > 0:
                costo = problema.costos[i][j]
                lineas.append(
                    f"{problema.etiqueta_origen(i)} → {problema.etiqueta_destino(j)}: "
                    f"{cantidad} unidades (costo: {costo} c/u, total: {cantidad * costo})"
                )
    return lineas


def construir_html_resultado(resultado, problema):
    html_parts = ['<div class="resultado-contenedor">']

    for iteracion in resultado["iteraciones"]:
        numero = iteracion["iteracion"]
        html_parts.append(f'<div class="iteracion-box" id="iteracion-{numero}" style="margin-bottom:18px;">')
        html_parts.append(f'<h3 class="iteracion-title">Iteración {numero}</h3>')
        html_parts.append(info_iteracion(iteracion, problema))
        html_parts.append(tabla_asignaciones(iteracion["asignaciones"], problema, f"Asignaciones - Iteración {numero}"))
        html_parts.append('</div>')

    html_parts.append('<div class="final-box">')
    html_parts.append('<h2 class="titulo-final">SOLUCIÓN FINAL</h2>')
    html_parts.append(f'<p class="costo-final"><strong>Costo total: {_esc(resultado["costo_total"])}</strong></p>')
    html_parts.append(tabla_asignaciones(resultado["asignaciones"], problema, "Solución Final"))
    detalle = "<br>".join(_esc(linea) for linea in detalle_asignaciones(resultado, problema))
    html_parts.append(f'<p class="detalles-text"><strong>Detalle de asignaciones:</strong><br>{detalle}</p>')
    html_parts.append('</div>')

    html_parts.append('</div>')
    return ''.join(html_parts)
