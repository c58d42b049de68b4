from transporte.utils.tablas import (
    construir_html_resultado,
    detalle_asignaciones,
    info_iteracion,
    tabla_asignaciones,
)


def test_detalle_con_destino_ficticio(resolver):
    problema, resultado = resolver([[2]], [50], [30])
    assert detalle_asignaciones(resultado, problema) == [
        "Origen 1 → Destino 1: 30 unidades (costo: 2 c/u, total: 60)",
        "Origen 1 → Destino Ficticio: 20 unidades (costo: 0 c/u, total: 0)",
    ]


def test_tabla_rotula_origen_ficticio(resolver):
    problema, resultado = resolver([[2]], [30], [50])
    html = tabla_asignaciones(resultado["asignaciones"], problema, "Solución Final")
    assert "Ficticio" in html
    assert ">O1<" in html
    assert ">D1<" in html
    assert "Fict<" not in html
    assert "Solución Final" in html


def test_info_iteracion(resolver):
    problema, resultado = resolver([[4, 6], [5, 3]], [20, 30], [25, 25])
    texto = info_iteracion(resultado["iteraciones"][0], problema)
    assert "Origen 2 → Destino 2" in texto
    assert "Costo parcial: 75" in texto
    assert "Costo acumulado: 75" in texto


def test_html_resultado_tiene_un_bloque_por_iteracion(resolver):
    problema, resultado = resolver([[4, 6], [5, 3]], [20, 30], [25, 25])
    html = construir_html_resultado(resultado, problema)
    assert html.count('class="iteracion-box"') == 3
    assert "Costo total: 180" in html
    assert "SOLUCIÓN FINAL" in html
