from transporte.utils.balanceador import balancear


def test_balanceado_no_cambia():
    costos, oferta, demanda, meta = balancear([[4, 6], [5, 3]], [20, 30], [25, 25])
    assert costos == [[4, 6], [5, 3]]
    assert oferta == [20, 30]
    assert demanda == [25, 25]
    assert meta["tipo"] == "balanceado"
    assert meta["diferencia"] == 0
    assert not meta["tiene_origen_ficticio"]
    assert not meta["tiene_destino_ficticio"]


def test_oferta_mayor_agrega_columna_ficticia():
    costos, oferta, demanda, meta = balancear([[2], [7]], [50, 10], [30])
    assert costos == [[2, 0], [7, 0]]
    assert demanda == [30, 30]
    assert oferta == [50, 10]
    assert meta["tipo"] == "columna_ficticia"
    assert meta["diferencia"] == 30
    assert meta["tiene_destino_ficticio"] and not meta["tiene_origen_ficticio"]


def test_demanda_mayor_agrega_fila_ficticia():
    costos, oferta, demanda, meta = balancear([[2, 3]], [30], [20, 25])
    assert costos == [[2, 3], [0, 0]]
    assert oferta == [30, 15]
    assert demanda == [20, 25]
    assert meta["tipo"] == "fila_ficticia"
    assert meta["oferta_total"] == 30
    assert meta["demanda_total"] == 45
    assert meta["tiene_origen_ficticio"] and not meta["tiene_destino_ficticio"]


def test_no_modifica_las_entradas():
    costos = [[1, 2]]
    oferta = [10]
    demanda = [3, 4]
    balancear(costos, oferta, demanda)
    assert costos == [[1, 2]]
    assert oferta == [10]
    assert demanda == [3, 4]


def test_totales_iguales_tras_balancear():
    casos = [
        ([[1, 2, 3], [4, 5, 6]], [10, 5], [1, 2, 3]),
        ([[1, 2, 3], [4, 5, 6]], [1, 2], [10, 20, 30]),
        ([[9]], [0], [0]),
    ]
    for costos, oferta, demanda in casos:
        _, oferta_b, demanda_b, meta = balancear(costos, oferta, demanda)
        assert sum(oferta_b) == sum(demanda_b)
        assert not (meta["tiene_origen_ficticio"] and meta["tiene_destino_ficticio"])
