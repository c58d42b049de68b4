# transporte/utils/balanceador.py

def balancear(costos, oferta, demanda):
    """
    Iguala oferta total y demanda total agregando un origen (fila) o un
    destino (columna) ficticio con costos 0. Nunca agrega más de uno.

    Devuelve: (costos_nuevos, oferta_nueva, demanda_nueva, meta)
    meta: dict con keys:
      - tipo: "balanceado", "columna_ficticia" o "fila_ficticia"
      - diferencia: cantidad asignada al ficticio (0 si ya estaba balanceado)
      - oferta_total / demanda_total: totales antes de balancear
      - tiene_origen_ficticio / tiene_destino_ficticio
    """
    # copias: las listas recibidas no se modifican
    costos = [list(fila) for fila in costos]
    oferta = list(oferta)
    demanda = list(demanda)

    oferta_total = sum(oferta)
    demanda_total = sum(demanda)

    meta = {
        "tipo": "balanceado",
        "diferencia": 0,
        "oferta_total": oferta_total,
        "demanda_total": demanda_total,
        "tiene_origen_ficticio": False,
        "tiene_destino_ficticio": False,
    }

    if oferta_total > demanda_total:
        # destino ficticio: última columna
        diferencia = oferta_total - demanda_total
        for fila in costos:
            fila.append(0)
        demanda.append(diferencia)
        meta.update(tipo="columna_ficticia", diferencia=diferencia, tiene_destino_ficticio=True)

    elif demanda_total > oferta_total:
        # origen ficticio: última fila, tan larga como la demanda actual
        diferencia = demanda_total - oferta_total
        costos.append([0] * len(demanda))
        oferta.append(diferencia)
        meta.update(tipo="fila_ficticia", diferencia=diferencia, tiene_origen_ficticio=True)

    return costos, oferta, demanda, meta
