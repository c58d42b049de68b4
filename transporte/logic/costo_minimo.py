# transporte/logic/costo_minimo.py

from transporte.utils.balanceador import balancear
from transporte.utils.entrada import leer_entrada


class TransporteProblem:
    def __init__(self, numero_filas, numero_columnas):
        self.numero_filas = numero_filas
        self.numero_columnas = numero_columnas

        self.costos = []
        self.oferta = []
        self.demanda = []

        # indicadores de origen/destino ficticio (a lo sumo uno en True)
        self.tiene_origen_ficticio = False
        self.tiene_destino_ficticio = False
        self._meta = None

    @classmethod
    def desde_entrada(cls, datos, max_dimension=10):
        """
        Construye el problema a partir de un payload (JSON o formulario).
        Los errores de validación se propagan antes de tocar el solver.
        """
        filas, columnas, costos, oferta, demanda = leer_entrada(datos, max_dimension=max_dimension)
        problema = cls(filas, columnas)
        return problema.cargar_datos(costos, oferta, demanda)

    def cargar_datos(self, costos, oferta, demanda):
        self.costos = [list(fila) for fila in costos]
        self.oferta = list(oferta)
        self.demanda = list(demanda)
        self.tiene_origen_ficticio = False
        self.tiene_destino_ficticio = False
        self._meta = None
        return self

    def balancear(self):
        # una sola vez: tras agregar el ficticio los totales ya coinciden
        if self._meta is not None:
            return self
        self.costos, self.oferta, self.demanda, self._meta = balancear(self.costos, self.oferta, self.demanda)
        self.tiene_origen_ficticio = self._meta["tiene_origen_ficticio"]
        self.tiene_destino_ficticio = self._meta["tiene_destino_ficticio"]
        return self

    def meta_balance(self):
        if self._meta is None:
            return {
                "tipo": "balanceado",
                "diferencia": 0,
                "oferta_total": sum(self.oferta),
                "demanda_total": sum(self.demanda),
                "tiene_origen_ficticio": False,
                "tiene_destino_ficticio": False,
            }
        return dict(self._meta)

    def resolver(self):
        """
        Método de costo mínimo: en cada iteración toma la celda factible
        más barata (recorrido por filas; ante empate gana la primera
        encontrada) y le asigna min(oferta restante, demanda restante).

        Devuelve dict con "asignaciones", "costo_total" e "iteraciones".
        """
        # copias de trabajo, self.oferta / self.demanda quedan intactas
        oferta_restante = self.oferta[:]
        demanda_restante = self.demanda[:]
        filas = len(oferta_restante)
        columnas = len(demanda_restante)

        asignaciones = [[0 for _ in range(columnas)] for _ in range(filas)]
        costo_total = 0
        iteraciones = []

        while True:
            costo_min = None
            fila_min = -1
            columna_min = -1

            for i in range(filas):
                if not oferta_restante[i] > 0:
                    continue
                for j in range(columnas):
                    if demanda_restante[j] > 0 and (costo_min is None or self.costos[i][j] < costo_min):
                        costo_min = self.costos[i][j]
                        fila_min = i
                        columna_min = j

            # sin celdas factibles: oferta o demanda agotada
            if fila_min == -1:
                break

            cantidad = min(oferta_restante[fila_min], demanda_restante[columna_min])
            asignaciones[fila_min][columna_min] = cantidad
            costo_total += cantidad * costo_min

            oferta_restante[fila_min] -= cantidad
            demanda_restante[columna_min] -= cantidad

            iteraciones.append({
                "iteracion": len(iteraciones) + 1,
                "fila": fila_min,
                "columna": columna_min,
                "costo": costo_min,
                "cantidad": cantidad,
                "asignaciones": [fila[:] for fila in asignaciones],
                "costo_actual": costo_total,
                "oferta_restante": oferta_restante[:],
                "demanda_restante": demanda_restante[:],
            })

        return {
            "asignaciones": asignaciones,
            "costo_total": costo_total,
            "iteraciones": iteraciones,
        }

    def es_origen_ficticio(self, i):
        return self.tiene_origen_ficticio and i == len(self.oferta) - 1

    def es_destino_ficticio(self, j):
        return self.tiene_destino_ficticio and j == len(self.demanda) - 1

    def etiqueta_origen(self, i):
        return "Origen Ficticio" if self.es_origen_ficticio(i) else f"Origen {i + 1}"

    def etiqueta_destino(self, j):
        return "Destino Ficticio" if self.es_destino_ficticio(j) else f"Destino {j + 1}"
