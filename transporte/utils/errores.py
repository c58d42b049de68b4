# transporte/utils/errores.py


class TransporteError(ValueError):
    """Error de validación de los datos de entrada del problema."""

    def __init__(self, mensaje):
        self.mensaje = mensaje
        super().__init__(mensaje)


class DatosIncompletosError(TransporteError):
    def __init__(self, mensaje="Por favor completa todos los campos de la tabla antes de calcular."):
        super().__init__(mensaje)


class DimensionInvalidaError(TransporteError):
    def __init__(self, max_dimension=10):
        self.max_dimension = max_dimension
        super().__init__(f"Por favor ingresa números válidos entre 1 y {max_dimension}")


class CostoInvalidoError(TransporteError):
    # fila y columna en base 1, como se muestran al usuario
    def __init__(self, fila, columna):
        self.fila = fila
        self.columna = columna
        super().__init__(
            f"Costo inválido en la celda ({fila}, {columna}). Por favor ingresa un número válido."
        )


class OfertaInvalidaError(TransporteError):
    def __init__(self, indice):
        self.indice = indice
        super().__init__(f"Oferta inválida en la fila {indice}. Por favor ingresa un número válido.")


class DemandaInvalidaError(TransporteError):
    def __init__(self, indice):
        self.indice = indice
        super().__init__(f"Demanda inválida en la columna {indice}. Por favor ingresa un número válido.")
