from .model_despesa import DespesaModel

__all__ = [
    "DespesaModel",
]
