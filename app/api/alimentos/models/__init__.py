from .model_alimento import AlimentoModel

__all__ = [
    "AlimentoModel",
]
