from .model_comanda import ComandaModel, ComandaItemModel

__all__ = [
    "ComandaModel",
    "ComandaItemModel",
]
