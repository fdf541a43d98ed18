from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class ComandaModel(Base):
    """Comanda (pedido) de um cliente/mesa"""
    __tablename__ = "comandas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    mesa = Column(Integer, nullable=True)
    observacao = Column(String(255), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    # Itens pertencem à comanda: substituir a lista remove os antigos
    itens = relationship(
        "ComandaItemModel",
        back_populates="comanda",
        cascade="all, delete-orphan",
        order_by="ComandaItemModel.id",
    )

    @property
    def quantidade_total(self) -> int:
        return sum(item.quantidade for item in self.itens)

    def __repr__(self):
        return f"<Comanda(id={self.id}, mesa={self.mesa}, itens={len(self.itens)})>"


class ComandaItemModel(Base):
    __tablename__ = "comanda_itens"
    __table_args__ = (
        CheckConstraint("quantidade > 0", name="ck_comanda_item_quantidade_positiva"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    comanda_id = Column(Integer, ForeignKey("comandas.id", ondelete="CASCADE"), nullable=False, index=True)
    alimento_id = Column(Integer, ForeignKey("alimentos.id", ondelete="RESTRICT"), nullable=False, index=True)
    quantidade = Column(Integer, nullable=False)

    comanda = relationship("ComandaModel", back_populates="itens")
    alimento = relationship("AlimentoModel")

    @property
    def alimento_nome(self):
        return self.alimento.nome if self.alimento else None
