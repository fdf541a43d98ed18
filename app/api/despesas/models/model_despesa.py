from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, CheckConstraint

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed, today


class DespesaModel(Base):
    """Despesa do restaurante"""
    __tablename__ = "despesas"
    __table_args__ = (
        CheckConstraint("valor >= 0", name="ck_despesa_valor_nao_negativo"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    descricao = Column(String(255), nullable=False)
    categoria = Column(String(100), nullable=False, index=True)
    valor = Column(Numeric(12, 2, asdecimal=True), nullable=False)  # sempre 2 casas decimais
    data = Column(Date, nullable=False, default=today)

    # Timestamps
    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    def __repr__(self):
        return f"<Despesa(id={self.id}, categoria='{self.categoria}', valor={self.valor})>"
