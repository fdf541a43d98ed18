from sqlalchemy import Column, Integer, String, CheckConstraint
from app.database.db_connection import Base


class AlimentoModel(Base):
    """Alimento/ingrediente em estoque"""
    __tablename__ = "alimentos"
    __table_args__ = (
        CheckConstraint("quantidade >= 0", name="ck_alimento_quantidade_nao_negativa"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Identificador de negócio usado nas rotas; único entre os registros
    nome = Column(String(100), nullable=False, unique=True, index=True)
    quantidade = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Alimento(id={self.id}, nome='{self.nome}', quantidade={self.quantidade})>"
