"""Create alimentos, comandas/comanda_itens and despesas tables

Revision ID: 20261019_create_alimentos_comandas_despesas
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_create_alimentos_comandas_despesas"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "alimentos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(100), nullable=False),
        sa.Column("quantidade", sa.Integer, nullable=False, server_default="0"),
        sa.CheckConstraint("quantidade >= 0", name="ck_alimento_quantidade_nao_negativa"),
    )
    op.create_index("ix_alimentos_nome", "alimentos", ["nome"], unique=True)

    op.create_table(
        "comandas",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("mesa", sa.Integer, nullable=True),
        sa.Column("observacao", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
    )

    # comanda_itens: itens somem junto com a comanda
    op.create_table(
        "comanda_itens",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("comanda_id", sa.Integer, sa.ForeignKey("comandas.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("alimento_id", sa.Integer, sa.ForeignKey("alimentos.id", ondelete="RESTRICT"), nullable=False, index=True),
        sa.Column("quantidade", sa.Integer, nullable=False),
        sa.CheckConstraint("quantidade > 0", name="ck_comanda_item_quantidade_positiva"),
    )

    op.create_table(
        "despesas",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("descricao", sa.String(255), nullable=False),
        sa.Column("categoria", sa.String(100), nullable=False, index=True),
        sa.Column("valor", sa.Numeric(12, 2), nullable=False),
        sa.Column("data", sa.Date, server_default=sa.text("CURRENT_DATE"), nullable=False),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint("valor >= 0", name="ck_despesa_valor_nao_negativo"),
    )


def downgrade() -> None:
    op.drop_table("despesas")
    op.drop_table("comanda_itens")
    op.drop_table("comandas")
    op.drop_index("ix_alimentos_nome", table_name="alimentos")
    op.drop_table("alimentos")
