from datetime import datetime
from zoneinfo import ZoneInfo

from app.config.settings import DB_TIMEZONE

# Maior valor aceito por colunas Integer (int4 no Postgres)
INT4_MAX = 2_147_483_647


def now_trimmed():
    """Retorna datetime atual no timezone configurado (padrão São Paulo), sem microsegundos"""
    return datetime.now(ZoneInfo(DB_TIMEZONE)).replace(microsecond=0)


def today():
    """Data atual no timezone configurado"""
    return now_trimmed().date()
