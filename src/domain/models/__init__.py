"""
Modelos de domínio do importador de repasses.

Dois grupos:
- Modelos de extração (mutáveis, vivem só durante um parse):
  RegistroExtraido, DescontoExtraido, ResumoCategorias, PoloExtraido,
  DadosExtraidos.
- Modelos canônicos (imutáveis, frozen=True): RegistroFinanceiro,
  ResultadoImportacao, LogImportacao, Discrepancia.

Uso:
    from src.domain.models import RegistroFinanceiro, ResultadoImportacao
"""

from src.domain.models.discrepancia import Discrepancia
from src.domain.models.log_importacao import LogImportacao
from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.models.registro_extraido import DescontoExtraido, RegistroExtraido
from src.domain.models.registro_financeiro import RegistroFinanceiro
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.models.resumo_categorias import ItemResumo, ResumoCategorias

__all__ = [
    "DadosExtraidos",
    "DescontoExtraido",
    "Discrepancia",
    "ItemResumo",
    "LogImportacao",
    "PoloExtraido",
    "RegistroExtraido",
    "RegistroFinanceiro",
    "ResultadoImportacao",
    "ResumoCategorias",
]
